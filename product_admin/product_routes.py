# product_admin/product_routes.py
# =============================
# Product REST proxy routes
# =============================

import re
import logging
from typing import Any

from fastapi import APIRouter, Body

from product_admin.config import DEFAULT_PAGE, DEFAULT_PER_PAGE
from product_admin.woocommerce.woocommerce_api import get_wc_client
from product_admin.woocommerce.product_payloads import (
    PayloadError,
    build_create_payload,
    build_update_payload,
)
from product_admin.utils.responses import (
    ok,
    fail,
    log_upstream_error,
    upstream_failure,
)

logger = logging.getLogger("uvicorn.error")
products_router = APIRouter()

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(value: str, default: str) -> int:
    """Lenient int parse: leading digits win, garbage falls back to default."""
    m = _LEADING_INT.match(value or "")
    return int(m.group(1)) if m else int(default)


# -----------------------------
# ✅ List / Create
# -----------------------------
@products_router.get("")
async def list_products(page: str = DEFAULT_PAGE, per_page: str = DEFAULT_PER_PAGE):
    try:
        wc = get_wc_client()
        r = await wc.get("products", {
            "page": _parse_int(page, DEFAULT_PAGE),
            "per_page": _parse_int(per_page, DEFAULT_PER_PAGE),
        })
        return ok(
            r.json(),
            total=r.headers.get("x-wp-total"),
            totalPages=r.headers.get("x-wp-totalpages"),
        )
    except Exception as e:
        log_upstream_error("Error fetching products", e)
        return fail(str(e) or "Failed to fetch products", 500)


@products_router.post("")
async def create_product(payload: Any = Body(default=None)):
    try:
        data = build_create_payload(payload)
    except PayloadError as e:
        logger.warning("Rejected product payload: %s", e)
        return fail(str(e), 400)

    try:
        wc = get_wc_client()
        r = await wc.post("products", data)
        return ok(r.json())
    except Exception as e:
        log_upstream_error("Error creating product", e)
        return fail(str(e) or "Failed to create product", 500)


# -----------------------------
# ✅ Get / Update / Delete by id
# -----------------------------
@products_router.get("/{product_id}")
async def get_product(product_id: int):
    try:
        wc = get_wc_client()
        r = await wc.get(f"products/{product_id}")
        return ok(r.json())
    except Exception as e:
        return upstream_failure("Error fetching product", e, "Failed to fetch product")


@products_router.put("/{product_id}")
async def update_product(product_id: int, payload: Any = Body(default=None)):
    try:
        data = build_update_payload(payload)
    except PayloadError as e:
        logger.warning("Rejected product payload: %s", e)
        return fail(str(e), 400)

    try:
        wc = get_wc_client()

        # existence check before touching anything
        try:
            await wc.get(f"products/{product_id}")
        except Exception as check_err:
            log_upstream_error("Product check error", check_err)
            return fail(f"Product with ID {product_id} not found. {check_err}", 404)

        r = await wc.put(f"products/{product_id}", data)
        return ok(r.json())
    except Exception as e:
        return upstream_failure("Error updating product", e, "Failed to update product")


@products_router.delete("/{product_id}")
async def delete_product(product_id: int):
    try:
        wc = get_wc_client()
        # force=true skips the trash
        r = await wc.delete(f"products/{product_id}", {"force": True})
        return ok(r.json())
    except Exception as e:
        return upstream_failure("Error deleting product", e, "Failed to delete product")
