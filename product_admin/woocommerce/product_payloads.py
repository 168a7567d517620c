# product_admin/woocommerce/product_payloads.py
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

CREATE_REQUIRED_MSG = "Name and regular_price are required"
UPDATE_REQUIRED_MSG = "regular_price or images is required"


class PayloadError(ValueError):
    """Inbound body failed validation (reported as 400)."""


# -----------------------------
# Field helpers
# -----------------------------
def _is_zero(value: Any) -> bool:
    try:
        return Decimal(str(value).strip()) == 0
    except (InvalidOperation, ValueError):
        return False


def _price(body: dict, allow_zero: bool = False) -> Optional[Any]:
    """Return regular_price if supplied (and non-zero unless allow_zero)."""
    price = body.get("regular_price")
    if price is None or isinstance(price, bool) or not str(price).strip():
        return None
    if not allow_zero and _is_zero(price):
        return None
    return price


def _images(body: dict) -> Optional[List[Dict[str, Any]]]:
    images = body.get("images")
    if images is None:
        return None
    if not isinstance(images, list):
        raise PayloadError("images must be a list")
    return images


def _require_object(body: Any) -> dict:
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise PayloadError("Request body must be a JSON object")
    return body


# -----------------------------
# Payload builders
# -----------------------------
def build_create_payload(body: Any) -> dict:
    """
    Build the Woo create payload. Type and status are fixed, whatever
    the caller sent.
    """
    body = _require_object(body)
    name = body.get("name")
    price = _price(body)
    if not name or not str(name).strip() or price is None:
        raise PayloadError(CREATE_REQUIRED_MSG)

    payload = {
        "name": name,
        "type": "simple",
        "regular_price": price,
        "status": "publish",
    }
    images = _images(body)
    if images:
        payload["images"] = images
    return payload


def build_update_payload(body: Any) -> dict:
    """
    Partial update: only the fields the caller supplied.
    A zero price is a real price here and is forwarded.
    An empty images list is forwarded (it clears the gallery).
    """
    body = _require_object(body)
    price = _price(body, allow_zero=True)
    images = _images(body)
    if price is None and images is None:
        raise PayloadError(UPDATE_REQUIRED_MSG)

    payload: Dict[str, Any] = {}
    if price is not None:
        payload["regular_price"] = price
    if images is not None:
        payload["images"] = images
    return payload
