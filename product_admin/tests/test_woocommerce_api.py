import asyncio
import base64
import json

import httpx
import pytest
from httpx import HTTPStatusError

from product_admin.woocommerce.woocommerce_api import (
    WooCommerceClient,
    WooConfigError,
    get_wc_client,
)

CREDS = {
    "WC_BASE_URL": "https://shop.test/",
    "WC_API_KEY": "ck_test",
    "WC_API_SECRET": "cs_test",
}


def _client(handler):
    return WooCommerceClient(
        "https://shop.test", "ck_test", "cs_test",
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.parametrize("missing", sorted(CREDS))
def test_factory_fails_fast_on_missing_config(monkeypatch, missing):
    for k, v in CREDS.items():
        monkeypatch.setenv(k, v)
    monkeypatch.delenv(missing)
    with pytest.raises(WooConfigError):
        get_wc_client()


def test_factory_binds_to_v3(monkeypatch):
    for k, v in CREDS.items():
        monkeypatch.setenv(k, v)
    wc = get_wc_client()
    assert wc.version == "wc/v3"
    assert wc.api_root == "https://shop.test/wp-json/wc/v3"
    assert wc.url("/products/5") == "https://shop.test/wp-json/wc/v3/products/5"


def test_requests_use_basic_auth_and_return_response():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["authorization"]
        return httpx.Response(200, json=[{"id": 1}], headers={"X-WP-Total": "1"})

    r = asyncio.run(_client(handler).get("products", {"page": 1, "per_page": 10}))
    assert r.json() == [{"id": 1}]
    assert r.headers["x-wp-total"] == "1"
    assert seen["url"] == "https://shop.test/wp-json/wc/v3/products?page=1&per_page=10"
    expected = base64.b64encode(b"ck_test:cs_test").decode()
    assert seen["auth"] == f"Basic {expected}"


def test_put_sends_json_body():
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["body"] = request.content
        return httpx.Response(200, json={"id": 3})

    asyncio.run(_client(handler).put("products/3", {"regular_price": "1.50"}))
    assert seen["method"] == "PUT"
    assert json.loads(seen["body"]) == {"regular_price": "1.50"}


def test_error_status_raises_with_body_attached():
    body = {"code": "woocommerce_rest_product_invalid_id", "message": "Invalid ID."}

    def handler(request):
        return httpx.Response(404, json=body)

    with pytest.raises(HTTPStatusError) as excinfo:
        asyncio.run(_client(handler).delete("products/9", {"force": True}))

    exc = excinfo.value
    assert exc.response.status_code == 404
    assert exc.response.json() == body
    assert "Invalid ID." in str(exc)
    assert exc.request.url.params["force"] == "true"
