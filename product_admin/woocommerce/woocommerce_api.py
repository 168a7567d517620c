# product_admin/woocommerce/woocommerce_api.py
# =============================
# WooCommerce REST API Client (ASYNC)
# =============================

import os
import logging
from typing import Any, Dict, Optional

import httpx
from httpx import HTTPStatusError

from product_admin.config import WC_API_VERSION, WC_TIMEOUT

logger = logging.getLogger(__name__)


class WooConfigError(RuntimeError):
    """Raised when the Woo credentials are not configured."""


def _raise_with_body(exc: HTTPStatusError):
    try:
        body = exc.response.json()
    except Exception:
        body = exc.response.text
    msg = f"{exc} :: {body}"
    raise HTTPStatusError(msg, request=exc.request, response=exc.response) from exc


class WooCommerceClient:
    """
    Thin async wrapper around the Woo REST API.
    Every call opens its own httpx client and returns the raw response,
    so callers can read both the JSON body and the pagination headers.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        api_secret: str,
        version: str = WC_API_VERSION,
        timeout: float = WC_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_root = f"{base_url.rstrip('/')}/wp-json/{version}"
        self.version = version
        self._auth = (api_key, api_secret)
        self._timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._timeout, auth=self._auth, transport=self._transport
        )

    def url(self, path: str) -> str:
        return f"{self.api_root}/{path.lstrip('/')}"

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[dict] = None,
    ) -> httpx.Response:
        async with self._client() as c:
            r = await c.request(method, self.url(path), params=params, json=data)
            try:
                r.raise_for_status()
            except HTTPStatusError as e:
                _raise_with_body(e)
            return r

    async def get(self, path: str, params: Optional[dict] = None) -> httpx.Response:
        return await self._request("GET", path, params=params or {})

    async def post(self, path: str, data: dict) -> httpx.Response:
        return await self._request("POST", path, data=data)

    async def put(self, path: str, data: dict) -> httpx.Response:
        return await self._request("PUT", path, data=data)

    async def delete(self, path: str, params: Optional[dict] = None) -> httpx.Response:
        return await self._request("DELETE", path, params=params or {})


def get_wc_client() -> WooCommerceClient:
    """
    Build a client from WC_BASE_URL / WC_API_KEY / WC_API_SECRET.
    Read on every call so a missing value fails the current request only.
    """
    base_url = os.getenv("WC_BASE_URL")
    api_key = os.getenv("WC_API_KEY")
    api_secret = os.getenv("WC_API_SECRET")

    if not all([base_url, api_key, api_secret]):
        raise WooConfigError(
            "Missing WooCommerce API credentials in .env "
            "(WC_BASE_URL / WC_API_KEY / WC_API_SECRET)"
        )

    return WooCommerceClient(base_url, api_key, api_secret)
