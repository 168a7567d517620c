# product_admin/utils/responses.py
# =============================
# JSON envelope + upstream error unwrapping
# =============================

import logging
from typing import Any, Optional, Tuple

from fastapi.responses import JSONResponse
from httpx import HTTPStatusError

logger = logging.getLogger("uvicorn.error")


def ok(data: Any, **extra) -> JSONResponse:
    return JSONResponse({"success": True, "data": data, **extra})


def fail(error: str, status_code: int = 500, details: Any = None) -> JSONResponse:
    body = {"success": False, "error": error}
    if details is not None:
        body["details"] = details
    return JSONResponse(body, status_code=status_code)


def _response_data(exc: Exception) -> Any:
    if not isinstance(exc, HTTPStatusError):
        return None
    try:
        return exc.response.json()
    except Exception:
        return exc.response.text or None


def log_upstream_error(context: str, exc: Exception) -> None:
    """Log the exception itself, then a message/response/status breakdown."""
    logger.error("%s: %r", context, exc)
    response = exc.response if isinstance(exc, HTTPStatusError) else None
    logger.error(
        "Error details: %s",
        {
            "message": str(exc),
            "response": _response_data(exc),
            "status": response.status_code if response is not None else None,
            "status_text": response.reason_phrase if response is not None else None,
        },
    )


def unwrap_upstream_error(exc: Exception, default: str) -> Tuple[str, int, Optional[Any]]:
    """
    Pick the most specific message and status for an upstream failure:
      message: body.message -> body.error -> exception text -> default
      status:  upstream HTTP status -> 500
    Returns (message, status_code, details).
    """
    data = _response_data(exc)
    message = None
    if isinstance(data, dict):
        message = data.get("message") or data.get("error")
    message = message or str(exc) or default

    status_code = 500
    if isinstance(exc, HTTPStatusError) and exc.response.status_code:
        status_code = exc.response.status_code
    return message, status_code, data


def upstream_failure(context: str, exc: Exception, default: str) -> JSONResponse:
    log_upstream_error(context, exc)
    message, status_code, details = unwrap_upstream_error(exc, default)
    return fail(message, status_code, details)
