# =============================
# ✅ Import and Load .env at startup
# =============================
import os
from dotenv import load_dotenv
load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), ".env"))

import logging
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles

from product_admin.config import STATIC_DIR
from product_admin.admin_ui import ui_router
from product_admin.product_routes import products_router
from product_admin.utils.responses import fail

logger = logging.getLogger("uvicorn.error")

# =============================
# ✅ FastAPI App Initialization
# =============================
app = FastAPI(title="Mini Product Manager")

# ---- Static files (served from product_admin/static) ----
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

app.include_router(ui_router)
app.include_router(products_router, prefix="/api/products")


# ======================================
# ✅ Malformed path / JSON → 400 envelope
# ======================================
@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = jsonable_encoder(exc.errors())
    message = "; ".join(
        f"{'.'.join(str(p) for p in e.get('loc', ()))}: {e.get('msg')}" for e in errors
    ) or "Invalid request"
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, message)
    return fail(message, 400, details=errors)


@app.get("/health")
def health():
    return {"status": "ok"}
