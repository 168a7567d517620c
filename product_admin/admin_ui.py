# =============================
# Admin UI for Product Management
# Serves the single-page product table
# =============================

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from product_admin.config import TEMPLATE_DIR, DEFAULT_PER_PAGE

ui_router = APIRouter()
templates = Jinja2Templates(directory=str(TEMPLATE_DIR))


# -----------------------------
# ✅ Product Manager Page
# -----------------------------
@ui_router.get("/", response_class=HTMLResponse)
async def products_page(request: Request):
    return templates.TemplateResponse(
        request,
        "products.html",
        {
            "api_base": "/api/products",
            "per_page": int(DEFAULT_PER_PAGE),
        },
    )
