# =============================
# Global Config
# =============================

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent
TEMPLATE_DIR = BASE_DIR / "templates"
STATIC_DIR = BASE_DIR / "static"

# Woo REST API namespace the client is bound to
WC_API_VERSION = "wc/v3"
WC_TIMEOUT = float(os.getenv("WC_TIMEOUT", "120"))

# Listing defaults (query strings, parsed per request)
DEFAULT_PAGE = "1"
DEFAULT_PER_PAGE = "10"
