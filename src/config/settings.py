# src/config/settings.py

"""Central configuration for the catalog_admin client."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the catalog_admin client."""

    # --- Remote catalog API ---
    API_BASE_URL: str = os.getenv(
        "CATALOG_API_URL", "https://dummyjson.com"
    ).rstrip("/")
    REQUEST_TIMEOUT: int = int(
        os.getenv("CATALOG_REQUEST_TIMEOUT", "15")
    )                                   # Seconds before a request times out
    TOKEN_EXPIRES_MINS: int = 30        # Requested access token lifetime

    # --- Listing ---
    PAGE_SIZE: int = 10                 # Products per listing page
    FLASH_DURATION: float = 3.0         # Seconds a success banner stays up

    # --- HTTP client ---
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": "application/json",
        "Content-Type": "application/json",
        "Accept-Language": "en-US,en;q=0.9",
    }

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    STATE_PATH: Path = Path(
        os.getenv(
            "CATALOG_STATE_PATH",
            str(BASE_DIR / "state" / "session.json"),
        )
    )
    LOGS_DIR: Path = Path(
        os.getenv("CATALOG_LOGS_DIR", str(BASE_DIR / "logs"))
    )

    # --- Logging ---
    CONSOLE_LOG_LEVEL: str = os.getenv(
        "CATALOG_LOG_LEVEL", "WARNING"
    ).upper()                           # stderr threshold; the run log keeps DEBUG

    # --- Local storage keys ---
    TOKEN_KEY: str = "token"
    USER_KEY: str = "user"

    # --- Known product categories (form select options) ---
    CATEGORIES: list[str] = [
        "beauty",
        "fragrances",
        "furniture",
        "groceries",
        "home-decoration",
        "kitchen-accessories",
        "laptops",
        "mens-shirts",
        "mens-shoes",
        "mens-watches",
        "mobile-accessories",
        "motorcycle",
        "skin-care",
        "smartphones",
        "sports-accessories",
        "sunglasses",
        "tablets",
        "tops",
        "vehicle",
        "womens-bags",
        "womens-dresses",
        "womens-jewellery",
        "womens-shoes",
        "womens-watches",
    ]

    # --- Health probes (registry of read-only endpoints) ---
    HEALTH_SLOW_MS: float = 5000.0
    HEALTH_ENDPOINTS: list[dict[str, str]] = [
        {
            "id": "products",
            "label": "Product listing",
            "path": "/products?limit=1",
        },
        {
            "id": "categories",
            "label": "Categories",
            "path": "/products/categories",
        },
        {
            "id": "search",
            "label": "Search",
            "path": "/products/search?q=phone&limit=1",
        },
    ]
