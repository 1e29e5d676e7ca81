# src/config/settings.py

"""Central configuration for the bazaar marketplace."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the bazaar marketplace."""

    # --- Description suggestions (Gemini) ---
    GEMINI_API_KEY: str = (
        os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY") or ""
    )
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
    GEMINI_API_URL: str = (
        "https://generativelanguage.googleapis.com/v1beta"
    )
    REQUEST_TIMEOUT: int = 30           # Transport timeout in seconds
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    SUGGESTION_FALLBACK_NAME: str = "this item"
    AUTH_ERROR_MARKERS: list[str] = [
        "api key",
        "permission denied",
        "authentication",
    ]

    # --- Catalog ---
    PLACEHOLDER_IMAGE_URL: str = (
        "https://picsum.photos/seed/{seed}/{width}/{height}"
    )
    PLACEHOLDER_SELLER: str = "CurrentUser"
    CURRENCY_SYMBOL: str = "R"
    SUMMARY_LENGTH: int = 60            # Browse card description cut-off

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    LOGS_DIR: Path = BASE_DIR / "logs"
