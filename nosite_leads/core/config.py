"""Application configuration helpers."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


class ConfigError(RuntimeError):
    """Raised when mandatory configuration is missing."""


@dataclass(frozen=True)
class Settings:
    google_api_key: str
    maps_js_api_key: str = ""
    server_port: int = 8080
    http_timeout: Optional[float] = 10.0


def require_google_api_key(settings: Settings) -> str:
    if not settings.google_api_key:
        raise ConfigError("Google API key not configured")
    return settings.google_api_key


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    load_dotenv()

    google_api_key = os.getenv("GOOGLE_API_KEY", "").strip()
    maps_js_api_key = os.getenv("GOOGLE_MAPS_JS_API_KEY", "").strip() or google_api_key
    server_port = int(os.getenv("PORT", "8080"))
    timeout_raw = os.getenv("GOOGLE_HTTP_TIMEOUT", "10").strip()
    http_timeout = float(timeout_raw) if timeout_raw else None

    if not google_api_key:
        logger.warning("GOOGLE_API_KEY is not configured; every search request will fail.")
    if not maps_js_api_key:
        logger.warning("GOOGLE_MAPS_JS_API_KEY is not configured; the map widget will not load.")

    return Settings(
        google_api_key=google_api_key,
        maps_js_api_key=maps_js_api_key,
        server_port=server_port,
        http_timeout=http_timeout,
    )
