"""
Application configuration with environment variable support.
"""
from __future__ import annotations

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


def _split_list(value: str, separator: str = ",") -> List[str]:
    """Split a separated environment value into a list of non-empty items."""
    if not value:
        return []
    return [item.strip() for item in value.split(separator) if item.strip()]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Provider credentials, tried in order
    NEWSAPI_KEYS: str = ""
    NEWS_API_KEY: str = ""
    GNEWS_KEYS: str = ""
    GOOGLE_NEWS_ENABLED: bool = True
    PROVIDER_ORDER: str = "newsapi,gnews,google_news"

    # Timeouts (seconds)
    PROVIDER_TIMEOUT: float = 8.0
    EXTRACT_TIMEOUT: float = 5.0

    # Streaming
    REFRESH_INTERVAL_SECONDS: float = 300.0

    # Preview padding appends generic filler sentences, never article facts
    PREVIEW_PADDING_ENABLED: bool = True
    PREVIEW_MIN_LENGTH: int = 400

    LOG_LEVEL: str = "INFO"
    PORT: int = 8000

    @property
    def newsapi_keys(self) -> List[str]:
        keys = _split_list(self.NEWSAPI_KEYS)
        legacy = self.NEWS_API_KEY.strip()
        if legacy and legacy not in keys:
            keys.append(legacy)
        return keys

    @property
    def gnews_keys(self) -> List[str]:
        return _split_list(self.GNEWS_KEYS)

    @property
    def provider_order(self) -> List[str]:
        return [name.lower() for name in _split_list(self.PROVIDER_ORDER)]


settings = Settings()

# Categories
CATEGORIES: tuple[str, ...] = (
    "general",
    "breaking",
    "technology",
    "business",
    "science",
    "health",
    "sports",
    "entertainment",
)
CATEGORY_ALIASES = {"headlines": "breaking"}
DEFAULT_CATEGORY = "general"

# Feed Settings
DEFAULT_PAGE_SIZE: int = 50
MAX_PAGE_SIZE: int = 100
DESCRIPTION_PLACEHOLDER = "No description available."

# Article extraction
EXTRACT_SELECTORS: tuple[str, ...] = (
    "article p",
    ".article-body p",
    ".story-body p",
    ".content p",
    "main article p",
    '[role="article"] p',
    ".post-content p",
    ".entry-content p",
)
MIN_SELECTOR_MATCHES = 3
MIN_PARAGRAPH_LENGTH = 50

# HTTP Client Configuration
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0 Safari/537.36"
)
HTTP_HEADERS = {"User-Agent": USER_AGENT}

# CORS Configuration
CORS_ALLOW_ORIGINS: list[str] = ["*"]

# Logging Configuration
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
