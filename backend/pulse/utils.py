"""
Shared utility functions for the news service.
"""
from __future__ import annotations

import re
from datetime import datetime, timezone
from urllib.parse import urlparse

import tldextract

# Offline extractor: use the bundled public suffix snapshot, never the network
_extract = tldextract.TLDExtract(suffix_list_urls=())


def now_utc() -> datetime:
    """
    Get current UTC datetime with timezone information.

    Returns:
        Current UTC datetime
    """
    return datetime.now(timezone.utc)


def iso(dt: datetime) -> str:
    """Format a datetime as an ISO-8601 UTC string with a trailing ``Z``."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def normalize_text(text: str | None) -> str:
    """
    Normalize whitespace in text content.

    Args:
        text: Input text string (can be None)

    Returns:
        Normalized text with single spaces and trimmed edges
    """
    if not text:
        return ""
    return re.sub(r"\s+", " ", text).strip()


def extract_domain_from_url(url: str) -> str:
    """
    Extract the registered domain from a URL.

    Args:
        url: Full URL string

    Returns:
        Normalized domain name in lowercase, empty string if none can be found
    """
    if not url:
        return ""
    try:
        extracted = _extract(url)
        domain = f"{extracted.domain}.{extracted.suffix}" if extracted.suffix else extracted.domain
        return domain.lower()
    except Exception:
        # Fallback to simple parsing
        netloc = urlparse(url).netloc.lower()
        return netloc[4:] if netloc.startswith("www.") else netloc
