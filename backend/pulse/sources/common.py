"""
Common utilities for news provider adapters.
"""
from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from bs4 import BeautifulSoup
from dateutil import parser as dateparser

from pulse.config import DESCRIPTION_PLACEHOLDER
from pulse.utils import extract_domain_from_url, normalize_text

_TRUNCATION_MARKER = re.compile(r"\s*\[\+?\d+\s*chars\]", re.IGNORECASE)


def make_news_id(url: Optional[str], index: int, uuid: Optional[str] = None) -> str:
    """
    Build the identifier of a news item.

    Args:
        url: Article URL, preferred as the id
        index: Position of the article in the provider response
        uuid: Provider-assigned identifier, used when the URL is missing

    Returns:
        The URL, the provider id, or ``"{index}-{timestamp_ms}"``
    """
    if url:
        return url
    if uuid:
        return str(uuid)
    return f"{index}-{int(datetime.now(timezone.utc).timestamp() * 1000)}"


def parse_utc_datetime(date_string: Optional[str]) -> datetime:
    """
    Parse a date string and convert to UTC datetime.

    Args:
        date_string: Date string in various formats, or None

    Returns:
        UTC datetime object, or current UTC time if input is None/empty/unparseable
    """
    if not date_string or not isinstance(date_string, str):
        return datetime.now(timezone.utc)

    try:
        parsed_date = dateparser.parse(date_string)
    except (ValueError, OverflowError):
        return datetime.now(timezone.utc)
    if parsed_date.tzinfo:
        return parsed_date.astimezone(timezone.utc)
    return parsed_date.replace(tzinfo=timezone.utc)


def clean_text(text: Optional[str]) -> str:
    """
    Clean and normalize text content.

    Args:
        text: Raw text string or None

    Returns:
        Cleaned text string, empty string if input is None or not a string
    """
    if not text or not isinstance(text, str):
        return ""
    return text.strip()


def html_to_text(markup: Optional[str]) -> str:
    """Reduce an HTML fragment (RSS summaries) to normalized plain text."""
    if not markup:
        return ""
    if "<" not in markup:
        return normalize_text(markup)
    return normalize_text(BeautifulSoup(markup, "html.parser").get_text(" "))


def strip_truncation_marker(content: Optional[str]) -> str:
    """Remove the ``[+123 chars]`` or ``[123 chars]`` suffix some APIs append to truncated content."""
    return _TRUNCATION_MARKER.sub("", clean_text(content)).strip()


def merge_description(description: Optional[str], content: Optional[str]) -> str:
    """
    Combine a provider description with its (possibly truncated) content.

    Content replaces the description only when strictly longer. Falls back
    to the placeholder when both are empty.
    """
    description = clean_text(description)
    content = strip_truncation_marker(content)
    if len(content) > len(description):
        return content
    return description or DESCRIPTION_PLACEHOLDER


def source_name(name: Optional[str], url: Optional[str]) -> str:
    """Publisher display name, falling back to the article's domain."""
    name = clean_text(name)
    if name:
        return name
    return extract_domain_from_url(url or "") or "Unknown"


def require_object(data: Any, what: str = "payload") -> Dict[str, Any]:
    """Return ``data`` if it is a JSON object, else raise ValueError."""
    if not isinstance(data, dict):
        raise ValueError(f"{what} is not a JSON object ({type(data).__name__})")
    return data


def source_fields(source: Any) -> Tuple[Optional[str], Optional[str]]:
    """Publisher name and homepage from a ``source`` field given as an object or a bare name."""
    if isinstance(source, dict):
        name, url = source.get("name"), source.get("url")
        return (name if isinstance(name, str) else None), (url if isinstance(url, str) else None)
    if isinstance(source, str):
        return source, None
    return None, None
