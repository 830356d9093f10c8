"""
File: pulse/models.py
Internal data structures used during aggregation and extraction.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from pulse.config import CATEGORIES, CATEGORY_ALIASES, DEFAULT_CATEGORY


def normalize_category(value: Optional[str]) -> str:
    """Map a requested category onto the fixed category set.

    Aliases resolve to their target; unknown or empty values become ``general``.
    """
    key = (value or "").strip().lower()
    key = CATEGORY_ALIASES.get(key, key)
    return key if key in CATEGORIES else DEFAULT_CATEGORY


@dataclass(frozen=True)
class NewsItem:
    """Unified representation of an aggregated article.

    Instances are built fresh for every request or stream tick; enrichment
    produces new instances instead of mutating existing ones.
    """

    id: str
    title: str
    description: str
    url: str
    image_url: str
    published_at: datetime
    source: str
    category: Optional[str] = None


@dataclass(frozen=True)
class FeedQuery:
    """Parameters of one aggregation request, as passed to every provider."""

    category: str = DEFAULT_CATEGORY
    query: str = ""
    page_size: int = 50

    @property
    def is_search(self) -> bool:
        return bool(self.query.strip())


@dataclass(frozen=True)
class Extracted:
    """Scraped article text that is longer than the known description."""

    content: str
    contributed: bool = True


@dataclass(frozen=True)
class FellBack:
    """Extraction did not improve on the known description."""

    content: str
    reason: str = ""
    contributed: bool = False


ExtractionResult = Union[Extracted, FellBack]


__all__ = [
    "NewsItem",
    "FeedQuery",
    "Extracted",
    "FellBack",
    "ExtractionResult",
    "normalize_category",
]
