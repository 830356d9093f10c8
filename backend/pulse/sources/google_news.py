"""
Google News RSS adapter (keyless).
"""
from __future__ import annotations

import re
from typing import Any, List, Optional
from urllib.parse import urlencode

import feedparser
import httpx

from pulse.core.attribution import clean
from pulse.core.images import resolve_image
from pulse.models import FeedQuery, NewsItem
from pulse.sources.base import NewsProvider
from pulse.sources.common import clean_text, html_to_text, make_news_id, merge_description, parse_utc_datetime

LOCALE = {"hl": "en-US", "gl": "US", "ceid": "US:en"}

TOPIC_MAP = {
    "breaking": "NATION",
    "technology": "TECHNOLOGY",
    "business": "BUSINESS",
    "science": "SCIENCE",
    "health": "HEALTH",
    "sports": "SPORTS",
    "entertainment": "ENTERTAINMENT",
}


def extract_publisher_from_entry(entry) -> Optional[str]:
    """
    Extract publisher name from RSS entry.

    Args:
        entry: RSS feed entry

    Returns:
        Publisher name or None if not found
    """
    source = entry.get("source")
    if isinstance(source, dict):
        title = source.get("title")
        if title:
            return clean_text(title)

    # Fallback: extract from summary font tags
    summary = entry.get("summary", "") or ""
    font_matches = re.findall(r"<font[^>]*>([^<]+)</font>", summary, flags=re.IGNORECASE)
    return clean_text(font_matches[-1]) if font_matches else None


def _strip_publisher(text: str, publisher: Optional[str]) -> str:
    if publisher and text.endswith(publisher):
        return text[: -len(publisher)].rstrip(" -–—|")
    return text


class GoogleNewsProvider(NewsProvider):
    """Fetches topic headlines or search results from Google News RSS feeds."""

    name = "google_news"
    requires_credentials = False
    BASE_URL = "https://news.google.com/rss"

    def build_url(self, query: FeedQuery) -> str:
        if query.is_search:
            return f"{self.BASE_URL}/search?{urlencode({'q': query.query.strip(), **LOCALE})}"
        topic = TOPIC_MAP.get(query.category)
        if topic:
            return f"{self.BASE_URL}/headlines/section/topic/{topic}?{urlencode(LOCALE)}"
        return f"{self.BASE_URL}?{urlencode(LOCALE)}"

    async def _request(self, client: httpx.AsyncClient, query: FeedQuery, credential: Optional[str]) -> Any:
        response = await client.get(self.build_url(query))
        response.raise_for_status()

        feed = feedparser.parse(response.content)
        entries = getattr(feed, "entries", None)
        if getattr(feed, "bozo", 0) and not entries:
            raise ValueError(f"invalid RSS feed ({getattr(feed, 'bozo_exception', 'unknown error')})")
        if not isinstance(entries, list):
            raise ValueError("feed has no entries")
        return entries[: query.page_size]

    def _normalize(self, payload: Any, query: FeedQuery) -> List[NewsItem]:
        items: List[NewsItem] = []

        for index, entry in enumerate(payload):
            publisher = extract_publisher_from_entry(entry)
            # Titles arrive as "Headline - Publisher"
            title = clean(clean_text(entry.get("title")), publishers=(publisher,))
            link = clean_text(entry.get("link"))
            if not title or not link:
                continue

            summary = _strip_publisher(html_to_text(entry.get("summary")), publisher)
            items.append(
                NewsItem(
                    id=make_news_id(link, index, entry.get("id")),
                    title=title,
                    description=merge_description(summary, None),
                    url=link,
                    image_url=resolve_image(None, title, query.category),
                    published_at=parse_utc_datetime(entry.get("published")),
                    source=publisher or "Google News",
                    category=query.category,
                )
            )

        return items
