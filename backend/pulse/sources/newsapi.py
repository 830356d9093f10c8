"""
NewsAPI.org adapter.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from pulse.core.images import resolve_image
from pulse.models import FeedQuery, NewsItem
from pulse.sources.base import NewsProvider
from pulse.sources.common import (
    clean_text,
    make_news_id,
    merge_description,
    parse_utc_datetime,
    require_object,
    source_fields,
    source_name,
)

# Publishers searched when the request carries a free-text query
SEARCH_DOMAINS = (
    "bbc.co.uk,reuters.com,cnn.com,theguardian.com,wsj.com,"
    "techcrunch.com,bloomberg.com,nytimes.com,theverge.com,engadget.com"
)

# NewsAPI has no "breaking" category; it maps to general top headlines
CATEGORY_MAP = {
    "general": "general",
    "breaking": "general",
    "technology": "technology",
    "business": "business",
    "science": "science",
    "health": "health",
    "sports": "sports",
    "entertainment": "entertainment",
}

REMOVED_MARKER = "[Removed]"


class NewsAPIProvider(NewsProvider):
    """Fetches top headlines or searches from newsapi.org."""

    name = "newsapi"
    BASE_URL = "https://newsapi.org/v2"
    MAX_PAGE_SIZE = 100

    def build_request(self, query: FeedQuery) -> tuple[str, Dict[str, Any]]:
        params: Dict[str, Any] = {
            "language": "en",
            "pageSize": max(1, min(query.page_size, self.MAX_PAGE_SIZE)),
        }
        if query.is_search:
            params.update({"q": query.query.strip(), "sortBy": "publishedAt", "domains": SEARCH_DOMAINS})
            return f"{self.BASE_URL}/everything", params

        params.update({"country": "us", "category": CATEGORY_MAP.get(query.category, "general")})
        return f"{self.BASE_URL}/top-headlines", params

    async def _request(self, client: httpx.AsyncClient, query: FeedQuery, credential: Optional[str]) -> Any:
        url, params = self.build_request(query)
        # Header auth keeps the key out of logged URLs
        response = await client.get(url, params=params, headers={"X-Api-Key": credential or ""})
        response.raise_for_status()
        data = require_object(response.json())

        if data.get("status") != "ok":
            raise ValueError(f"error payload: {data.get('code') or data.get('message') or 'unknown'}")
        articles = data.get("articles")
        if not isinstance(articles, list):
            raise ValueError("payload has no article list")
        return articles

    def _normalize(self, payload: Any, query: FeedQuery) -> List[NewsItem]:
        items: List[NewsItem] = []

        for index, article in enumerate(payload):
            if not isinstance(article, dict):
                continue

            title = clean_text(article.get("title"))
            url = clean_text(article.get("url"))

            # Skip missing or takedown entries
            if not title or not url or title == REMOVED_MARKER:
                continue

            items.append(
                NewsItem(
                    id=make_news_id(url, index),
                    title=title,
                    description=merge_description(article.get("description"), article.get("content")),
                    url=url,
                    image_url=resolve_image(clean_text(article.get("urlToImage")), title, query.category),
                    published_at=parse_utc_datetime(article.get("publishedAt")),
                    source=source_name(source_fields(article.get("source"))[0], url),
                    category=query.category,
                )
            )

        return items
