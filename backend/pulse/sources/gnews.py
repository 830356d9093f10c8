"""
GNews.io adapter.
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

CATEGORY_MAP = {
    "general": "general",
    "breaking": "nation",
    "technology": "technology",
    "business": "business",
    "science": "science",
    "health": "health",
    "sports": "sports",
    "entertainment": "entertainment",
}


class GNewsProvider(NewsProvider):
    """Fetches top headlines or searches from gnews.io (v4 API)."""

    name = "gnews"
    BASE_URL = "https://gnews.io/api/v4"
    MAX_PAGE_SIZE = 100

    def build_request(self, query: FeedQuery) -> tuple[str, Dict[str, Any]]:
        params: Dict[str, Any] = {
            "lang": "en",
            "max": max(1, min(query.page_size, self.MAX_PAGE_SIZE)),
        }
        if query.is_search:
            params.update({"q": query.query.strip(), "sortby": "publishedAt"})
            return f"{self.BASE_URL}/search", params

        params.update({"country": "us", "category": CATEGORY_MAP.get(query.category, "general")})
        return f"{self.BASE_URL}/top-headlines", params

    async def _request(self, client: httpx.AsyncClient, query: FeedQuery, credential: Optional[str]) -> Any:
        url, params = self.build_request(query)
        params["apikey"] = credential or ""
        response = await client.get(url, params=params)
        response.raise_for_status()
        data = require_object(response.json())

        if data.get("errors"):
            raise ValueError(f"error payload: {data['errors']}")
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
            if not title or not url:
                continue

            publisher, homepage = source_fields(article.get("source"))
            items.append(
                NewsItem(
                    id=make_news_id(url, index, clean_text(article.get("id"))),
                    title=title,
                    description=merge_description(article.get("description"), article.get("content")),
                    url=url,
                    image_url=resolve_image(clean_text(article.get("image")), title, query.category),
                    published_at=parse_utc_datetime(article.get("publishedAt")),
                    source=source_name(publisher, homepage or url),
                    category=query.category,
                )
            )

        return items
