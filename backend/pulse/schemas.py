# pulse/schemas.py
from typing import Optional

from pydantic import BaseModel

from pulse.models import NewsItem
from pulse.utils import iso


class NewsItemOut(BaseModel):
    id: str
    title: str
    description: str
    url: str
    imageUrl: str
    publishedAt: str                          # ISO-8601, UTC, "Z" suffix
    source: str
    category: Optional[str] = None

    @classmethod
    def from_item(cls, item: NewsItem) -> "NewsItemOut":
        return cls(
            id=item.id,
            title=item.title,
            description=item.description,
            url=item.url,
            imageUrl=item.image_url,
            publishedAt=iso(item.published_at),
            source=item.source,
            category=item.category,
        )


class ArticleContentResponse(BaseModel):
    content: str


def serialize_items(items: list[NewsItem]) -> list[dict]:
    """Render items as JSON-ready dicts, omitting an absent category."""
    return [NewsItemOut.from_item(item).model_dump(exclude_none=True) for item in items]
