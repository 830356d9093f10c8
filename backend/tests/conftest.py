import json
from typing import Callable, List

import httpx
import pytest

from pulse.models import FeedQuery, NewsItem
from pulse.sources.base import NewsProvider
from pulse.exceptions import ProviderError
from pulse.utils import now_utc


ARTICLE_HTML = """
<html><body>
  <nav><p>Home</p><p>World</p></nav>
  <article>
    <p>The city council approved a sweeping plan on Tuesday to rebuild the riverside district over ten years.</p>
    <p>Photo: staff</p>
    <p>Officials said the first phase will focus on flood defences, housing and a new public transport link.</p>
    <p>Residents who attended the meeting raised concerns about rising rents and the length of construction.</p>
  </article>
</body></html>
"""


def make_item(index: int, url: str = None, **overrides) -> NewsItem:
    fields = dict(
        id=url or f"https://example.com/{index}",
        title=f"Headline number {index}",
        description=f"Description for story {index}.",
        url=url or f"https://example.com/{index}",
        image_url="https://img.example.com/a.jpg",
        published_at=now_utc(),
        source="Example Times",
        category="general",
    )
    fields.update(overrides)
    return NewsItem(**fields)


class StaticProvider(NewsProvider):
    """Provider stub returning canned items, or failing."""

    requires_credentials = False

    def __init__(self, name: str, items: List[NewsItem] = None, fail: bool = False) -> None:
        super().__init__()
        self.name = name
        self.items = items or []
        self.fail = fail
        self.calls: List[FeedQuery] = []

    async def fetch(self, query: FeedQuery) -> List[NewsItem]:
        self.calls.append(query)
        if self.fail:
            raise ProviderError(self.name, "simulated outage")
        return list(self.items)

    async def _request(self, client, query, credential):
        raise NotImplementedError

    def _normalize(self, payload, query):
        raise NotImplementedError


@pytest.fixture
def json_transport() -> Callable:
    """Build a MockTransport that answers every request via ``handler`` and records requests."""

    def factory(handler):
        seen: List[httpx.Request] = []

        def _handle(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            status, body = handler(request)
            if isinstance(body, (dict, list)):
                return httpx.Response(status, content=json.dumps(body), headers={"Content-Type": "application/json"})
            return httpx.Response(status, text=body)

        transport = httpx.MockTransport(_handle)
        transport.seen = seen
        return transport

    return factory


@pytest.fixture
def newsapi_payload():
    return {
        "status": "ok",
        "totalResults": 3,
        "articles": [
            {
                "source": {"id": None, "name": "Reuters"},
                "title": "Chipmaker unveils faster AI processor",
                "description": "A short snippet.",
                "content": "A short snippet about the processor launch and what it means for the data centre market. [+2400 chars]",
                "url": "https://reuters.com/tech/chip",
                "urlToImage": "https://img.reuters.com/chip.jpg",
                "publishedAt": "2025-01-02T10:00:00Z",
            },
            {
                "source": {"id": None, "name": ""},
                "title": "Local team wins the championship final",
                "description": "Fans celebrated late into the night.",
                "content": None,
                "url": "https://www.bbc.co.uk/sport/final",
                "urlToImage": None,
                "publishedAt": "2025-01-02T09:00:00Z",
            },
            {
                "source": {"id": None, "name": "[Removed]"},
                "title": "[Removed]",
                "description": "[Removed]",
                "url": "https://removed.com",
                "urlToImage": None,
                "publishedAt": "1970-01-01T00:00:00Z",
            },
        ],
    }
