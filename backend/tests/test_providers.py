import httpx
import pytest

from pulse.config import DESCRIPTION_PLACEHOLDER
from pulse.core.images import IMAGE_RULES
from pulse.exceptions import ProviderError
from pulse.models import FeedQuery
from pulse.sources.common import make_news_id, merge_description
from pulse.sources.gnews import GNewsProvider
from pulse.sources.google_news import GoogleNewsProvider
from pulse.sources.newsapi import NewsAPIProvider

RSS_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"><channel><title>Top stories - Google News</title>
<item>
  <title>Big storm hits coast - The Guardian</title>
  <link>https://news.google.com/rss/articles/abc</link>
  <guid isPermaLink="false">abc</guid>
  <pubDate>Thu, 02 Jan 2025 10:00:00 GMT</pubDate>
  <description>&lt;a href="https://news.google.com/rss/articles/abc"&gt;Big storm hits coast&lt;/a&gt;&amp;nbsp;&amp;nbsp;&lt;font color="#6f6f6f"&gt;The Guardian&lt;/font&gt;</description>
  <source url="https://www.theguardian.com">The Guardian</source>
</item>
<item>
  <title>Election results due tonight - Politico</title>
  <link>https://news.google.com/rss/articles/def</link>
  <pubDate>Thu, 02 Jan 2025 09:00:00 GMT</pubDate>
  <description>Counting continues in key districts.</description>
  <source url="https://www.politico.com">Politico</source>
</item>
</channel></rss>
"""


def _rule_image(topic):
    return next(rule.image_url for rule in IMAGE_RULES if rule.topic == topic)


@pytest.mark.asyncio
async def test_newsapi_normalizes_articles(json_transport, newsapi_payload):
    transport = json_transport(lambda request: (200, newsapi_payload))
    provider = NewsAPIProvider(["k1"], transport=transport)

    items = await provider.fetch(FeedQuery(category="technology", page_size=10))

    assert [item.url for item in items] == ["https://reuters.com/tech/chip", "https://www.bbc.co.uk/sport/final"]
    chip, final = items
    assert chip.id == chip.url
    assert chip.source == "Reuters"
    assert chip.image_url == "https://img.reuters.com/chip.jpg"
    assert chip.description.endswith("data centre market.")
    assert "[+2400 chars]" not in chip.description
    assert final.source == "bbc.co.uk"
    assert final.image_url == _rule_image("sports")
    assert all(item.category == "technology" for item in items)


@pytest.mark.asyncio
async def test_newsapi_request_shape(json_transport, newsapi_payload):
    transport = json_transport(lambda request: (200, newsapi_payload))
    provider = NewsAPIProvider(["secret"], transport=transport)

    await provider.fetch(FeedQuery(category="breaking", page_size=20))
    await provider.fetch(FeedQuery(category="general", query="climate", page_size=20))

    headlines, search = transport.seen
    assert headlines.url.path == "/v2/top-headlines"
    assert headlines.url.params["category"] == "general"
    assert headlines.url.params["pageSize"] == "20"
    assert headlines.headers["X-Api-Key"] == "secret"
    assert "apiKey" not in headlines.url.params
    assert search.url.path == "/v2/everything"
    assert search.url.params["q"] == "climate"
    assert "reuters.com" in search.url.params["domains"]


@pytest.mark.asyncio
async def test_newsapi_fails_over_to_next_credential(json_transport, newsapi_payload):
    def handler(request):
        if request.headers["X-Api-Key"] == "bad":
            return 401, {"status": "error", "code": "apiKeyInvalid"}
        return 200, newsapi_payload

    transport = json_transport(handler)
    provider = NewsAPIProvider(["bad", "good"], transport=transport)

    items = await provider.fetch(FeedQuery())

    assert len(items) == 2
    assert [r.headers["X-Api-Key"] for r in transport.seen] == ["bad", "good"]


@pytest.mark.asyncio
async def test_newsapi_error_payload_and_timeouts_exhaust_provider(json_transport):
    def handler(request):
        if request.headers["X-Api-Key"] == "slow":
            raise httpx.ReadTimeout("timed out", request=request)
        return 200, {"status": "error", "code": "rateLimited"}

    transport = json_transport(handler)
    provider = NewsAPIProvider(["slow", "limited"], transport=transport)

    with pytest.raises(ProviderError) as exc_info:
        await provider.fetch(FeedQuery())

    assert exc_info.value.provider == "newsapi"
    assert len(transport.seen) == 2


@pytest.mark.asyncio
async def test_wrong_payload_shape_is_a_failure(json_transport):
    transport = json_transport(lambda request: (200, {"status": "ok", "articles": "nope"}))

    with pytest.raises(ProviderError):
        await NewsAPIProvider(["k"], transport=transport).fetch(FeedQuery())


@pytest.mark.asyncio
async def test_provider_without_credentials_makes_no_request(json_transport):
    transport = json_transport(lambda request: (200, {}))
    provider = NewsAPIProvider([], transport=transport)

    assert provider.enabled is False
    with pytest.raises(ProviderError):
        await provider.fetch(FeedQuery())
    assert transport.seen == []


@pytest.mark.asyncio
async def test_gnews_normalizes_and_sends_key_as_param(json_transport):
    payload = {
        "totalArticles": 1,
        "articles": [
            {
                "id": "g-1",
                "title": "Vaccine trial shows strong results",
                "description": "Researchers report progress.",
                "content": "Researchers report progress in a late-stage trial... [1200 chars]",
                "url": "https://example.org/vaccine",
                "image": "",
                "publishedAt": "2025-01-02T08:00:00Z",
                "source": {"name": "Example Health", "url": "https://example.org"},
            }
        ],
    }
    transport = json_transport(lambda request: (200, payload))

    items = await GNewsProvider(["g-key"], transport=transport).fetch(FeedQuery(category="health", page_size=5))

    assert transport.seen[0].url.path == "/api/v4/top-headlines"
    assert transport.seen[0].url.params["apikey"] == "g-key"
    assert transport.seen[0].url.params["category"] == "health"
    (item,) = items
    assert item.source == "Example Health"
    assert item.image_url == _rule_image("health")
    assert item.published_at.year == 2025


@pytest.mark.asyncio
async def test_gnews_error_payload_is_a_failure(json_transport):
    transport = json_transport(lambda request: (403, {"errors": ["You did not provide an API key."]}))

    with pytest.raises(ProviderError):
        await GNewsProvider(["k"], transport=transport).fetch(FeedQuery())


@pytest.mark.asyncio
async def test_google_news_parses_rss(json_transport):
    transport = json_transport(lambda request: (200, RSS_FEED))
    provider = GoogleNewsProvider(transport=transport)

    items = await provider.fetch(FeedQuery(category="technology", page_size=10))

    assert provider.enabled is True
    assert "/headlines/section/topic/TECHNOLOGY" in str(transport.seen[0].url)
    storm, election = items
    assert storm.title == "Big storm hits coast"
    assert storm.source == "The Guardian"
    assert storm.description.startswith("Big storm hits coast")
    assert not storm.description.endswith("The Guardian")
    assert storm.published_at.hour == 10
    assert election.title == "Election results due tonight"
    assert election.description == "Counting continues in key districts."
    assert election.image_url == _rule_image("politics")


@pytest.mark.asyncio
async def test_google_news_search_url_and_page_size(json_transport):
    transport = json_transport(lambda request: (200, RSS_FEED))

    items = await GoogleNewsProvider(transport=transport).fetch(FeedQuery(query="storm", page_size=1))

    assert transport.seen[0].url.path == "/rss/search"
    assert transport.seen[0].url.params["q"] == "storm"
    assert len(items) == 1


def test_make_news_id_fallbacks():
    assert make_news_id("https://a.com/x", 0, "uuid-1") == "https://a.com/x"
    assert make_news_id("", 0, "uuid-1") == "uuid-1"
    assert make_news_id(None, 4).startswith("4-")


def test_merge_description_rules():
    assert merge_description("Short.", "Short. And a longer body [+100 chars]") == "Short. And a longer body"
    assert merge_description("A longer description here.", "Tiny") == "A longer description here."
    assert merge_description(None, None) == DESCRIPTION_PLACEHOLDER


@pytest.mark.asyncio
async def test_newsapi_non_object_body_fails_over_to_next_credential(json_transport, newsapi_payload):
    def handler(request):
        if request.headers["X-Api-Key"] == "first":
            return 200, [{"unexpected": "array"}]
        return 200, newsapi_payload

    transport = json_transport(handler)

    items = await NewsAPIProvider(["first", "second"], transport=transport).fetch(FeedQuery())

    assert len(items) == 2
    assert len(transport.seen) == 2


@pytest.mark.asyncio
async def test_gnews_non_object_body_is_a_failure(json_transport):
    transport = json_transport(lambda request: (200, ["not", "an", "object"]))

    with pytest.raises(ProviderError):
        await GNewsProvider(["k"], transport=transport).fetch(FeedQuery())


@pytest.mark.asyncio
async def test_newsapi_tolerates_odd_article_fields(json_transport):
    payload = {
        "status": "ok",
        "articles": [
            "not an article",
            {"title": 42, "url": "https://example.com/numeric-title"},
            {
                "source": "Reuters",
                "title": "Central bank holds rates",
                "description": None,
                "content": 17,
                "url": "https://reuters.com/rates",
                "urlToImage": {"href": "x"},
                "publishedAt": 1735800000,
            },
        ],
    }
    transport = json_transport(lambda request: (200, payload))

    (item,) = await NewsAPIProvider(["k"], transport=transport).fetch(FeedQuery(category="business"))

    assert item.source == "Reuters"
    assert item.description == DESCRIPTION_PLACEHOLDER
    assert item.image_url == _rule_image("business")


@pytest.mark.asyncio
async def test_gnews_accepts_string_source(json_transport):
    payload = {
        "articles": [
            {"title": "Markets open higher", "url": "https://example.net/open", "source": "Example Wire"},
            {"title": "No source at all", "url": "https://example.net/none", "source": ["odd"]},
        ]
    }
    transport = json_transport(lambda request: (200, payload))

    wire, bare = await GNewsProvider(["k"], transport=transport).fetch(FeedQuery())

    assert wire.source == "Example Wire"
    assert bare.source == "example.net"


@pytest.mark.asyncio
async def test_google_news_strips_entry_publisher_only(json_transport):
    feed = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"><channel><title>Sports</title>
<item>
  <title>Arsenal 2 - 1 Chelsea - Springfield Herald</title>
  <link>https://news.google.com/rss/articles/xyz</link>
  <pubDate>Thu, 02 Jan 2025 10:00:00 GMT</pubDate>
  <description>Late winner at the Emirates.</description>
  <source url="https://herald.example">Springfield Herald</source>
</item>
</channel></rss>
"""
    transport = json_transport(lambda request: (200, feed))

    (item,) = await GoogleNewsProvider(transport=transport).fetch(FeedQuery(category="sports"))

    assert item.title == "Arsenal 2 - 1 Chelsea"
    assert item.source == "Springfield Herald"
