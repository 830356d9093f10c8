"""
News aggregation across providers with failover and a built-in fallback.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from pulse.config import DEFAULT_PAGE_SIZE, Settings
from pulse.core.preview import NoPadding, PaddingPolicy, build_padding
from pulse.exceptions import AggregationError, ProviderError
from pulse.models import FeedQuery, NewsItem, normalize_category
from pulse.sources.base import NewsProvider
from pulse.sources.gnews import GNewsProvider
from pulse.sources.google_news import GoogleNewsProvider
from pulse.sources.newsapi import NewsAPIProvider
from pulse.sources.samples import sample_items

logger = logging.getLogger(__name__)


def deduplicate_news_items(items: Iterable[NewsItem]) -> List[NewsItem]:
    """
    Remove duplicate news items by URL, keeping the first occurrence.

    Args:
        items: Iterable of NewsItem objects

    Returns:
        List of unique NewsItem objects in their original order
    """
    seen_urls: set[str] = set()
    unique_items: List[NewsItem] = []

    for item in items:
        if item.url in seen_urls:
            continue
        seen_urls.add(item.url)
        unique_items.append(item)

    return unique_items


def matches_query(item: NewsItem, query: str) -> bool:
    """Case-insensitive substring match over title, description and source."""
    needle = query.strip().lower()
    if not needle:
        return True
    return any(needle in (field or "").lower() for field in (item.title, item.description, item.source))


class NewsAggregator:
    """
    Collects a feed from an ordered list of providers.

    Providers are tried one after another; later providers only top up a
    result that is still shorter than the requested page size. When no
    provider delivers anything, the category's sample set is served.
    """

    def __init__(
        self,
        providers: Sequence[NewsProvider],
        *,
        padding: Optional[PaddingPolicy] = None,
        samples: Callable[[str], List[NewsItem]] = sample_items,
    ) -> None:
        self.providers = tuple(providers)
        self.padding = padding or NoPadding()
        self._samples = samples

    async def _collect(self, feed_query: FeedQuery) -> List[NewsItem]:
        collected: List[NewsItem] = []

        for provider in self.providers:
            if not provider.enabled:
                continue
            try:
                items = await provider.fetch(feed_query)
            except ProviderError as e:
                logger.warning("Provider failed, trying next: %s", e)
                continue

            logger.info("%s returned %d items", provider.name, len(items))
            collected = deduplicate_news_items([*collected, *items])
            if len(collected) >= feed_query.page_size:
                break

        return collected

    async def aggregate(
        self,
        category: Optional[str] = "general",
        query: str = "",
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> List[NewsItem]:
        """
        Build one feed.

        Args:
            category: Requested category, unknown values fall back to general
            query: Optional free-text filter
            page_size: Maximum number of items; zero or less yields an empty feed

        Returns:
            Unique-by-URL items, filtered by ``query`` and truncated to ``page_size``

        Raises:
            AggregationError: if neither providers nor samples produce items
        """
        if page_size <= 0:
            return []

        feed_query = FeedQuery(category=normalize_category(category), query=query or "", page_size=page_size)
        items = await self._collect(feed_query)
        from_samples = not items

        if from_samples:
            items = self._samples(feed_query.category)
            if not items:
                raise AggregationError(f"no live or sample news available for '{feed_query.category}'")
            logger.info("All providers exhausted; serving %d sample items", len(items))

        unique_items = deduplicate_news_items(items)
        filtered = [item for item in unique_items if matches_query(item, feed_query.query)]
        result = filtered[:page_size]

        if from_samples:
            return result
        return [self._pad(item) for item in result]

    def _pad(self, item: NewsItem) -> NewsItem:
        description = self.padding.apply(item.description)
        if len(description) > len(item.description):
            return replace(item, description=description)
        return item


def build_providers(settings: Settings) -> List[NewsProvider]:
    """Instantiate the configured providers in failover order."""
    registry: Dict[str, Callable[[], NewsProvider]] = {
        "newsapi": lambda: NewsAPIProvider(settings.newsapi_keys, timeout=settings.PROVIDER_TIMEOUT),
        "gnews": lambda: GNewsProvider(settings.gnews_keys, timeout=settings.PROVIDER_TIMEOUT),
        "google_news": lambda: GoogleNewsProvider(timeout=settings.PROVIDER_TIMEOUT),
    }

    providers: List[NewsProvider] = []
    for name in settings.provider_order:
        factory = registry.get(name)
        if factory is None:
            logger.warning("Unknown provider '%s' in PROVIDER_ORDER; skipped", name)
            continue
        if name == "google_news" and not settings.GOOGLE_NEWS_ENABLED:
            continue
        providers.append(factory())
    return providers


def build_aggregator(settings: Settings) -> NewsAggregator:
    return NewsAggregator(
        build_providers(settings),
        padding=build_padding(settings.PREVIEW_PADDING_ENABLED, settings.PREVIEW_MIN_LENGTH),
    )
