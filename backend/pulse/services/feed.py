"""
Server-sent-events delivery of the aggregated feed.
"""
from __future__ import annotations

import asyncio
import json
import logging
import time
from typing import AsyncIterator, Awaitable, Callable

from pulse.exceptions import AggregationError
from pulse.schemas import serialize_items
from pulse.sources.collector import NewsAggregator

logger = logging.getLogger(__name__)

SSE_HEADERS = {
    "Cache-Control": "no-cache, no-transform",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",  # Disable nginx buffering
}

DisconnectCheck = Callable[[], Awaitable[bool]]


def format_event(payload) -> str:
    """Encode one payload as an SSE ``data:`` event."""
    return f"data: {json.dumps(payload, ensure_ascii=False)}\n\n"


class FeedStream:
    """Pushes a fresh aggregation immediately and then once per interval."""

    def __init__(
        self,
        aggregator: NewsAggregator,
        *,
        category: str,
        query: str,
        page_size: int,
        interval: float,
        poll_interval: float = 1.0,
    ) -> None:
        self.aggregator = aggregator
        self.category = category
        self.query = query
        self.page_size = page_size
        self.interval = interval
        self.poll_interval = poll_interval

    async def _tick(self) -> str:
        try:
            items = await self.aggregator.aggregate(self.category, self.query, self.page_size)
        except AggregationError as e:
            logger.error("Feed refresh failed for %s: %s", self.category, e)
            return format_event({"error": str(e)})
        return format_event(serialize_items(items))

    async def _wait(self, is_disconnected: DisconnectCheck) -> bool:
        """Sleep one interval; return False as soon as the client is gone."""
        deadline = time.monotonic() + self.interval
        while True:
            if await is_disconnected():
                return False
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return True
            await asyncio.sleep(min(self.poll_interval, remaining))

    async def events(self, is_disconnected: DisconnectCheck) -> AsyncIterator[str]:
        logger.info("Feed stream opened (category=%s)", self.category)
        try:
            while True:
                yield await self._tick()
                if not await self._wait(is_disconnected):
                    break
        finally:
            logger.info("Feed stream closed (category=%s)", self.category)
