"""
Base class for news provider adapters.

An adapter owns an ordered list of credentials. ``fetch`` tries them one at
a time and returns the first usable result; when every credential has
failed it raises ProviderError so the aggregator can move on.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence

import httpx

from pulse.config import HTTP_HEADERS
from pulse.exceptions import ProviderError
from pulse.models import FeedQuery, NewsItem

logger = logging.getLogger(__name__)


def _describe(error: Exception) -> str:
    # Status only: request URLs may carry an API key
    if isinstance(error, httpx.HTTPStatusError):
        return f"HTTP {error.response.status_code}"
    return f"{type(error).__name__}: {error}"


class NewsProvider(ABC):
    """Uniform interface over heterogeneous upstream news services."""

    name: str = "provider"
    requires_credentials: bool = True

    def __init__(
        self,
        credentials: Sequence[str] = (),
        *,
        timeout: float = 8.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.credentials = tuple(credentials)
        self.timeout = timeout
        self._transport = transport

    @property
    def enabled(self) -> bool:
        return bool(self.credentials) or not self.requires_credentials

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers=HTTP_HEADERS,
            timeout=self.timeout,
            follow_redirects=True,
            transport=self._transport,
        )

    async def fetch(self, query: FeedQuery) -> List[NewsItem]:
        """
        Fetch normalized items, failing over across credentials.

        Raises:
            ProviderError: when no credential produced a usable response
        """
        attempts: List[Optional[str]] = list(self.credentials)
        if not attempts:
            if self.requires_credentials:
                raise ProviderError(self.name, "no credentials configured")
            attempts = [None]

        last_error = "no attempt made"
        async with self._client() as client:
            for position, credential in enumerate(attempts, start=1):
                try:
                    payload = await self._request(client, query, credential)
                    return self._normalize(payload, query)
                except (httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError) as e:
                    # Malformed upstream payloads count as a failed attempt
                    last_error = _describe(e)
                    logger.warning(
                        "%s attempt %d/%d failed: %s", self.name, position, len(attempts), last_error
                    )
        raise ProviderError(self.name, f"all {len(attempts)} attempt(s) failed ({last_error})")

    @abstractmethod
    async def _request(self, client: httpx.AsyncClient, query: FeedQuery, credential: Optional[str]) -> Any:
        """Perform one upstream call and return the validated payload."""

    @abstractmethod
    def _normalize(self, payload: Any, query: FeedQuery) -> List[NewsItem]:
        """Map the provider's native payload onto NewsItem."""
