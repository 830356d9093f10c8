"""
Best-effort extraction of full article text from a publisher page.

The page is fetched once and a fixed list of CSS selectors is tried in
order. The first selector matching enough paragraphs is taken to be the
article body; its substantial paragraphs become the content.
"""
from __future__ import annotations

import logging
from typing import List, Optional

import httpx
from bs4 import BeautifulSoup

from pulse.config import (
    EXTRACT_SELECTORS,
    HTTP_HEADERS,
    MIN_PARAGRAPH_LENGTH,
    MIN_SELECTOR_MATCHES,
    settings,
)
from pulse.core.attribution import clean
from pulse.models import Extracted, ExtractionResult, FellBack

logger = logging.getLogger(__name__)


def extract_paragraphs(html: str) -> List[str]:
    """
    Pull article paragraphs out of an HTML document.

    Args:
        html: Raw page HTML

    Returns:
        Paragraph texts from the first selector with enough matches, keeping
        only paragraphs longer than MIN_PARAGRAPH_LENGTH characters
    """
    soup = BeautifulSoup(html, "html.parser")
    for selector in EXTRACT_SELECTORS:
        nodes = soup.select(selector)
        if len(nodes) < MIN_SELECTOR_MATCHES:
            continue
        texts = (node.get_text().strip() for node in nodes)
        return [text for text in texts if len(text) > MIN_PARAGRAPH_LENGTH]
    return []


async def fetch_html(
    url: str,
    timeout: float,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    async with httpx.AsyncClient(
        headers=HTTP_HEADERS,
        timeout=timeout,
        follow_redirects=True,
        transport=transport,
    ) as client:
        response = await client.get(url)
        response.raise_for_status()
        return response.text


async def extract(
    url: str,
    current_description: str,
    *,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ExtractionResult:
    """
    Try to replace ``current_description`` with the article's full text.

    Never raises for network, HTTP or parsing problems: those produce a
    FellBack carrying the unchanged description.
    """
    try:
        html = await fetch_html(url, timeout or settings.EXTRACT_TIMEOUT, transport)
        paragraphs = extract_paragraphs(html)
    except Exception as e:
        # Timeouts, refused connections, bad status codes, invalid URLs, broken markup
        logger.warning("Article extraction failed for %s: %s", url, e)
        return FellBack(current_description, reason=f"{type(e).__name__}: {e}")

    content = clean("\n\n".join(paragraphs))
    if len(content) > len(current_description):
        return Extracted(content)
    return FellBack(current_description, reason="no longer content found")
