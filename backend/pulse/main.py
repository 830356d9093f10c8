"""
Main FastAPI application and routing layer.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, StreamingResponse

from pulse.config import (
    CORS_ALLOW_ORIGINS,
    DEFAULT_PAGE_SIZE,
    LOG_FORMAT,
    MAX_PAGE_SIZE,
    settings,
)
from pulse.core.extractor import extract
from pulse.exceptions import AggregationError
from pulse.schemas import ArticleContentResponse, serialize_items
from pulse.services.feed import SSE_HEADERS, FeedStream
from pulse.sources.collector import NewsAggregator, build_aggregator
from pulse.utils import now_utc

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL.upper(), format=LOG_FORMAT)
logger = logging.getLogger("uvicorn")

NO_CACHE_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


@lru_cache(maxsize=1)
def get_aggregator() -> NewsAggregator:
    """Shared aggregator; it only holds read-only configuration."""
    return build_aggregator(settings)


# Initialize FastAPI app
app = FastAPI(
    title="Pulse News API",
    version="0.1.0",
    description="Aggregated news feeds and best-effort full-article extraction",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "ok",
        "as_of": now_utc().isoformat(),
        "service": "pulse-news-api",
    }


@app.get("/api/article", response_model=ArticleContentResponse)
async def get_article_content(
    url: Optional[str] = Query(None, description="Article URL to extract"),
    description: str = Query("", description="Description already known for the article"),
):
    """
    Return the article's full text when it can be scraped, else the given description.
    """
    if not url or not url.strip():
        raise HTTPException(status_code=400, detail="URL is required")

    try:
        result = await extract(url.strip(), description)
    except Exception as e:
        logger.error(f"Error fetching article content for {url}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch article content")

    logger.info(f"Article extraction for {url}: {'extracted' if result.contributed else 'fell back'}")
    return ArticleContentResponse(content=result.content)


@app.get("/api/news")
async def get_news(
    request: Request,
    category: str = Query("general", description="Feed category"),
    q: str = Query("", description="Free-text search query"),
    page_size: int = Query(DEFAULT_PAGE_SIZE, alias="pageSize", ge=0, le=MAX_PAGE_SIZE),
    mobile: bool = Query(False, description="Return one JSON response instead of a stream"),
    aggregator: NewsAggregator = Depends(get_aggregator),
):
    """
    Aggregated news feed.

    Mobile clients get a single JSON array; everyone else gets a
    server-sent-events stream refreshed every REFRESH_INTERVAL_SECONDS.
    """
    if mobile:
        try:
            items = await aggregator.aggregate(category, q, page_size)
        except AggregationError as e:
            logger.error(f"News aggregation failed for {category}: {e}")
            raise HTTPException(status_code=500, detail="Failed to fetch news")
        return JSONResponse(serialize_items(items), headers=NO_CACHE_HEADERS)

    stream = FeedStream(
        aggregator,
        category=category,
        query=q,
        page_size=page_size,
        interval=settings.REFRESH_INTERVAL_SECONDS,
    )
    return StreamingResponse(
        stream.events(request.is_disconnected),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )


if __name__ == "__main__":
    # For development
    import uvicorn
    uvicorn.run("pulse.main:app", host="0.0.0.0", port=settings.PORT, reload=True)
