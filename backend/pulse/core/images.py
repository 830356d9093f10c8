"""
Fallback images for articles that arrive without one.

The rules are plain data: the first rule whose keywords appear in the title
wins, then the rule registered for the item's category, then the generic
world-news image.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ImageRule:
    topic: str
    keywords: tuple[str, ...]
    image_url: str
    categories: tuple[str, ...] = ()


def _unsplash(photo_id: str) -> str:
    return f"https://images.unsplash.com/{photo_id}?w=800&q=80"


# Priority order matters: specific topics before generic ones
IMAGE_RULES: tuple[ImageRule, ...] = (
    ImageRule(
        "technology",
        ("technology", "tech", "ai", "artificial intelligence", "software", "computer",
         "smartphone", "iphone", "android", "robot", "chip", "cyber", "internet", "app"),
        _unsplash("photo-1488590528505-98d2b5aba04b"),
        ("technology",),
    ),
    ImageRule(
        "business",
        ("business", "market", "markets", "stock", "stocks", "economy", "economic",
         "finance", "bank", "trade", "investor", "earnings", "company", "merger"),
        _unsplash("photo-1611974789855-9c2a0a7236a3"),
        ("business",),
    ),
    ImageRule(
        "sports",
        ("sport", "sports", "football", "soccer", "basketball", "tennis", "olympic",
         "championship", "league", "match", "cricket", "marathon", "nba", "nfl"),
        _unsplash("photo-1461896836934-ffe607ba8211"),
        ("sports",),
    ),
    ImageRule(
        "health",
        ("health", "medical", "medicine", "hospital", "disease", "vaccine", "doctor",
         "cancer", "drug", "diet", "mental health", "virus"),
        _unsplash("photo-1576091160399-112ba8d25d1d"),
        ("health",),
    ),
    ImageRule(
        "entertainment",
        ("entertainment", "movie", "film", "music", "celebrity", "hollywood", "concert",
         "album", "box office", "streaming", "tv", "grammy", "oscar"),
        _unsplash("photo-1514525253161-7a46d19cd819"),
        ("entertainment",),
    ),
    ImageRule(
        "science",
        ("space", "nasa", "mars", "moon", "planet", "rocket", "astronaut", "galaxy",
         "science", "scientists", "research", "discovery"),
        _unsplash("photo-1446776811953-b23d57bd21aa"),
        ("science",),
    ),
    ImageRule(
        "climate",
        ("climate", "environment", "emissions", "carbon", "weather", "wildfire",
         "flood", "renewable", "solar"),
        _unsplash("photo-1569163139394-de4e4f43e4e3"),
    ),
    ImageRule(
        "politics",
        ("politics", "political", "election", "elections", "government", "president",
         "senate", "congress", "parliament", "minister", "vote", "policy"),
        _unsplash("photo-1529107386315-e1a2ed48a620"),
    ),
)

WORLD_NEWS_IMAGE = _unsplash("photo-1504711434969-e33886168f5c")
BREAKING_NEWS_IMAGE = _unsplash("photo-1495020689067-958852a7765e")

CATEGORY_IMAGES: dict[str, str] = {
    category: rule.image_url for rule in IMAGE_RULES for category in rule.categories
}
CATEGORY_IMAGES["breaking"] = BREAKING_NEWS_IMAGE


def _matches(text: str, keyword: str) -> bool:
    return re.search(rf"\b{re.escape(keyword)}\b", text) is not None


def keyword_image(title: str) -> Optional[str]:
    """Return the image of the first rule with a keyword in ``title``."""
    text = (title or "").lower()
    for rule in IMAGE_RULES:
        if any(_matches(text, keyword) for keyword in rule.keywords):
            return rule.image_url
    return None


def resolve_image(image_url: Optional[str], title: str, category: Optional[str] = None) -> str:
    """
    Pick the display image for an article.

    Args:
        image_url: Image supplied by the provider, if any
        title: Article title, scanned for topic keywords
        category: Requested category, used when no keyword matches

    Returns:
        The provider image, a keyword or category stock image, or the world-news image
    """
    if image_url and image_url.strip():
        return image_url.strip()
    return keyword_image(title) or CATEGORY_IMAGES.get(category or "", WORLD_NEWS_IMAGE)
