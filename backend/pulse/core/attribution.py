"""
Removal of wire-source attributions from article text.

Handles the trailing "Headline - Publisher" suffix used by aggregators and
the inline attribution phrases ("Reuters reports", "According to ...,") that
publishers leave in syndicated copy.
"""
from __future__ import annotations

import re
from typing import FrozenSet, Iterable, List, Optional, Pattern

# Publishers whose inline attributions and trailing suffixes are stripped
KNOWN_PUBLISHERS: tuple[str, ...] = (
    "BBC News", "Reuters", "CNN", "The Guardian", "Wall Street Journal", "Bloomberg",
    "TechCrunch", "New York Times", "The Verge", "Engadget", "Associated Press",
    "AP News", "Fox News", "NBC News", "CBS News", "ABC News", "USA Today",
    "The Washington Post", "The Times", "Forbes", "Business Insider", "The Independent",
    "Daily Mail", "The Telegraph", "Sky News", "ITV News", "Channel 4 News", "Al Jazeera",
    "Financial Times", "The Economist", "Time", "Newsweek", "The Atlantic", "Politico",
    "Axios", "The Hill", "Vox", "BuzzFeed", "HuffPost", "Mashable", "Gizmodo", "Wired",
    "Ars Technica", "TechRadar", "CNET", "ZDNet", "PC Mag", "Digital Trends", "BBC Sport",
    "BBC", "Yahoo News", "Yahoo Finance", "CNBC", "NPR", "Los Angeles Times", "The New York Times",
)

ATTRIBUTION_VERBS: tuple[str, ...] = (
    "reports", "reported", "says", "said", "states", "stated", "confirms", "confirmed",
    "reveals", "revealed", "announces", "announced", "claims", "claimed", "notes", "noted",
    "writes", "wrote", "explains", "explained", "adds", "added", "tells", "told",
    "warns", "warned", "points out", "pointed out",
)

_MAX_SUFFIX_CHARS = 40


def _alternation(words: tuple[str, ...]) -> str:
    # Longest first so "BBC News" wins over a shorter overlapping name
    return "|".join(re.escape(w) for w in sorted(words, key=len, reverse=True))


_PUBLISHERS = _alternation(KNOWN_PUBLISHERS)
_VERBS = _alternation(ATTRIBUTION_VERBS)
_KNOWN_NAMES = frozenset(name.lower() for name in KNOWN_PUBLISHERS)

_INLINE_PATTERNS: List[Pattern[str]] = [
    re.compile(r"\bAccording to\s+[A-Z][^.,\n]{0,50}?\s*[.,]", re.IGNORECASE),
    re.compile(rf"\b(?:{_PUBLISHERS})\s+(?:{_VERBS})(?:\s+that)?\s*[,:.]?[ \t]*"),
    re.compile(r"\bSource:\s*[A-Z][^.,\n]{0,50}?\s*[.,]"),
    re.compile(rf"\bFrom\s+(?:{_PUBLISHERS})\s*[,:.]?[ \t]*"),
    re.compile(rf"\b(?:{_PUBLISHERS})\s+according to\s+"),
    re.compile(rf"^(?:{_PUBLISHERS})\s*[-–—]\s*"),
]

_TRAILING_SUFFIX = re.compile(r"\s+[-–—|]\s+(?P<name>[^-–—|\n]+?)\s*$")
_DOMAIN_LIKE = re.compile(r"^[\w-]+(\.[\w-]+)*\.[a-z]{2,}$", re.IGNORECASE)


def _is_publisher(name: str, extra: FrozenSet[str]) -> bool:
    name = name.strip()
    if not name or len(name) > _MAX_SUFFIX_CHARS:
        return False
    key = name.lower()
    return key in _KNOWN_NAMES or key in extra or bool(_DOMAIN_LIKE.match(name))


def _strip_trailing_suffix(text: str, extra: FrozenSet[str]) -> str:
    match = _TRAILING_SUFFIX.search(text)
    if match and _is_publisher(match.group("name"), extra):
        return text[: match.start()]
    return text


def _tidy(text: str) -> str:
    text = re.sub(r"[ \t]{2,}", " ", text)
    text = re.sub(r"^[\s,:;\-–—]+", "", text)
    return re.sub(r"[\s,:;\-–—]+$", "", text)


def _clean_once(text: str, extra: FrozenSet[str]) -> str:
    cleaned = text
    for pattern in _INLINE_PATTERNS:
        cleaned = pattern.sub("", cleaned)
    cleaned = _strip_trailing_suffix(cleaned, extra)
    if cleaned == text:
        return text
    return _tidy(cleaned)


def clean(text: str, publishers: Iterable[Optional[str]] = ()) -> str:
    """
    Strip source attributions from ``text``.

    A trailing " - Name" suffix is removed only when Name is a known
    publisher, one of ``publishers`` (e.g. the feed entry's own source) or a
    domain. Text without any attribution is returned unchanged. Stripping
    repeats until nothing else matches, so cleaning is idempotent.
    """
    if not text:
        return text
    extra = frozenset(p.strip().lower() for p in publishers if p and p.strip())
    while True:
        cleaned = _clean_once(text, extra)
        if cleaned == text:
            return text
        text = cleaned
