"""
Preview padding policies.

Short provider snippets make feed cards look uneven next to full-length
descriptions. ``PreviewPadding`` appends sentences from a fixed pool of
generic editorial boilerplate until a snippet reaches a minimum length.

Content integrity: the filler is not taken from the article and states no
facts about it. Disable it with ``PREVIEW_PADDING_ENABLED=false`` (or inject
``NoPadding``) wherever descriptions must contain provider text only.
"""
from __future__ import annotations

import random
from typing import Optional, Protocol, Sequence

FILLER_SENTENCES: tuple[str, ...] = (
    "The story is still developing and further details are expected as more information becomes available.",
    "Readers can follow the full report at the original source for additional context and background.",
    "Analysts and observers are watching closely to see how the situation unfolds over the coming days.",
    "Officials have not yet released a complete statement, and updates may follow later today.",
    "The development has drawn attention from people across the sector and beyond.",
    "More coverage, reactions and analysis are available through the publisher's full article.",
    "Questions remain about the long-term impact, and experts expect the discussion to continue.",
    "This summary reflects the information available at the time of publication.",
)


class PaddingPolicy(Protocol):
    def apply(self, text: str) -> str:
        ...


class NoPadding:
    """Leaves descriptions untouched."""

    def apply(self, text: str) -> str:
        return text


class PreviewPadding:
    """Appends two or three filler sentences, more while the text is still short."""

    def __init__(
        self,
        min_length: int = 400,
        pool: Sequence[str] = FILLER_SENTENCES,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.min_length = min_length
        self.pool = tuple(pool)
        self._rng = rng or random.Random()

    def apply(self, text: str) -> str:
        if len(text) >= self.min_length or not self.pool:
            return text

        remaining = self._rng.sample(self.pool, len(self.pool))
        wanted = self._rng.randint(2, 3)
        padded = text.rstrip()
        added = 0
        while remaining and (added < wanted or len(padded) < self.min_length):
            sentence = remaining.pop()
            padded = f"{padded} {sentence}" if padded else sentence
            added += 1
        return padded


def build_padding(enabled: bool, min_length: int) -> PaddingPolicy:
    return PreviewPadding(min_length=min_length) if enabled else NoPadding()
