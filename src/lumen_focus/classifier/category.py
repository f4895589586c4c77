"""
Content Category Detector.

Pure function from text to a coarse ContentCategory, scored by the number of
distinct keyword phrases each category matches.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..models import ContentCategory
from .text import normalize_text

NEWS_KEYWORDS = (
    "breaking",
    "news",
    "report",
    "according to",
    "sources say",
    "announcement",
    "official",
    "statement",
    "update",
)

EDUCATIONAL_KEYWORDS = (
    "learn",
    "tutorial",
    "how to",
    "guide",
    "explanation",
    "research",
    "study",
    "analysis",
    "science",
    "education",
)

ENTERTAINMENT_KEYWORDS = (
    "funny",
    "hilarious",
    "meme",
    "viral",
    "trending",
    "celebrity",
    "movie",
    "music",
    "game",
    "fun",
)

COMMERCIAL_KEYWORDS = (
    "buy",
    "sale",
    "discount",
    "offer",
    "deal",
    "price",
    "product",
    "review",
    "sponsored",
    "ad",
)

# Tie-break priority: earlier categories win equal scores.
_SCORED_CATEGORIES: tuple[tuple[ContentCategory, tuple[str, ...]], ...] = (
    (ContentCategory.NEWS, NEWS_KEYWORDS),
    (ContentCategory.EDUCATIONAL, EDUCATIONAL_KEYWORDS),
    (ContentCategory.ENTERTAINMENT, ENTERTAINMENT_KEYWORDS),
    (ContentCategory.COMMERCIAL, COMMERCIAL_KEYWORDS),
)


def count_keywords(normalized: str, keywords: Iterable[str]) -> int:
    """Number of distinct phrases present; repeats count once."""
    return sum(1 for keyword in set(keywords) if keyword in normalized)


def category_scores(content: str) -> dict[ContentCategory, int]:
    normalized = normalize_text(content)
    return {
        category: count_keywords(normalized, keywords)
        for category, keywords in _SCORED_CATEGORIES
    }


def detect_category(content: str) -> ContentCategory:
    """
    Detect the coarse topic of `content`.

    A zero best score yields UNKNOWN; ties resolve in the order news,
    educational, entertainment, commercial; SOCIAL is the final fallback.
    """
    scores = category_scores(content)
    best = max(scores.values())
    if best == 0:
        return ContentCategory.UNKNOWN

    for category, _ in _SCORED_CATEGORIES:
        if scores[category] == best:
            return category

    return ContentCategory.SOCIAL


def get_content_category_name(content: str) -> str:
    return detect_category(content).value
