"""
Heuristic Classification Engine

Deterministic keyword and surface-statistics scoring used whenever no real
inference backend is active. Each call is independent; nothing is learned or
persisted between calls.

Scoring steps:
    1. Normalize the text (see classifier.text.normalize_text).
    2. Take the maximum weight of the matching phrases in each pattern table.
    3. Decide the verdict from the two maxima (ties lean productive).
    4. Apply surface overrides that can only push towards "unproductive":
       excessive capitals, then excessive punctuation.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping

from ..models import ClassificationResult, ErrorKind
from .text import normalize_text

logger = logging.getLogger(__name__)

__all__ = [
    "UNPRODUCTIVE_PATTERNS",
    "PRODUCTIVE_PATTERNS",
    "max_pattern_weight",
    "uppercase_ratio",
    "classify_with_heuristics",
]

UNPRODUCTIVE_PATTERNS: Mapping[str, float] = {
    "you won't believe": 0.9,
    "shocking": 0.8,
    "viral": 0.7,
    "trending": 0.7,
    "clickbait": 0.9,
    "drama": 0.7,
    "gossip": 0.8,
    "must see": 0.7,
    "watch this": 0.6,
    "epic fail": 0.8,
    "omg": 0.6,
    "wtf": 0.7,
    "insane": 0.7,
    "crazy": 0.6,
}

PRODUCTIVE_PATTERNS: Mapping[str, float] = {
    "how to": 0.9,
    "tutorial": 0.9,
    "learn": 0.8,
    "education": 0.9,
    "guide": 0.8,
    "research": 0.9,
    "analysis": 0.8,
    "study": 0.8,
    "insight": 0.8,
    "explanation": 0.8,
    "understand": 0.7,
    "science": 0.8,
    "technology": 0.7,
    "knowledge": 0.8,
}

NEUTRAL_CONFIDENCE = 0.6
MIXED_CONFIDENCE = 0.5
CAPS_RATIO_THRESHOLD = 0.5
CAPS_MIN_CONFIDENCE = 0.7
PUNCTUATION_LIMIT = 3
PUNCTUATION_MIN_CONFIDENCE = 0.6


def max_pattern_weight(normalized: str, patterns: Mapping[str, float]) -> float:
    """Largest weight among phrases occurring in `normalized`, 0.0 if none."""
    return max(
        (weight for phrase, weight in patterns.items() if phrase in normalized),
        default=0.0,
    )


def uppercase_ratio(text: str) -> float:
    """Fraction of alphabetic characters that are upper-case."""
    letters = [c for c in text if c.isalpha()]
    if not letters:
        return 0.0
    return sum(1 for c in letters if c.isupper()) / len(letters)


def _score(content: str) -> tuple[bool, float, str]:
    normalized = normalize_text(content)
    unproductive = max_pattern_weight(normalized, UNPRODUCTIVE_PATTERNS)
    productive = max_pattern_weight(normalized, PRODUCTIVE_PATTERNS)

    if productive > unproductive:
        is_productive, confidence, reason = True, productive, "educational_keywords"
    elif unproductive > productive:
        is_productive, confidence, reason = False, unproductive, "unproductive_keywords"
    elif productive > 0 and unproductive > 0:
        is_productive, confidence, reason = True, MIXED_CONFIDENCE, "mixed_content"
    else:
        is_productive, confidence, reason = True, NEUTRAL_CONFIDENCE, "neutral_content"

    # Surface statistics read the original, un-normalized text
    if uppercase_ratio(content) > CAPS_RATIO_THRESHOLD:
        is_productive = False
        confidence = max(confidence, CAPS_MIN_CONFIDENCE)
        reason = "excessive_caps"

    if content.count("!") > PUNCTUATION_LIMIT or content.count("?") > PUNCTUATION_LIMIT:
        is_productive = False
        confidence = max(confidence, PUNCTUATION_MIN_CONFIDENCE)
        reason = "excessive_punctuation"

    return is_productive, confidence, reason


def classify_with_heuristics(content: str | bytes) -> ClassificationResult:
    """
    Classify content using keyword tables and surface statistics.

    Args:
        content: Raw text. Bytes are decoded as strict UTF-8; a decoding
            failure is reported as an internal fault.

    Returns:
        ClassificationResult; `success` is False for empty input or an
        internal fault, never raised.
    """
    t0 = time.perf_counter()

    if not content:
        return ClassificationResult.failure(ErrorKind.EMPTY_INPUT, "empty content")

    try:
        text = content.decode("utf-8") if isinstance(content, bytes) else content
        is_productive, confidence, reason = _score(text)
    except Exception as e:
        logger.error(f"Heuristic classification failed: {e}")
        return ClassificationResult.failure(
            ErrorKind.INTERNAL_FAULT,
            str(e) or type(e).__name__,
            processing_time=time.perf_counter() - t0,
        )

    return ClassificationResult(
        is_productive=is_productive,
        confidence=confidence,
        reason=reason,
        processing_time=time.perf_counter() - t0,
        success=True,
    )
