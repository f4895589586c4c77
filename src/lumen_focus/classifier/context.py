"""
Context Adjustment

Second, contextual layer applied on top of a base classification result.
Rules run in a fixed order (app, category, length). Each one only moves the
confidence (clamped to 1.0) and appends a suffix to the reason; none of them
flips the verdict.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from ..models import ClassificationContext, ClassificationResult, ContentCategory
from .category import detect_category
from .heuristics import classify_with_heuristics

logger = logging.getLogger(__name__)

__all__ = [
    "PROFESSIONAL_APP_PATTERNS",
    "SHORT_VIDEO_APP_PATTERNS",
    "build_context",
    "apply_context_adjustments",
    "classify_with_context",
]

PROFESSIONAL_APP_PATTERNS = ("linkedin",)
SHORT_VIDEO_APP_PATTERNS = ("tiktok", "musically")

SHORT_CONTENT_LENGTH = 50
LONG_CONTENT_LENGTH = 500


def build_context(
    content: str, app_package: str = "", language: str = "en"
) -> ClassificationContext:
    """Derive a context (category, length) from the raw content."""
    return ClassificationContext(
        app_package=app_package,
        category=detect_category(content),
        language=language,
        content_length=len(content),
    )


def _boost(confidence: float, amount: float) -> float:
    return min(1.0, confidence + amount)


def apply_context_adjustments(
    result: ClassificationResult, context: ClassificationContext
) -> ClassificationResult:
    """
    Adjust a successful result using the caller-supplied context.

    Failed results are returned unchanged.
    """
    if not result.success:
        return result

    confidence = result.confidence
    reason = result.reason
    productive = result.is_productive
    app = context.app_package.lower()

    if any(p in app for p in PROFESSIONAL_APP_PATTERNS):
        if productive:
            confidence = _boost(confidence, 0.2)
            reason += "_linkedin_boost"
    elif any(p in app for p in SHORT_VIDEO_APP_PATTERNS):
        if not productive:
            confidence = _boost(confidence, 0.1)
            reason += "_tiktok_penalty"

    if context.category == ContentCategory.EDUCATIONAL and productive:
        confidence = _boost(confidence, 0.15)
        reason += "_educational_boost"
    elif context.category == ContentCategory.ENTERTAINMENT and not productive:
        confidence = _boost(confidence, 0.1)
        reason += "_entertainment_penalty"
    elif context.category == ContentCategory.COMMERCIAL and not productive:
        confidence = _boost(confidence, 0.2)
        reason += "_commercial_penalty"

    if context.content_length < SHORT_CONTENT_LENGTH:
        confidence *= 0.8
        reason += "_short_content"
    elif context.content_length > LONG_CONTENT_LENGTH and productive:
        confidence = _boost(confidence, 0.1)
        reason += "_long_content_boost"

    return replace(result, confidence=confidence, reason=reason)


def classify_with_context(
    content: str, context: ClassificationContext
) -> ClassificationResult:
    """Heuristic classification followed by context adjustment."""
    logger.debug(
        f"Classifying with context: app={context.app_package}, "
        f"category={context.category.value}"
    )
    return apply_context_adjustments(classify_with_heuristics(content), context)
