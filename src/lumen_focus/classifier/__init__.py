"""
Classifier package: heuristic scoring, category detection and context adjustment.
"""

from .category import detect_category, get_content_category_name
from .context import apply_context_adjustments, build_context, classify_with_context
from .heuristics import classify_with_heuristics
from .text import (
    generate_classification_prompt,
    normalize_text,
    prepare_content_for_analysis,
)

__all__ = [
    "classify_with_heuristics",
    "classify_with_context",
    "apply_context_adjustments",
    "build_context",
    "detect_category",
    "get_content_category_name",
    "normalize_text",
    "prepare_content_for_analysis",
    "generate_classification_prompt",
]
