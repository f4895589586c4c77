"""
Text preparation shared by the heuristic engine and the llama.cpp prompt builder.
"""

from __future__ import annotations

import re

__all__ = [
    "MAX_CONTENT_LENGTH",
    "TRUNCATION_MARKER",
    "normalize_text",
    "prepare_content_for_analysis",
    "generate_classification_prompt",
]

MAX_CONTENT_LENGTH = 500
TRUNCATION_MARKER = "..."

_WHITESPACE_RE = re.compile(r"\s+")

CLASSIFICATION_PROMPT = """\
You are a content classifier for a productivity app. Classify the following \
social media content as PRODUCTIVE or UNPRODUCTIVE.

PRODUCTIVE content: educational, informative, constructive, helpful
UNPRODUCTIVE content: clickbait, gossip, drama, time-wasting

Content: "{content}"

Respond with only: PRODUCTIVE or UNPRODUCTIVE
Classification:"""


def _truncate(text: str) -> str:
    if len(text) > MAX_CONTENT_LENGTH:
        return text[:MAX_CONTENT_LENGTH] + TRUNCATION_MARKER
    return text


def prepare_content_for_analysis(raw_content: str) -> str:
    """Collapse whitespace, trim and cap the content length."""
    content = _WHITESPACE_RE.sub(" ", raw_content).strip()
    return _truncate(content)


def normalize_text(raw_content: str) -> str:
    """
    Normalize content for keyword matching.

    Lower-cases, collapses whitespace runs to a single space, trims and caps
    the length at MAX_CONTENT_LENGTH characters (TRUNCATION_MARKER appended).
    """
    return prepare_content_for_analysis(raw_content.lower())


def generate_classification_prompt(content: str) -> str:
    return CLASSIFICATION_PROMPT.format(content=prepare_content_for_analysis(content))
