"""
Common dataclasses and types for Lumen-Focus.

This module provides the shared data structures that flow between the
classification engine, the backends and the lifecycle manager:

- ContentCategory: coarse topic label derived from raw text
- ErrorKind: machine-readable failure categories carried by results
- ClassificationContext: per-call context (originating app, category, length)
- ClassificationResult: verdict + confidence + reason tag, serializable for
  the platform bridge
"""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass, replace
from typing import Any

__all__ = [
    "ContentCategory",
    "ErrorKind",
    "ClassificationContext",
    "ClassificationResult",
]


class ContentCategory(str, enum.Enum):
    """Closed set of coarse content topics."""

    NEWS = "news"
    ENTERTAINMENT = "entertainment"
    EDUCATIONAL = "educational"
    SOCIAL = "social"
    COMMERCIAL = "commercial"
    UNKNOWN = "unknown"


class ErrorKind(str, enum.Enum):
    """Failure categories returned by value instead of raised past a boundary."""

    NOT_LOADED = "not_loaded"
    EMPTY_INPUT = "empty_input"
    LOAD_FAILURE = "load_failure"
    VALIDATION_FAILURE = "validation_failure"
    INTERNAL_FAULT = "internal_fault"


@dataclass(frozen=True)
class ClassificationContext:
    """
    Transient context supplied alongside a piece of content.

    Attributes:
        app_package: Identifier of the originating application
            (e.g., "com.linkedin.android").
        category: Detected content category.
        language: ISO language code of the content.
        content_length: Length of the raw content in characters.
    """

    app_package: str = ""
    category: ContentCategory = ContentCategory.UNKNOWN
    language: str = "en"
    content_length: int = 0


@dataclass(frozen=True)
class ClassificationResult:
    """
    Outcome of a single classification call.

    When `success` is False, `is_productive` and `confidence` carry no meaning
    and `error` holds a non-empty message.
    """

    is_productive: bool = False
    confidence: float = 0.0
    reason: str = ""
    processing_time: float = 0.0  # seconds
    success: bool = True
    error: str | None = None
    error_kind: ErrorKind | None = None

    @classmethod
    def failure(
        cls,
        kind: ErrorKind,
        error: str,
        reason: str | None = None,
        processing_time: float = 0.0,
    ) -> "ClassificationResult":
        """Build a failed result; `reason` defaults to the error message."""
        message = error or kind.value
        return cls(
            is_productive=False,
            confidence=0.0,
            reason=reason or message,
            processing_time=processing_time,
            success=False,
            error=message,
            error_kind=kind,
        )

    @property
    def processing_time_ms(self) -> int:
        return int(self.processing_time * 1000)

    def with_processing_time(self, seconds: float) -> "ClassificationResult":
        return replace(self, processing_time=seconds)

    def as_dict(self) -> dict[str, Any]:
        """
        Flat record consumed by the platform bridge.

        `error` is present only when `success` is False.
        """
        data: dict[str, Any] = {
            "success": self.success,
            "is_productive": self.is_productive,
            "confidence": self.confidence,
            "reason": self.reason,
            "processing_time_ms": self.processing_time_ms,
        }
        if not self.success:
            data["error"] = self.error or ""
        return data

    def to_json(self) -> str:
        return json.dumps(self.as_dict())
