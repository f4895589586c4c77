"""
Unit tests for the shared result and context types.
"""

import json
from dataclasses import FrozenInstanceError

import pytest

from lumen_focus.models import (
    ClassificationContext,
    ClassificationResult,
    ContentCategory,
    ErrorKind,
)


class TestClassificationResult:
    def test_success_serialization(self):
        result = ClassificationResult(
            is_productive=True,
            confidence=0.9,
            reason="educational_keywords",
            processing_time=0.0123,
        )

        assert result.as_dict() == {
            "success": True,
            "is_productive": True,
            "confidence": 0.9,
            "reason": "educational_keywords",
            "processing_time_ms": 12,
        }

    def test_failure_serialization_includes_error(self):
        result = ClassificationResult.failure(ErrorKind.EMPTY_INPUT, "empty content")
        data = json.loads(result.to_json())

        assert data["success"] is False
        assert data["error"] == "empty content"
        assert data["reason"] == "empty content"
        assert isinstance(data["processing_time_ms"], int)

    def test_failure_with_custom_reason(self):
        result = ClassificationResult.failure(
            ErrorKind.INTERNAL_FAULT, "division by zero", reason="engine_error"
        )

        assert result.reason == "engine_error"
        assert result.error == "division by zero"
        assert result.error_kind == ErrorKind.INTERNAL_FAULT

    def test_failure_never_has_empty_error(self):
        result = ClassificationResult.failure(ErrorKind.INTERNAL_FAULT, "")

        assert result.error == "internal_fault"

    def test_with_processing_time(self):
        result = ClassificationResult(True, 0.6, "neutral_content")
        timed = result.with_processing_time(1.5)

        assert timed.processing_time_ms == 1500
        assert result.processing_time == 0.0

    def test_is_immutable(self):
        result = ClassificationResult()
        with pytest.raises(FrozenInstanceError):
            result.confidence = 1.0


class TestClassificationContext:
    def test_defaults(self):
        ctx = ClassificationContext()

        assert ctx.app_package == ""
        assert ctx.category == ContentCategory.UNKNOWN
        assert ctx.language == "en"
        assert ctx.content_length == 0

    def test_hashable(self):
        a = ClassificationContext(app_package="x", content_length=3)
        b = ClassificationContext(app_package="x", content_length=3)

        assert {a: 1}[b] == 1


def test_category_values():
    assert [c.value for c in ContentCategory] == [
        "news",
        "entertainment",
        "educational",
        "social",
        "commercial",
        "unknown",
    ]
