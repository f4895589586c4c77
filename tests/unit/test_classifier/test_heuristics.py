"""
Unit tests for the heuristic classification engine.
"""

import pytest

from lumen_focus.classifier.heuristics import (
    PRODUCTIVE_PATTERNS,
    UNPRODUCTIVE_PATTERNS,
    classify_with_heuristics,
    max_pattern_weight,
    uppercase_ratio,
)
from lumen_focus.models import ErrorKind


class TestPatternScoring:
    """Keyword table scoring and verdict selection."""

    def test_tutorial_is_productive(self):
        result = classify_with_heuristics("tutorial")

        assert result.success
        assert result.is_productive
        assert result.confidence == pytest.approx(0.9)
        assert result.reason == "educational_keywords"

    def test_clickbait_is_unproductive(self):
        result = classify_with_heuristics("you won't believe")

        assert result.success
        assert not result.is_productive
        assert result.confidence == pytest.approx(0.9)
        assert result.reason == "unproductive_keywords"

    def test_matching_is_case_insensitive(self):
        result = classify_with_heuristics("Learn about Gossip")

        # learn 0.8 vs gossip 0.8
        assert result.is_productive
        assert result.reason == "mixed_content"

    def test_equal_maxima_give_mixed_content(self):
        result = classify_with_heuristics("learn why this is shocking")

        assert result.is_productive
        assert result.confidence == pytest.approx(0.5)
        assert result.reason == "mixed_content"

    def test_highest_weight_wins(self):
        result = classify_with_heuristics("a research paper that went viral")

        assert result.is_productive
        assert result.confidence == pytest.approx(0.9)

    def test_no_match_is_neutral(self):
        result = classify_with_heuristics("The weather today is mild")

        assert result.is_productive
        assert result.confidence == pytest.approx(0.6)
        assert result.reason == "neutral_content"

    def test_keyword_beyond_cap_is_ignored(self):
        result = classify_with_heuristics("a " * 300 + "tutorial")

        assert result.reason == "neutral_content"

    def test_max_pattern_weight(self):
        assert max_pattern_weight("how to study", PRODUCTIVE_PATTERNS) == 0.9
        assert max_pattern_weight("nothing here", UNPRODUCTIVE_PATTERNS) == 0.0


class TestSurfaceOverrides:
    """Capitalization and punctuation overrides."""

    def test_mostly_uppercase_is_unproductive(self):
        # 8 of 10 letters upper-case
        result = classify_with_heuristics("ABCDEFGHij")

        assert not result.is_productive
        assert result.confidence == pytest.approx(0.7)
        assert result.reason == "excessive_caps"

    def test_caps_keeps_higher_confidence(self):
        result = classify_with_heuristics("HOW TO STUDY FOR EXAMS")

        assert not result.is_productive
        assert result.confidence == pytest.approx(0.9)
        assert result.reason == "excessive_caps"

    def test_excessive_exclamation_marks(self):
        result = classify_with_heuristics("What?!!!! Really")

        assert not result.is_productive
        assert result.confidence == pytest.approx(0.6)
        assert result.reason == "excessive_punctuation"

    def test_excessive_question_marks(self):
        result = classify_with_heuristics("is this a guide????")

        assert not result.is_productive
        assert result.confidence == pytest.approx(0.8)
        assert result.reason == "excessive_punctuation"

    def test_punctuation_applies_after_caps(self):
        result = classify_with_heuristics("WOW!!!!")

        assert not result.is_productive
        assert result.confidence == pytest.approx(0.7)
        assert result.reason == "excessive_punctuation"

    def test_three_marks_are_allowed(self):
        result = classify_with_heuristics("Great guide!!!")

        assert result.is_productive
        assert result.reason == "educational_keywords"

    def test_uppercase_ratio(self):
        assert uppercase_ratio("ABcd") == pytest.approx(0.5)
        assert uppercase_ratio("1234 !!") == 0.0


class TestInputHandling:
    """Empty, binary and invalid input."""

    @pytest.mark.parametrize("content", ["", b""])
    def test_empty_input_fails(self, content):
        result = classify_with_heuristics(content)

        assert not result.success
        assert result.error_kind == ErrorKind.EMPTY_INPUT
        assert result.reason == "empty content"
        assert result.error == "empty content"

    def test_utf8_bytes_are_decoded(self):
        result = classify_with_heuristics("Python tutorial".encode("utf-8"))

        assert result.success
        assert result.is_productive

    def test_invalid_utf8_is_internal_fault(self):
        result = classify_with_heuristics(b"\xff\xfe\xfa")

        assert not result.success
        assert result.error_kind == ErrorKind.INTERNAL_FAULT
        assert result.error

    def test_processing_time_recorded(self):
        result = classify_with_heuristics("a guide to gardening")

        assert result.processing_time >= 0.0
        assert isinstance(result.processing_time_ms, int)

    def test_deterministic(self, sample_texts):
        for text, expected in sample_texts.values():
            first = classify_with_heuristics(text)
            second = classify_with_heuristics(text)
            assert first.is_productive is expected
            assert (first.is_productive, first.confidence, first.reason) == (
                second.is_productive,
                second.confidence,
                second.reason,
            )
