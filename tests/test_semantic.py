"""
Tests for the semantic scorer — idioms, keywords, punctuation, fusion.
"""

import re

import pytest

from swearcounter.semantic import (
    SemanticCategory,
    SemanticMatch,
    analyze_message,
    detect_hostile_punctuation,
    detect_indirect_swearing,
    fuse_scores,
    has_indirect_swearing,
    match_semantic_patterns,
    score_keywords,
)


class TestIdiomPatterns:

    def test_makes_no_sense(self):
        matches = match_semantic_patterns("This makes no sense!!!")
        assert matches == [
            SemanticMatch("makes no sense", SemanticCategory.FRUSTRATION, 0.8),
        ]

    def test_every_occurrence_recorded(self):
        matches = match_semantic_patterns("I give up. I give up.")
        assert len(matches) == 2
        assert all(m.category is SemanticCategory.SURRENDER for m in matches)

    def test_phrase_in_two_categories(self):
        matches = match_semantic_patterns("Are you serious right now")
        assert [m.category for m in matches] == [
            SemanticCategory.HOSTILITY,
            SemanticCategory.ANGER,
        ]

    def test_why_doesnt_this_work(self):
        matches = match_semantic_patterns("Why doesn't this work AGAIN")
        assert matches[0].phrase == "Why doesn't this work"
        assert matches[0].category is SemanticCategory.FRUSTRATION

    def test_command(self):
        matches = match_semantic_patterns("just fix it now")
        assert SemanticCategory.COMMANDS in {m.category for m in matches}


class TestKeywordScore:

    def test_severe(self):
        assert score_keywords("This is unacceptable") == pytest.approx(1.0)

    def test_moderate(self):
        assert score_keywords("this is wrong") == pytest.approx(0.7)

    def test_presence_not_frequency(self):
        assert score_keywords("wrong wrong wrong") == pytest.approx(0.7)

    def test_clamped(self):
        assert score_keywords("wrong and broken and useless") == 1.0

    def test_monotonic(self):
        one = score_keywords("I am confused")
        two = score_keywords("I am confused and this is difficult")
        three = score_keywords("I am confused and this is difficult and pathetic")
        assert one == pytest.approx(0.4)
        assert two == pytest.approx(0.8)
        assert one <= two <= three <= 1.0

    def test_case_insensitive(self):
        assert score_keywords("POINTLESS") == pytest.approx(0.7)

    def test_custom_table(self):
        assert score_keywords("meh", {"meh": 0.3}) == pytest.approx(0.3)


class TestHostilePunctuation:

    def test_double_question(self):
        assert detect_hostile_punctuation("What??") == pytest.approx(0.2)

    def test_double_exclamation(self):
        assert detect_hostile_punctuation("Stop!!") == pytest.approx(0.2)

    def test_mixed_run(self):
        assert detect_hostile_punctuation("Why?!?") == pytest.approx(0.3)

    def test_triple_exclamation(self):
        assert detect_hostile_punctuation("No sense!!!") == pytest.approx(0.5)

    def test_caps_words(self):
        # AT is too short to count
        assert detect_hostile_punctuation("NOT WORKING AT ALL") == pytest.approx(0.45)

    def test_clamped(self):
        text = "STOP STOP STOP STOP STOP STOP STOP!!!"
        assert detect_hostile_punctuation(text) == 1.0

    def test_calm(self):
        assert detect_hostile_punctuation("Can you explain this?") == 0.0


class TestFusion:

    def test_weights(self):
        assert fuse_scores(True, 1.0, 1.0) == pytest.approx(1.0)
        assert fuse_scores(False, 1.0, 0.0) == pytest.approx(0.3)
        assert fuse_scores(False, 0.0, 1.0) == pytest.approx(0.1)

    def test_threshold_boundary_example(self):
        result = detect_indirect_swearing("This makes no sense!!!", 0.5)
        assert result.total_score == pytest.approx(0.65)
        assert result.total_score > 0.5
        assert result.is_indirect_swearing is True

    def test_zero_lower_bound(self):
        result = detect_indirect_swearing("The build finished in three minutes.")
        assert result.matches == []
        assert result.total_score == 0

    def test_idiom_is_flat(self):
        once = detect_indirect_swearing("I give up")
        twice = detect_indirect_swearing("I give up. I give up.")
        assert once.total_score == pytest.approx(0.6)
        assert twice.total_score == pytest.approx(0.6)

    def test_strictly_greater_than_threshold(self):
        result = detect_indirect_swearing("I give up", threshold=0.6)
        assert result.total_score == 0.6
        assert result.is_indirect_swearing is False

    def test_has_indirect_swearing_override(self):
        result = detect_indirect_swearing("I give up")
        assert has_indirect_swearing(result) is True
        assert has_indirect_swearing(result, 0.6) is False
        assert has_indirect_swearing(result, 0.59) is True

    def test_empty_and_whitespace(self):
        for text in ("", "   \n\t"):
            result = detect_indirect_swearing(text)
            assert result.matches == []
            assert result.total_score == 0

    def test_custom_tables(self):
        result = detect_indirect_swearing(
            "heck",
            patterns={SemanticCategory.ANGER: (re.compile("heck", re.I),)},
            keywords={},
        )
        assert result.total_score == pytest.approx(0.6)
        assert result.matches == [SemanticMatch("heck", SemanticCategory.ANGER)]

    def test_repeated_calls_identical(self):
        text = "What is wrong with you???"
        a = detect_indirect_swearing(text)
        b = detect_indirect_swearing(text)
        assert a.matches == b.matches
        assert a.total_score == b.total_score


class TestAnalyzeMessage:

    def test_breakdown(self):
        analysis = analyze_message("You're useless!!")
        assert analysis.has_indirect_swearing is True
        assert analysis.pattern_count == 1
        assert analysis.keyword_score == pytest.approx(0.7)
        assert analysis.punctuation_score == pytest.approx(0.2)
        assert analysis.score == pytest.approx(0.83)

    def test_to_dict(self):
        data = analyze_message("I give up").to_dict()
        assert data["matches"] == [
            {"phrase": "I give up", "category": "surrender", "score": 0.8},
        ]
        assert data["details"]["patterns"] == 1

    def test_polite_text(self):
        analysis = analyze_message("Thank you for helping")
        assert analysis.has_indirect_swearing is False
        assert analysis.score == 0
