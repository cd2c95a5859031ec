"""
Tests for the fuzzy matcher — normalization, edit distance, obfuscation.
"""

import re

import pytest

from swearcounter.fuzzy import (
    FuzzyMatch,
    ObfuscationPattern,
    find_fuzzy_matches,
    find_obfuscations,
    fuzzy_match,
    get_base_swear_words,
    levenshtein,
    normalize,
    tokenize,
)


VOCAB = get_base_swear_words()


class TestNormalize:

    def test_lowercase(self):
        assert normalize("FUCK") == "fuck"

    def test_strips_obfuscation_symbols(self):
        assert normalize("f***k") == "fk"
        assert normalize("b_i-t#c@h") == "bitch"

    def test_collapses_repeats_to_two(self):
        assert normalize("FUUUUCK") == "fuuck"

    def test_keeps_double_letters(self):
        assert normalize("hell") == "hell"

    @pytest.mark.parametrize("text", [
        "fuuuuuck", "F***K", "$hiiiit", "  spaced  ", "aaa***aaa", "", "bullsh*t",
    ])
    def test_idempotent(self, text):
        once = normalize(text)
        assert normalize(once) == once


class TestLevenshtein:

    def test_classic(self):
        assert levenshtein("kitten", "sitting") == 3

    def test_empty(self):
        assert levenshtein("", "abc") == 3
        assert levenshtein("abc", "") == 3

    def test_identical(self):
        assert levenshtein("fuck", "fuck") == 0


class TestFuzzyMatch:

    def test_exact_match(self):
        result = fuzzy_match("fuck", "fuck", 0.7)
        assert result.match is True
        assert result.score == 1.0

    def test_exact_after_normalization(self):
        assert fuzzy_match("F-U-C-K", "fuck") == (True, 1.0)

    def test_repeat_collapsing(self):
        result = fuzzy_match("fuuuuuck", "fuck", 0.7)
        assert result.match is True
        assert result.score == pytest.approx(0.8)

    def test_length_gate(self):
        assert fuzzy_match("a", "fuckery") == (False, 0.0)

    def test_single_substitution(self):
        result = fuzzy_match("fvck", "fuck")
        assert result.match is True
        assert result.score == pytest.approx(0.75)

    def test_below_threshold(self):
        result = fuzzy_match("duck", "fuck", 0.8)
        assert result.match is False
        assert result.score == pytest.approx(0.75)

    def test_threshold_above_one_rejects_near_miss(self):
        assert fuzzy_match("fvck", "fuck", 1.01).match is False

    def test_threshold_zero_accepts_everything_within_gate(self):
        assert fuzzy_match("xyz", "fuck", 0.0).match is True


class TestTokenize:

    def test_symbols_stay_inside_words(self):
        assert tokenize("f***k this") == ["f***k", "this"]

    def test_empty(self):
        assert tokenize("") == []

    def test_punctuation_splits(self):
        assert tokenize("what, the: heck!") == ["what", "the", "heck"]


class TestObfuscationPatterns:

    def test_asterisks(self):
        matches = find_obfuscations("f***k")
        assert FuzzyMatch(word="f***k", score=0.95, label="fuck") in matches

    def test_leet_bitch(self):
        assert [m.label for m in find_obfuscations("b1tch")] == ["bitch"]

    def test_clean_word(self):
        assert find_obfuscations("code") == []


class TestFindFuzzyMatches:

    def test_obfuscated_asterisks(self):
        matches = find_fuzzy_matches("f***k this", VOCAB, 0.7)
        assert FuzzyMatch(word="f***k", score=0.95, label="fuck") in matches

    def test_bullshit_with_asterisk(self):
        matches = find_fuzzy_matches("This is bullsh*t", VOCAB, 0.7)
        hits = [m for m in matches if m.label == "bullshit"]
        assert hits
        assert hits[0].word == "bullsh*t"
        assert hits[0].score >= 0.7

    def test_no_deduplication(self):
        # Obfuscation hit first, then the exact vocabulary hit
        matches = find_fuzzy_matches("fuck", VOCAB)
        assert matches == [
            FuzzyMatch(word="fuck", score=0.95, label="fuck"),
            FuzzyMatch(word="fuck", score=1.0, label="fuck"),
        ]

    def test_word_keeps_source_case(self):
        matches = find_fuzzy_matches("FUCK", ["fuck"], obfuscation_patterns=[])
        assert matches == [FuzzyMatch(word="FUCK", score=1.0, label="fuck")]

    def test_custom_vocabulary(self):
        matches = find_fuzzy_matches("what the heck", ["heck"], obfuscation_patterns=[])
        assert matches == [FuzzyMatch(word="heck", score=1.0, label="heck")]

    def test_custom_obfuscation_pattern(self):
        patterns = [ObfuscationPattern(base="heck", pattern=re.compile(r"h[e3]ck", re.I))]
        matches = find_fuzzy_matches("h3ck", [], obfuscation_patterns=patterns)
        assert matches == [FuzzyMatch(word="h3ck", score=0.95, label="heck")]

    def test_empty(self):
        assert find_fuzzy_matches("", VOCAB) == []
        assert find_fuzzy_matches("   ", VOCAB) == []

    def test_repeated_calls_identical(self):
        text = "fuuuuuck this sh*t"
        assert find_fuzzy_matches(text, VOCAB) == find_fuzzy_matches(text, VOCAB)

    def test_to_dict(self):
        assert FuzzyMatch("f***k", 0.95, "fuck").to_dict() == {
            "word": "f***k", "score": 0.95, "label": "fuck",
        }


class TestVocabulary:

    def test_no_duplicates(self):
        assert len(VOCAB) == len(set(VOCAB))

    def test_contains_base_words(self):
        assert "bullshit" in VOCAB
        assert "fuck" in VOCAB
