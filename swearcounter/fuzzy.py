"""
Fuzzy Matcher — obfuscated and misspelled swear words.

Two independent detection paths run over every token:

  1. Obfuscation patterns — hand-tuned regexes per base word that catch
     symbol substitution on the raw token (f***k, $hit, b!tch).
     Each hit scores a flat 0.95.
  2. Edit-distance similarity — the normalized token is compared against
     every vocabulary entry; similarity = 1 - distance / max(len).

Nothing is deduplicated. A token that hits two obfuscation patterns and
one vocabulary entry yields three matches; downstream aggregation
decides how to collapse them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, NamedTuple, Optional, Sequence

from rapidfuzz.distance import Levenshtein


OBFUSCATION_SCORE = 0.95
MAX_LENGTH_DIFFERENCE = 3
DEFAULT_THRESHOLD = 0.7

_TOKEN_RE = re.compile(r"\b[\w@$*#\-]+\b")
_OBFUSCATION_CHARS_RE = re.compile(r"[@$*#_\-]+")
_REPEAT_RE = re.compile(r"(.)\1{2,}")


@dataclass(frozen=True)
class FuzzyMatch:
    """One fuzzy hit: the token as written, its score, and what it matched."""
    word: str
    score: float
    label: str

    def to_dict(self) -> dict:
        return {"word": self.word, "score": self.score, "label": self.label}


@dataclass(frozen=True)
class ObfuscationPattern:
    """A regex tuned to leetspeak/symbol variants of `base`."""
    base: str
    pattern: re.Pattern


class FuzzyResult(NamedTuple):
    match: bool
    score: float


def _obfuscation(base: str, regex: str) -> ObfuscationPattern:
    return ObfuscationPattern(base=base, pattern=re.compile(regex, re.IGNORECASE))


OBFUSCATION_PATTERNS: tuple[ObfuscationPattern, ...] = (
    _obfuscation("fuck", r"f[@u*]{1,3}[ck*]{1,2}"),
    _obfuscation("shit", r"[s$][h*]{0,2}[i!1*][t*]"),
    _obfuscation("ass", r"[@a][s$]{1,2}"),
    _obfuscation("damn", r"d[@a][m*]{1,2}n"),
    _obfuscation("hell", r"h[e3][l1|]{1,2}"),
    _obfuscation("bitch", r"b[i!1][t7][c*]h"),
)

BASE_SWEAR_WORDS: tuple[str, ...] = (
    "fuck",
    "shit",
    "bullshit",
    "damn",
    "dammit",
    "goddamn",
    "hell",
    "crap",
    "asshole",
    "bitch",
    "pissed",
    "wtf",
    "ffs",
    "stfu",
    "stupid",
    "dumb",
    "dumbass",
    "idiot",
    "idiotic",
)


def get_base_swear_words() -> list[str]:
    """Base swear vocabulary (no inflections) for edit-distance matching."""
    return list(BASE_SWEAR_WORDS)


def tokenize(text: str) -> list[str]:
    """Split text into word-like runs; obfuscation symbols stay inside words."""
    if not text:
        return []
    return _TOKEN_RE.findall(text)


def normalize(text: str) -> str:
    """
    Canonicalize a word for comparison.

    Lowercases, strips obfuscation symbols, and collapses runs of 3+
    identical characters to 2 ("fuuuuck" -> "fuuck"), so elongation
    costs at most one edit against the real spelling. Idempotent.
    """
    text = text.lower()
    text = _OBFUSCATION_CHARS_RE.sub("", text)
    text = _REPEAT_RE.sub(r"\1\1", text)
    return text.strip()


def levenshtein(a: str, b: str) -> int:
    """Unit-cost edit distance (substitution, insertion, deletion)."""
    return Levenshtein.distance(a, b)


def _similarity(word: str, target: str, threshold: float) -> FuzzyResult:
    # Both arguments are already normalized
    if word == target:
        return FuzzyResult(True, 1.0)

    if abs(len(word) - len(target)) > MAX_LENGTH_DIFFERENCE:
        return FuzzyResult(False, 0.0)

    distance = levenshtein(word, target)
    similarity = 1 - distance / max(len(word), len(target))
    return FuzzyResult(similarity >= threshold, similarity)


def fuzzy_match(
    word: str,
    target: str,
    threshold: float = DEFAULT_THRESHOLD,
) -> FuzzyResult:
    """
    Compare a word against one target after normalizing both.

    Returns:
        FuzzyResult(match, score). Exact match after normalization is
        (True, 1.0); a length gap over 3 is (False, 0.0) without
        computing the distance.
    """
    return _similarity(normalize(word), normalize(target), threshold)


def find_obfuscations(
    word: str,
    patterns: Iterable[ObfuscationPattern] = OBFUSCATION_PATTERNS,
) -> list[FuzzyMatch]:
    """One match per obfuscation pattern found anywhere in the raw token."""
    return [
        FuzzyMatch(word=word, score=OBFUSCATION_SCORE, label=p.base)
        for p in patterns
        if p.pattern.search(word)
    ]


def find_fuzzy_matches(
    text: str,
    vocabulary: Sequence[str],
    threshold: float = DEFAULT_THRESHOLD,
    obfuscation_patterns: Optional[Iterable[ObfuscationPattern]] = None,
) -> list[FuzzyMatch]:
    """
    Find every obfuscated or misspelled swear word in `text`.

    Args:
        text: The text to scan.
        vocabulary: Base swear words to compare against.
        threshold: Minimum similarity for an edit-distance match.
        obfuscation_patterns: Override for the built-in obfuscation regexes.

    Returns:
        Matches in token order; per token, obfuscation hits come first,
        then vocabulary hits in vocabulary order.
    """
    patterns = tuple(
        OBFUSCATION_PATTERNS if obfuscation_patterns is None else obfuscation_patterns
    )
    targets = [(entry, normalize(entry)) for entry in vocabulary]
    matches: list[FuzzyMatch] = []

    for word in tokenize(text):
        matches.extend(find_obfuscations(word, patterns))

        normalized = normalize(word)
        for entry, normalized_entry in targets:
            result = _similarity(normalized, normalized_entry, threshold)
            if result.match:
                matches.append(FuzzyMatch(word=word, score=result.score, label=entry))

    return matches
