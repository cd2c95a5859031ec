"""
Semantic Scorer — indirect swearing without swear words.

Three independent signals, fused by a fixed weighted formula:

  1. Idiom patterns (0.6 flat if ANY match) — "what's wrong with you",
     "I give up", "just fix it now". Grouped into five closed categories.
  2. Keyword score (x0.3) — weighted frustration vocabulary, presence
     based, clamped to 1.0.
  3. Hostile punctuation (x0.1) — "!!", "??", "?!?", ALL CAPS words,
     clamped to 1.0.

The fusion is deliberately asymmetric: idiom presence is the strong
signal, keywords are secondary, punctuation only breaks ties.
Classification is strictly total_score > threshold.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional, Sequence

IDIOM_MATCH_SCORE = 0.8
DEFAULT_THRESHOLD = 0.5

# Fusion weights
IDIOM_WEIGHT = 0.6
KEYWORD_WEIGHT = 0.3
PUNCTUATION_WEIGHT = 0.1


class SemanticCategory(str, Enum):
    FRUSTRATION = "frustration"
    HOSTILITY = "hostility"
    ANGER = "anger"
    SURRENDER = "surrender"
    COMMANDS = "commands"


def _compile(*regexes: str) -> tuple[re.Pattern, ...]:
    return tuple(re.compile(r, re.IGNORECASE) for r in regexes)


# ============================================================
# IDIOM PATTERNS
# ============================================================

SEMANTIC_PATTERNS: dict[SemanticCategory, tuple[re.Pattern, ...]] = {
    SemanticCategory.FRUSTRATION: _compile(
        r"what is (this|wrong|going on|happening)",
        r"why (is|does|doesn't|won't|can't|isn't).{0,30}(work|working|broken|fail)",
        r"this (doesn't|does not|won't|will not).{0,30}(work|make sense)",
        r"makes? no sense",
        r"not working (at all|again|anymore)",
        r"keeps? (failing|breaking|crashing)",
    ),
    SemanticCategory.HOSTILITY: _compile(
        r"you('re| are) (wrong|broken|useless)",
        r"you (can't|cannot|don't|do not).{0,30}(understand|get it|know)",
        r"what('s| is) wrong with you",
        r"are you (serious|kidding|joking)",
        r"you (obviously|clearly|literally).{0,30}(don't|do not)",
    ),
    SemanticCategory.ANGER: _compile(
        r"I (can't|cannot) believe",
        r"are you (kidding|serious)",
        r"you('ve| have) got to be (kidding|joking)",
        r"this is (unbelievable|incredible|absurd)",
        r"how is this (possible|happening|real)",
    ),
    SemanticCategory.SURRENDER: _compile(
        r"I('m| am) done",
        r"I give up",
        r"never mind",
        r"forget (it|this)",
        r"screw (it|this)",
    ),
    SemanticCategory.COMMANDS: _compile(
        r"just (fix|work|do|stop|listen)",
        r"(fix|work) (now|immediately|please|already)",
        r"stop (doing|being|trying)",
    ),
}


# ============================================================
# FRUSTRATION KEYWORDS (weighted)
# ============================================================

FRUSTRATION_KEYWORDS: dict[str, float] = {
    # Severe
    "unacceptable": 1.0,
    "unbelievable": 1.0,
    "impossible": 1.0,
    "pathetic": 1.0,
    "embarrassing": 1.0,
    # Moderate
    "wrong": 0.7,
    "broken": 0.7,
    "failing": 0.7,
    "useless": 0.7,
    "pointless": 0.7,
    "nonsense": 0.7,
    # Mild
    "confused": 0.4,
    "unclear": 0.4,
    "complicated": 0.4,
    "difficult": 0.4,
}


_EXCLAMATION_RUN = re.compile(r"!{2,}")
_QUESTION_RUN = re.compile(r"\?{2,}")
_MIXED_RUN = re.compile(r"[!?]{3,}")
_CAPS_WORD = re.compile(r"\b[A-Z]{3,}\b")


# ============================================================
# DATA STRUCTURES
# ============================================================

@dataclass(frozen=True)
class SemanticMatch:
    """A single idiom hit."""
    phrase: str
    category: SemanticCategory
    score: float = IDIOM_MATCH_SCORE

    def to_dict(self) -> dict:
        return {
            "phrase": self.phrase,
            "category": self.category.value,
            "score": self.score,
        }


@dataclass
class DetectionResult:
    """Idiom matches plus the fused score. Built fresh on every call."""
    matches: list[SemanticMatch] = field(default_factory=list)
    total_score: float = 0.0
    threshold: float = DEFAULT_THRESHOLD

    @property
    def is_indirect_swearing(self) -> bool:
        return has_indirect_swearing(self)


@dataclass
class MessageAnalysis:
    """Full per-signal breakdown of one message."""
    has_indirect_swearing: bool
    score: float
    matches: list[SemanticMatch]
    keyword_score: float
    pattern_count: int
    punctuation_score: float

    def to_dict(self) -> dict:
        return {
            "has_indirect_swearing": self.has_indirect_swearing,
            "score": self.score,
            "matches": [m.to_dict() for m in self.matches],
            "details": {
                "keywords": self.keyword_score,
                "patterns": self.pattern_count,
                "punctuation": self.punctuation_score,
            },
        }


# ============================================================
# SIGNALS
# ============================================================

def detect_hostile_punctuation(text: str) -> float:
    """Additive punctuation/caps hostility heuristic, clamped to 1.0."""
    score = 0.0
    score += len(_EXCLAMATION_RUN.findall(text)) * 0.2
    score += len(_QUESTION_RUN.findall(text)) * 0.2
    score += len(_MIXED_RUN.findall(text)) * 0.3
    score += len(_CAPS_WORD.findall(text)) * 0.15
    return min(score, 1.0)


def score_keywords(
    text: str,
    keywords: Optional[Mapping[str, float]] = None,
) -> float:
    """Sum of weights for keywords present (once each), clamped to 1.0."""
    keywords = FRUSTRATION_KEYWORDS if keywords is None else keywords
    lower = text.lower()
    score = sum(weight for keyword, weight in keywords.items() if keyword in lower)
    return min(score, 1.0)


def match_semantic_patterns(
    text: str,
    patterns: Optional[Mapping[SemanticCategory, Sequence[re.Pattern]]] = None,
) -> list[SemanticMatch]:
    """Every occurrence of every idiom pattern, in category order."""
    patterns = SEMANTIC_PATTERNS if patterns is None else patterns
    matches: list[SemanticMatch] = []
    for category, regexes in patterns.items():
        for regex in regexes:
            for m in regex.finditer(text):
                matches.append(SemanticMatch(phrase=m.group(0), category=category))
    return matches


def has_indirect_swearing(
    result: DetectionResult,
    threshold: Optional[float] = None,
) -> bool:
    """Strictly greater than the threshold; a tie is not indirect swearing."""
    threshold = result.threshold if threshold is None else threshold
    return result.total_score > threshold


def fuse_scores(has_idiom: bool, keyword_score: float, punctuation_score: float) -> float:
    return (
        (IDIOM_WEIGHT if has_idiom else 0.0)
        + KEYWORD_WEIGHT * keyword_score
        + PUNCTUATION_WEIGHT * punctuation_score
    )


# ============================================================
# ENTRY POINTS
# ============================================================

def detect_indirect_swearing(
    text: str,
    threshold: float = DEFAULT_THRESHOLD,
    patterns: Optional[Mapping[SemanticCategory, Sequence[re.Pattern]]] = None,
    keywords: Optional[Mapping[str, float]] = None,
) -> DetectionResult:
    """
    Detect frustration expressed without explicit swear words.

    Args:
        text: The message to score.
        threshold: Classification cut-off; a message counts as indirect
            swearing when total_score is strictly greater.
        patterns: Override for the idiom pattern table.
        keywords: Override for the weighted keyword table.

    Returns:
        DetectionResult with every idiom match and the fused score.
    """
    if not text or not text.strip():
        return DetectionResult(threshold=threshold)

    matches = match_semantic_patterns(text, patterns)
    total = fuse_scores(
        bool(matches),
        score_keywords(text, keywords),
        detect_hostile_punctuation(text),
    )
    return DetectionResult(matches=matches, total_score=total, threshold=threshold)


def analyze_message(text: str, threshold: float = DEFAULT_THRESHOLD) -> MessageAnalysis:
    """Score a message and keep each signal for display."""
    result = detect_indirect_swearing(text, threshold)
    return MessageAnalysis(
        has_indirect_swearing=result.is_indirect_swearing,
        score=result.total_score,
        matches=result.matches,
        keyword_score=score_keywords(text),
        pattern_count=len(result.matches),
        punctuation_score=detect_hostile_punctuation(text),
    )
