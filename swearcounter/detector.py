"""
Detector — Message Scan Orchestrator

Feeds one message through the analyzers that apply to its role:
  - user:      lexical swear catalog + fuzzy matcher + semantic scorer
  - assistant: apology catalog + sycophancy catalog

The analyzers never call each other; this module only merges their
outputs into a per-message annotation. Every function here is pure and
safe to call concurrently, one call per message.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from swearcounter.config import settings
from swearcounter.fuzzy import FuzzyMatch, find_fuzzy_matches
from swearcounter.lexical import count_matches, total_count
from swearcounter.rules import RuleSet, default_rules
from swearcounter.semantic import DetectionResult, detect_indirect_swearing

logger = logging.getLogger(__name__)


# ============================================================
# RESULTS
# ============================================================

@dataclass
class UserMessageScan:
    """Annotation of one user message."""
    swears: dict[str, int]
    fuzzy_matches: list[FuzzyMatch]
    indirect: DetectionResult

    @property
    def total_swears(self) -> int:
        return total_count(self.swears)

    @property
    def has_indirect_swearing(self) -> bool:
        return self.indirect.is_indirect_swearing

    @property
    def frustration_intensity(self) -> float:
        return self.indirect.total_score

    def to_dict(self) -> dict:
        return {
            "swears": dict(self.swears),
            "total_swears": self.total_swears,
            "fuzzy_matches": [m.to_dict() for m in self.fuzzy_matches],
            "indirect_matches": [m.to_dict() for m in self.indirect.matches],
            "has_indirect_swearing": self.has_indirect_swearing,
            "frustration_intensity": round(self.frustration_intensity, 4),
        }


@dataclass
class AssistantMessageScan:
    """Annotation of one assistant message."""
    apologies: dict[str, int] = field(default_factory=dict)
    sycophancy: dict[str, int] = field(default_factory=dict)

    @property
    def total_apologies(self) -> int:
        return total_count(self.apologies)

    @property
    def total_sycophancy(self) -> int:
        return total_count(self.sycophancy)

    def to_dict(self) -> dict:
        return {
            "apologies": dict(self.apologies),
            "total_apologies": self.total_apologies,
            "sycophancy": dict(self.sycophancy),
            "total_sycophancy": self.total_sycophancy,
        }


# ============================================================
# SCAN FUNCTIONS
# ============================================================

def _bounded(text: str, max_length: Optional[int]) -> str:
    """Cap input length before analysis rather than interrupting it."""
    limit = settings.MAX_TEXT_LENGTH if max_length is None else max_length
    if limit and len(text) > limit:
        logger.debug(
            "Truncating message before scan",
            extra={"text_length": len(text)},
        )
        return text[:limit]
    return text


def scan_user_message(
    text: str,
    rules: Optional[RuleSet] = None,
    fuzzy_threshold: Optional[float] = None,
    semantic_threshold: Optional[float] = None,
    max_length: Optional[int] = None,
) -> UserMessageScan:
    """
    Scan a user message for explicit, obfuscated, and indirect swearing.

    Args:
        text: The message text.
        rules: Rule set to match against (defaults to the built-in one).
        fuzzy_threshold: Minimum edit-distance similarity.
        semantic_threshold: Indirect-swearing cut-off (strict >).
        max_length: Truncate longer input; 0 disables the cap.
    """
    rules = rules or default_rules()
    fuzzy_threshold = settings.FUZZY_THRESHOLD if fuzzy_threshold is None else fuzzy_threshold
    semantic_threshold = (
        settings.SEMANTIC_THRESHOLD if semantic_threshold is None else semantic_threshold
    )
    text = _bounded(text or "", max_length)

    return UserMessageScan(
        swears=count_matches(text, rules.swear_patterns),
        fuzzy_matches=find_fuzzy_matches(
            text,
            rules.vocabulary,
            fuzzy_threshold,
            obfuscation_patterns=rules.obfuscation_patterns,
        ),
        indirect=detect_indirect_swearing(
            text,
            semantic_threshold,
            patterns=rules.semantic_patterns,
            keywords=rules.keywords,
        ),
    )


def scan_assistant_message(
    text: str,
    rules: Optional[RuleSet] = None,
    max_length: Optional[int] = None,
) -> AssistantMessageScan:
    """Count apology and sycophancy phrases in an assistant message."""
    rules = rules or default_rules()
    text = _bounded(text or "", max_length)
    return AssistantMessageScan(
        apologies=count_matches(text, rules.apology_patterns),
        sycophancy=count_matches(text, rules.sycophancy_patterns),
    )


def scan_text(
    text: str,
    rules: Optional[RuleSet] = None,
    fuzzy_threshold: Optional[float] = None,
    semantic_threshold: Optional[float] = None,
) -> tuple[UserMessageScan, AssistantMessageScan]:
    """Run both views over the same string. Catalogs are independent."""
    return (
        scan_user_message(text, rules, fuzzy_threshold, semantic_threshold),
        scan_assistant_message(text, rules),
    )
