"""
Rule Set — immutable detection configuration.

Bundles every table the analyzers read (lexical catalogs, fuzzy
vocabulary, obfuscation regexes, idiom patterns, keyword weights) into
one frozen object. It is built once and passed by reference into each
scan, so tests and callers can swap in custom tables without touching
module globals.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from swearcounter.fuzzy import BASE_SWEAR_WORDS, OBFUSCATION_PATTERNS, ObfuscationPattern
from swearcounter.patterns import (
    APOLOGY_PATTERNS,
    SWEAR_PATTERNS,
    SYCOPHANCY_PATTERNS,
    PatternRule,
)
from swearcounter.semantic import FRUSTRATION_KEYWORDS, SEMANTIC_PATTERNS, SemanticCategory


def _dedupe(words) -> tuple[str, ...]:
    return tuple(dict.fromkeys(words))


@dataclass(frozen=True)
class RuleSet:
    """Everything the three analyzers match against."""
    swear_patterns: tuple[PatternRule, ...] = SWEAR_PATTERNS
    apology_patterns: tuple[PatternRule, ...] = APOLOGY_PATTERNS
    sycophancy_patterns: tuple[PatternRule, ...] = SYCOPHANCY_PATTERNS
    vocabulary: tuple[str, ...] = BASE_SWEAR_WORDS
    obfuscation_patterns: tuple[ObfuscationPattern, ...] = OBFUSCATION_PATTERNS
    semantic_patterns: Mapping[SemanticCategory, tuple[re.Pattern, ...]] = field(
        default_factory=lambda: MappingProxyType(dict(SEMANTIC_PATTERNS))
    )
    keywords: Mapping[str, float] = field(
        default_factory=lambda: MappingProxyType(dict(FRUSTRATION_KEYWORDS))
    )

    def __post_init__(self):
        # Freeze whatever the caller handed in
        object.__setattr__(self, "swear_patterns", tuple(self.swear_patterns))
        object.__setattr__(self, "apology_patterns", tuple(self.apology_patterns))
        object.__setattr__(self, "sycophancy_patterns", tuple(self.sycophancy_patterns))
        object.__setattr__(self, "vocabulary", _dedupe(self.vocabulary))
        object.__setattr__(self, "obfuscation_patterns", tuple(self.obfuscation_patterns))
        object.__setattr__(self, "semantic_patterns", MappingProxyType(
            {cat: tuple(regexes) for cat, regexes in self.semantic_patterns.items()}
        ))
        object.__setattr__(self, "keywords", MappingProxyType(dict(self.keywords)))

    def with_vocabulary(self, *extra: str) -> RuleSet:
        """Copy of this rule set with additional vocabulary entries."""
        return replace(self, vocabulary=self.vocabulary + tuple(extra))


@lru_cache(maxsize=1)
def default_rules() -> RuleSet:
    """The built-in rule set, constructed once per process."""
    return RuleSet()
