"""
Lexical Matcher — deterministic per-label occurrence counts.

Applies every rule of a catalog to a text and tallies non-overlapping,
case-insensitive matches by label. Labels with no hits are omitted,
never reported as zero.
"""

from __future__ import annotations

import re
from typing import Iterable, Mapping

from swearcounter.patterns import PatternRule


def _case_insensitive(pattern: re.Pattern) -> re.Pattern:
    if pattern.flags & re.IGNORECASE:
        return pattern
    # re caches compiled patterns, so repeated calls stay cheap
    return re.compile(pattern.pattern, pattern.flags | re.IGNORECASE)


def count_matches(text: str, rules: Iterable[PatternRule]) -> dict[str, int]:
    """
    Count every match of every rule in `text`.

    Args:
        text: The text to scan.
        rules: Ordered (label, pattern) rules. All rules are applied.

    Returns:
        Mapping label -> count, containing only labels that matched.
    """
    counts: dict[str, int] = {}
    if not text:
        return counts

    for rule in rules:
        found = sum(1 for _ in _case_insensitive(rule.pattern).finditer(text))
        if found:
            counts[rule.label] = counts.get(rule.label, 0) + found
    return counts


def merge_counts(target: dict[str, int], source: Mapping[str, int]) -> dict[str, int]:
    """Add `source` tallies into `target` in place and return it."""
    for label, count in source.items():
        target[label] = target.get(label, 0) + count
    return target


def total_count(counts: Mapping[str, int]) -> int:
    return sum(counts.values())
