"""
SwearCounter — Conversation Frustration & Flattery Detection

Scans conversation transcripts for three things:
  - explicit swearing, including obfuscated and misspelled variants
  - assistant apologies
  - assistant sycophancy

Public API:
  - count_matches:            Lexical per-label counts against a catalog
  - find_fuzzy_matches:       Obfuscation / edit-distance swear detection
  - detect_indirect_swearing: Idiom + keyword + punctuation fusion score
  - scan_user_message:        All user-side analyzers on one message
  - scan_assistant_message:   Apology + sycophancy counts on one message
  - scan_transcripts:         Aggregate counts across JSONL transcripts
  - RuleSet / default_rules:  Injectable, immutable rule tables

Usage:
    from swearcounter import scan_user_message
    result = scan_user_message("This is bullsh*t!!")
    result.frustration_intensity
"""

__version__ = "1.0.0"

from swearcounter.patterns import (
    PatternRule,
    get_swear_patterns,
    get_apology_patterns,
    get_sycophancy_patterns,
)
from swearcounter.lexical import count_matches
from swearcounter.fuzzy import (
    FuzzyMatch,
    find_fuzzy_matches,
    fuzzy_match,
    get_base_swear_words,
    normalize,
)
from swearcounter.semantic import (
    DetectionResult,
    SemanticCategory,
    SemanticMatch,
    analyze_message,
    detect_indirect_swearing,
    has_indirect_swearing,
)
from swearcounter.rules import RuleSet, default_rules
from swearcounter.detector import scan_user_message, scan_assistant_message, scan_text
from swearcounter.transcripts import ScanCounts, scan_transcripts

__all__ = [
    "PatternRule",
    "get_swear_patterns",
    "get_apology_patterns",
    "get_sycophancy_patterns",
    "count_matches",
    "FuzzyMatch",
    "find_fuzzy_matches",
    "fuzzy_match",
    "get_base_swear_words",
    "normalize",
    "DetectionResult",
    "SemanticCategory",
    "SemanticMatch",
    "analyze_message",
    "detect_indirect_swearing",
    "has_indirect_swearing",
    "RuleSet",
    "default_rules",
    "scan_user_message",
    "scan_assistant_message",
    "scan_text",
    "ScanCounts",
    "scan_transcripts",
]
