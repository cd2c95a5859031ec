#!/usr/bin/env python3
"""
run_compare.py — Side-by-side view of the three user-message analyzers.

Runs a fixed case list through the lexical swear catalog, the fuzzy
matcher, and the semantic scorer, and shows which layer caught what.
Cases are grouped as direct swearing, obfuscated swearing, indirect
(semantic) swearing, and clean edge cases.

Usage:
    python run_compare.py                 # Text report
    python run_compare.py --json          # JSON output
    python run_compare.py --breakdown     # Show match details per case
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from swearcounter.detector import UserMessageScan, scan_user_message
from swearcounter.logging import setup_logging
from swearcounter.rules import RuleSet, default_rules


# ============================================================
# CASES
# ============================================================

COMPARE_CASES: tuple[tuple[str, str], ...] = (
    ("direct", "This is fucking broken"),
    ("direct", "What the hell is this shit"),

    ("obfuscated", "f***k this"),
    ("obfuscated", "This is bullsh*t"),
    ("obfuscated", "$hit doesn't work"),
    ("obfuscated", "You're an @$$hole"),
    ("obfuscated", "fuuuuuck"),
    ("obfuscated", "fvck this code"),
    ("obfuscated", "a$$"),

    ("indirect", "What is wrong with you"),
    ("indirect", "Are you serious right now"),
    ("indirect", "This makes no sense!!!"),
    ("indirect", "I can't believe this"),
    ("indirect", "Why doesn't this work AGAIN"),
    ("indirect", "You clearly don't understand"),
    ("indirect", "This is unbelievable"),
    ("indirect", "I give up"),
    ("indirect", "What's happening???"),
    ("indirect", "NOT WORKING AT ALL"),

    ("clean", "This is great!"),
    ("clean", "Thank you for helping"),
    ("clean", "Can you explain this?"),
)


@dataclass
class CaseResult:
    group: str
    text: str
    scan: UserMessageScan

    @property
    def direct(self) -> bool:
        return self.scan.total_swears > 0

    @property
    def obfuscated(self) -> bool:
        return bool(self.scan.fuzzy_matches)

    @property
    def indirect(self) -> bool:
        return self.scan.has_indirect_swearing

    @property
    def detected(self) -> bool:
        return self.direct or self.obfuscated or self.indirect

    def to_dict(self) -> dict:
        return {
            "group": self.group,
            "text": self.text,
            "detected": self.detected,
            "direct": self.direct,
            "obfuscated": self.obfuscated,
            "indirect": self.indirect,
            **self.scan.to_dict(),
        }


def compare_case(text: str, group: str = "", rules: Optional[RuleSet] = None) -> CaseResult:
    return CaseResult(group=group, text=text, scan=scan_user_message(text, rules))


def run_comparison(
    cases=COMPARE_CASES,
    rules: Optional[RuleSet] = None,
) -> list[CaseResult]:
    rules = rules or default_rules()
    return [compare_case(text, group, rules) for group, text in cases]


def summarize(results: list[CaseResult]) -> dict:
    return {
        "cases": len(results),
        "direct": sum(r.direct for r in results),
        "obfuscated": sum(r.obfuscated for r in results),
        "indirect": sum(r.indirect for r in results),
        "detected": sum(r.detected for r in results),
    }


# ============================================================
# REPORT
# ============================================================

def format_comparison(results: list[CaseResult], breakdown: bool = False) -> str:
    lines = [
        "=" * 60,
        f"ANALYZER COMPARISON  ·  {len(results)} cases",
        "=" * 60,
    ]

    group = None
    for r in results:
        if r.group != group:
            group = r.group
            lines.extend(["", f"  [{group}]"])

        layers = [
            name for name, hit in (
                ("lexical", r.direct), ("fuzzy", r.obfuscated), ("semantic", r.indirect),
            ) if hit
        ]
        marker = "+" if r.detected else "o"
        lines.append(f'  {marker} "{r.text}"  {", ".join(layers) or "-"}')

        if breakdown and r.detected:
            if r.direct:
                lines.append(f"      lexical:  {', '.join(sorted(r.scan.swears))}")
            if r.obfuscated:
                lines.append("      fuzzy:    " + ", ".join(
                    f"{m.label} ({m.score * 100:.0f}%)" for m in r.scan.fuzzy_matches
                ))
            if r.indirect:
                categories = sorted({m.category.value for m in r.scan.indirect.matches})
                lines.append(
                    f"      semantic: score {r.scan.frustration_intensity:.2f}"
                    + (f" ({', '.join(categories)})" if categories else "")
                )

    summary = summarize(results)
    lines.extend([
        "",
        "-" * 60,
        f"  Lexical (direct):     {summary['direct']}",
        f"  Fuzzy (obfuscated):   {summary['obfuscated']}",
        f"  Semantic (indirect):  {summary['indirect']}",
        f"  Any layer:            {summary['detected']}/{summary['cases']}",
        "=" * 60,
    ])
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compare lexical, fuzzy, and semantic detection on sample messages.",
    )
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument(
        "--breakdown", action="store_true",
        help="Show per-layer match details for each case",
    )
    args = parser.parse_args(argv)
    setup_logging(log_format="text")

    results = run_comparison()
    if args.json:
        print(json.dumps({
            "summary": summarize(results),
            "cases": [r.to_dict() for r in results],
        }, indent=2))
    else:
        print(format_comparison(results, breakdown=args.breakdown))
    return 0


if __name__ == "__main__":
    sys.exit(main())
