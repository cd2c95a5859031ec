"""
Pattern Catalogs — Lexical Rule Tables

Three independent catalogs of (label, pattern) rules:
  1. SWEAR_PATTERNS       — hard swears, internet shorthand, insults,
                            frustration words (scanned on user messages)
  2. APOLOGY_PATTERNS     — conversational apologies (assistant messages)
  3. SYCOPHANCY_PATTERNS  — validation, flattery, over-eager helpfulness
                            (assistant messages)

Every pattern is compiled once, case-insensitive. Several rules may share
a label; counts accumulate under the label. Catalog order is for
readability only — every rule is always applied.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class PatternRule:
    """A single lexical rule: every match of `pattern` counts toward `label`."""
    label: str
    pattern: re.Pattern


def _rule(label: str, regex: str) -> PatternRule:
    return PatternRule(label=label, pattern=re.compile(regex, re.IGNORECASE))


# ============================================================
# SWEARING (user → assistant)
# ============================================================

SWEAR_PATTERNS: tuple[PatternRule, ...] = (
    # --- Hard swears ---
    _rule("fuck", r"\bfuck(?:ing|ed|s)?\b"),
    _rule("shit", r"\bshit(?:ty|s)?\b"),
    _rule("bullshit", r"\bbullshit\b"),
    _rule("dogshit", r"\bdogshit\b"),
    _rule("damn", r"\bdamn(?:it|ed)?\b"),
    _rule("dammit", r"\bdammit\b"),
    _rule("goddamn", r"\bgoddamn(?:it)?\b"),
    _rule("hell", r"\bwhat the hell\b|\bhell\b"),
    _rule("crap", r"\bcrap(?:py|s)?\b"),
    _rule("ass", r"\basshole\b"),
    _rule("bitch", r"\bbitch(?:es|ing)?\b"),
    _rule("bastard", r"\bbastard\b"),
    _rule("dick", r"\bdick(?:head)?\b"),
    _rule("pissed", r"\bpissed?\b"),
    _rule("wanker", r"\bwanker\b"),
    _rule("bloody", r"\bbloody\b"),

    # --- Internet shorthand ---
    _rule("wtf", r"\bwtf\b"),
    _rule("ffs", r"\bffs\b"),
    _rule("stfu", r"\bstfu\b"),
    _rule("fml", r"\bfml\b"),
    _rule("smh", r"\bsmh\b"),
    _rule("jfc", r"\bjfc\b"),
    _rule("lmao", r"\blmao\b"),
    _rule("omfg", r"\bomfg\b"),

    # --- Insults ---
    _rule("stupid", r"\bstupid\b"),
    _rule("dumb", r"\bdumb(?:ass)?\b"),
    _rule("idiot", r"\bidiot(?:ic)?\b"),
    _rule("moron", r"\bmoron(?:ic)?\b"),

    # --- Frustration / negative sentiment ---
    _rule("ridiculous", r"\bridiculous\b"),
    _rule("terrible", r"\bterrible\b"),
    _rule("awful", r"\bawful\b"),
    _rule("horrible", r"\bhorrible\b"),
    _rule("atrocious", r"\batrocious\b"),
    _rule("garbage", r"\bgarbage\b"),
    _rule("trash", r"\btrash\b"),
    _rule("useless", r"\buseless\b"),
    _rule("worthless", r"\bworthless\b"),
    _rule("pointless", r"\bpointless\b"),
    _rule("pathetic", r"\bpathetic\b"),
    _rule("broken", r"\bbroken\b"),
    _rule("sucks", r"\bsucks?\b"),
    _rule("screw", r"\bscrew(?:ed|ing)?\b"),
    _rule("ugh", r"\bugh+\b"),
    _rule("omg", r"\bomg\b"),
    _rule("lame", r"\blame\b"),
    _rule("insane", r"\binsane\b"),
    _rule("hate", r"\bhate\b"),
    _rule("annoying", r"\bannoying\b"),
    _rule("nightmare", r"\bnightmare\b"),
    _rule("rubbish", r"\brubbish\b"),
    _rule("absurd", r"\babsurd\b"),
    _rule("braindead", r"\bbrain\s?dead\b"),
)


# ============================================================
# APOLOGIES (assistant → user)
# ============================================================

APOLOGY_PATTERNS: tuple[PatternRule, ...] = (
    _rule("I apologize", r"\bI apologize\b"),
    _rule("I'm sorry", r"\bI'?m sorry\b"),
    _rule("my mistake", r"\bmy mistake\b"),
    _rule("my apologies", r"\bmy apologies\b"),
    _rule("sorry about", r"\bsorry about\b"),
    _rule("sorry for", r"\bsorry for\b"),
)


# ============================================================
# SYCOPHANCY (assistant → user)
# ============================================================

SYCOPHANCY_PATTERNS: tuple[PatternRule, ...] = (
    # --- Agreement / validation ---
    _rule("You're absolutely right", r"\byou'?re absolutely right\b"),
    _rule("You're right", r"\byou'?re right\b"),
    # Interjections end in punctuation, so no trailing \b
    _rule("Absolutely!", r"\babsolutely[!.]"),
    _rule("Exactly!", r"\bexactly[!.]"),
    _rule("Of course!", r"\bof course[!.]"),

    # --- Flattery ---
    _rule("Great question", r"\bgreat question\b"),
    _rule("Good question", r"\bgood question\b"),
    _rule("Excellent question", r"\bexcellent question\b"),
    _rule("That's a great point", r"\bthat'?s a great point\b"),
    _rule("Good point", r"\bgood point\b"),
    _rule("That makes sense", r"\bthat makes (?:total |perfect |complete )?sense\b"),
    _rule("You make a good point", r"\byou make a (?:good|great|valid|fair) point\b"),
    _rule("Great catch", r"\bgreat catch\b"),
    _rule("Good catch", r"\bgood catch\b"),
    _rule("Sharp observation", r"\bsharp observation\b"),

    # --- Over-eager helpfulness ---
    _rule("Happy to help", r"\bhappy to help\b"),
    _rule("Great idea", r"\bgreat idea\b"),
    _rule("Excellent idea", r"\bexcellent idea\b"),
    _rule("I'd be happy to", r"\bI'?d be happy to\b"),
    _rule("I appreciate", r"\bI appreciate (?:you|your|that|the)\b"),
    # Generic thanks is not sycophancy; require the follow-up verb
    _rule(
        "Thank you for",
        r"\bthank you for (?:pointing|sharing|bringing|letting|clarifying)\b",
    ),
)


# ============================================================
# ACCESSORS
# ============================================================

CATALOGS: dict[str, tuple[PatternRule, ...]] = {
    "swear": SWEAR_PATTERNS,
    "apology": APOLOGY_PATTERNS,
    "sycophancy": SYCOPHANCY_PATTERNS,
}


def get_swear_patterns() -> list[PatternRule]:
    return list(SWEAR_PATTERNS)


def get_apology_patterns() -> list[PatternRule]:
    return list(APOLOGY_PATTERNS)


def get_sycophancy_patterns() -> list[PatternRule]:
    return list(SYCOPHANCY_PATTERNS)


def describe_catalog(name: str) -> list[dict]:
    """
    Return a catalog as plain dicts (label + regex source).

    Used by the GET /patterns endpoint to expose the detection surface.
    """
    return [
        {"catalog": name, "label": r.label, "pattern": r.pattern.pattern}
        for r in CATALOGS[name]
    ]
