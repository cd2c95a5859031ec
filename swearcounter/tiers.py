"""
Tiers — rate-per-conversation labels for the report.

Each table is ordered by ascending max_rate; the first entry whose
max_rate is >= the observed rate wins (inclusive boundary).
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Tier:
    label: str
    tagline: str


@dataclass(frozen=True)
class RatedTier:
    """A tier plus the rate that selected it."""
    label: str
    tagline: str
    rate: float
    total: int = 0

    def to_dict(self) -> dict:
        return {"label": self.label, "tagline": self.tagline, "rate": self.rate}


USER_TIERS: tuple[tuple[float, Tier], ...] = (
    (0, Tier("Suspiciously Polite", "Not a single swear. Are you even using an AI assistant?")),
    (0.2, Tier("Oops", "One or two slipped out. We've all been there.")),
    (0.5, Tier("Eminem", "Every conversation has a few f-bombs. It's not anger, it's rhythm.")),
    (1.0, Tier("Karen Mode", "You want to speak to the code's manager. And yes, you're mad.")),
    (2.5, Tier("Psycho", "Most conversations involve swearing. The assistant is walking on eggshells.")),
    (math.inf, Tier("Gordon Ramsay Mode", "The code is RAW. And the assistant knows it.")),
)

ASSISTANT_TIERS: tuple[tuple[float, Tier], ...] = (
    (0, Tier("Stone Cold", "Zero apologies. The assistant said what it said.")),
    (0.5, Tier("Straight Shooter", "Minimal flattery. Refreshingly blunt.")),
    (1.2, Tier("Smooth Operator", "The assistant is being polite. Suspiciously polite.")),
    (2.5, Tier("People Pleaser", "The assistant really wants you to like it.")),
    (4.0, Tier("Therapist Mode", "The assistant validates your feelings more than your code.")),
    (math.inf, Tier("Golden Retriever", "It would apologize for apologizing. And then compliment you about it.")),
)

# Odds of being spared by a future AI overlord, keyed like USER_TIERS
SURVIVAL_ODDS: tuple[tuple[float, float], ...] = (
    (0, 71.4),
    (0.2, 48.3),
    (0.5, 29.7),
    (1.0, 14.2),
    (2.5, 4.8),
    (math.inf, 0.3),
)


def _rate(total: int, files_scanned: int) -> float:
    return 0.0 if files_scanned == 0 else total / files_scanned


def get_tier(rate: float, tiers: tuple[tuple[float, Tier], ...]) -> Tier:
    for max_rate, tier in tiers:
        if rate <= max_rate:
            return tier
    return tiers[-1][1]


def get_user_tier(total_swears: int, files_scanned: int) -> RatedTier:
    rate = _rate(total_swears, files_scanned)
    tier = get_tier(rate, USER_TIERS)
    return RatedTier(tier.label, tier.tagline, rate, total_swears)


def get_assistant_tier(
    total_apologies: int, total_sycophancy: int, files_scanned: int,
) -> RatedTier:
    total = total_apologies + total_sycophancy
    rate = _rate(total, files_scanned)
    tier = get_tier(rate, ASSISTANT_TIERS)
    return RatedTier(tier.label, tier.tagline, rate, total)


def get_survival_odds(total_swears: int, files_scanned: int) -> str:
    """Percentage formatted to one decimal, e.g. "29.7"."""
    rate = _rate(total_swears, files_scanned)
    for max_rate, odds in SURVIVAL_ODDS:
        if rate <= max_rate:
            return f"{odds:.1f}"
    return f"{SURVIVAL_ODDS[-1][1]:.1f}"
