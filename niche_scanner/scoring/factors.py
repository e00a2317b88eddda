"""
Factor lookup tables, weights, and per-factor scoring functions.

Every factor is normalised to [0, 1].  The composite is the weighted sum of
the seven factors scaled to 0–100 (see ``niche_scanner.scoring.scorer``).

Weights (sum to 1.0)
--------------------
    interests    0.35   # skill-signal coverage
    time         0.15   # weekly bandwidth vs production intensity
    goal         0.15   # monetization ceiling vs user goal
    trend        0.10   # search demand direction
    loyalty      0.10   # audience retention
    saturation   0.10   # inverted content saturation
    competition  0.05   # creator competition

Time compatibility (row = user time, column = niche production intensity)
------------------------------------------------------------------------
                 under5   5to10   10to15   15plus
    under5        1.00     0.70     0.45     0.30
    5to10         0.85     1.00     0.75     0.60
    10to15        0.70     0.85     1.00     0.85
    15plus        0.55     0.75     0.90     1.00

Hand-tuned, asymmetric: having more time than a niche needs costs less than
having too little.

Monetization ceiling
--------------------
    long-tail   : 0.7 if goal index <= 1 ($500 or $2000/month), else 0.4
    tiered      : 1.0 if niche index >= goal index
                  0.75 if exactly one tier short
                  0.5 if two or more tiers short

All tables are read-only ``MappingProxyType`` views.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from niche_scanner.taxonomy.niche_taxonomy import (
    CompetitionLevel,
    LongTailCeiling,
    MonetizationGoal,
    SearchTrend,
    TieredCeiling,
    TimeAvailability,
    goal_index,
)

_T = TimeAvailability

TIME_COMPATIBILITY: Mapping[TimeAvailability, Mapping[TimeAvailability, float]] = MappingProxyType({
    _T.UNDER_5: MappingProxyType({
        _T.UNDER_5: 1.00, _T.FROM_5_TO_10: 0.70, _T.FROM_10_TO_15: 0.45, _T.OVER_15: 0.30,
    }),
    _T.FROM_5_TO_10: MappingProxyType({
        _T.UNDER_5: 0.85, _T.FROM_5_TO_10: 1.00, _T.FROM_10_TO_15: 0.75, _T.OVER_15: 0.60,
    }),
    _T.FROM_10_TO_15: MappingProxyType({
        _T.UNDER_5: 0.70, _T.FROM_5_TO_10: 0.85, _T.FROM_10_TO_15: 1.00, _T.OVER_15: 0.85,
    }),
    _T.OVER_15: MappingProxyType({
        _T.UNDER_5: 0.55, _T.FROM_5_TO_10: 0.75, _T.FROM_10_TO_15: 0.90, _T.OVER_15: 1.00,
    }),
})

TREND_SCORE: Mapping[SearchTrend, float] = MappingProxyType({
    SearchTrend.GROWING:   1.00,
    SearchTrend.STABLE:    0.75,
    SearchTrend.DECLINING: 0.35,
})

COMPETITION_SCORE: Mapping[CompetitionLevel, float] = MappingProxyType({
    CompetitionLevel.LOW:    1.00,
    CompetitionLevel.MEDIUM: 0.72,
    CompetitionLevel.HIGH:   0.45,
})

# Long-tail niches favour modest, audience-first goals.
_LONG_TAIL_MODEST_GOAL_MAX_INDEX = 1
_LONG_TAIL_MODEST_SCORE = 0.7
_LONG_TAIL_AMBITIOUS_SCORE = 0.4

# Tier shortfall (goal index − niche index) → score; 2+ tiers short → 0.5.
_CEILING_SHORTFALL_SCORE: Mapping[int, float] = MappingProxyType({0: 1.0, 1: 0.75})
_CEILING_FAR_SHORT_SCORE = 0.5

# ── Weights ───────────────────────────────────────────────────────────────────
# Order here is the order of the score breakdown.

WEIGHTS: Mapping[str, float] = MappingProxyType({
    "interests":   0.35,
    "time":        0.15,
    "goal":        0.15,
    "trend":       0.10,
    "loyalty":     0.10,
    "saturation":  0.10,
    "competition": 0.05,
})

FACTOR_LABELS: Mapping[str, str] = MappingProxyType({
    "interests":   "Interest Fit",
    "time":        "Time Match",
    "goal":        "Monetization Ceiling",
    "trend":       "Search Trend",
    "loyalty":     "Audience Loyalty",
    "saturation":  "Content Saturation",
    "competition": "Competition",
})


# ── Factor functions ──────────────────────────────────────────────────────────

def time_match_score(
    user_time:            TimeAvailability,
    production_intensity: TimeAvailability,
) -> float:
    return TIME_COMPATIBILITY[user_time][production_intensity]


def monetization_ceiling_score(
    ceiling: TieredCeiling | LongTailCeiling,
    goal:    MonetizationGoal,
) -> float:
    """Score how well a niche's ceiling supports the user's goal."""
    goal_idx = goal_index(goal)
    if isinstance(ceiling, LongTailCeiling):
        if goal_idx <= _LONG_TAIL_MODEST_GOAL_MAX_INDEX:
            return _LONG_TAIL_MODEST_SCORE
        return _LONG_TAIL_AMBITIOUS_SCORE
    shortfall = max(goal_idx - ceiling.index, 0)
    return _CEILING_SHORTFALL_SCORE.get(shortfall, _CEILING_FAR_SHORT_SCORE)


def search_trend_score(trend: SearchTrend) -> float:
    return TREND_SCORE[trend]


def audience_loyalty_score(loyalty: float) -> float:
    return loyalty / 10.0


def content_saturation_score(saturation: float) -> float:
    """Inverted: an unsaturated niche (0) scores 1.0."""
    return 1.0 - saturation / 10.0


def competition_score(level: CompetitionLevel) -> float:
    return COMPETITION_SCORE[level]
