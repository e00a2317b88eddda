"""
Closed enumerations for micro-niche records and creator profiles.

Four orthogonal dimensions describe how a niche is scored:
  - ``TimeAvailability``  — weekly production bandwidth (user side) and
                            production intensity (niche side) share one scale.
  - ``MonetizationGoal``  — ordered revenue tiers, lowest to highest.
  - ``SearchTrend``       — direction of search demand for the topic.
  - ``CompetitionLevel``  — how crowded the niche already is.

Monetization ceiling
--------------------
A niche's ceiling is either one of the four ``MonetizationGoal`` tiers or the
``long-tail`` sentinel (revenue accrues gradually with audience size, no
fixed near-term ceiling).  The sentinel is never a user-selectable goal, so
it is kept out of ``MonetizationGoal`` and modelled as a tagged variant::

    TieredCeiling(tier=MonetizationGoal.MONTHLY_2000)   # kind="tiered", index 1
    LongTailCeiling()                                   # kind="long_tail"

``parse_ceiling()`` converts raw catalog strings into one of the two.

This module has NO imports from any other ``niche_scanner`` package.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class TimeAvailability(StrEnum):
    """Weekly hours tier, ordered from least to most time."""

    UNDER_5 = "under5"
    """Fewer than 5 hours per week."""

    FROM_5_TO_10 = "5to10"
    """5 to 10 hours per week."""

    FROM_10_TO_15 = "10to15"
    """10 to 15 hours per week."""

    OVER_15 = "15plus"
    """15 or more hours per week."""


class MonetizationGoal(StrEnum):
    """Monetization tiers in ascending order of ambition.

    Declaration order is significant: ``GOAL_ORDER`` and ``goal_index()``
    derive tier distance from it.
    """

    MONTHLY_500 = "$500/month"
    MONTHLY_2000 = "$2000/month"
    MONTHLY_5000 = "$5000/month"
    MAXIMUM_GROWTH = "maximum growth"


class SearchTrend(StrEnum):
    """Direction of search demand for a niche topic."""

    GROWING = "growing"
    STABLE = "stable"
    DECLINING = "declining"


class CompetitionLevel(StrEnum):
    """Creator competition inside the niche."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


LONG_TAIL = "long-tail"
"""Raw catalog value for a ceiling with no fixed near-term cap."""

GOAL_ORDER: tuple[MonetizationGoal, ...] = tuple(MonetizationGoal)


def goal_index(goal: MonetizationGoal) -> int:
    """Position of ``goal`` in ``GOAL_ORDER`` (0 = $500/month)."""
    return GOAL_ORDER.index(goal)


# ── Monetization ceiling variant ─────────────────────────────────────────────


class TieredCeiling(BaseModel):
    """Niche revenue caps out at one of the ordered goal tiers."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["tiered"] = "tiered"
    tier: MonetizationGoal

    @property
    def index(self) -> int:
        return goal_index(self.tier)

    @property
    def label(self) -> str:
        return self.tier.value


class LongTailCeiling(BaseModel):
    """Niche revenue grows with audience size rather than a fixed ceiling."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["long_tail"] = "long_tail"

    @property
    def label(self) -> str:
        return LONG_TAIL


MonetizationCeiling = Annotated[
    Union[TieredCeiling, LongTailCeiling],
    Field(discriminator="kind"),
]


def parse_ceiling(raw: str) -> TieredCeiling | LongTailCeiling:
    """Convert a raw catalog ceiling string to a ceiling variant.

    Raises:
        ValueError: If ``raw`` is neither ``"long-tail"`` nor a goal tier.
    """
    if raw == LONG_TAIL:
        return LongTailCeiling()
    return TieredCeiling(tier=MonetizationGoal(raw))
