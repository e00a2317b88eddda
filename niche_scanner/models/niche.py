"""
Catalog and profile models.

``MicroNiche`` is one immutable catalog record.  The catalog is supplied from
outside the scoring engine (see ``niche_scanner.catalog.seed_loader``) and is
never mutated by it; every sequence field is a tuple and the model is frozen.

Field names are snake_case in Python and camelCase in the JSON seed file
(``underservedAngle``, ``skillSignals``, ...).  Both spellings are accepted
on construction.

``CreatorProfile`` is the three user inputs.  It is rebuilt whenever the user
edits the form; ``CreatorProfile.from_inputs()`` turns raw strings into a
profile and reports out-of-range choices as ``InvalidEnumValueError``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel

from niche_scanner.errors import InvalidEnumValueError
from niche_scanner.taxonomy.niche_taxonomy import (
    CompetitionLevel,
    MonetizationCeiling,
    MonetizationGoal,
    SearchTrend,
    TimeAvailability,
    parse_ceiling,
)

E = TypeVar("E", bound=StrEnum)


def coerce_enum(
    enum_cls: type[E],
    value: Any,
    field: str,
    index: Optional[int] = None,
) -> E:
    """Convert ``value`` to ``enum_cls`` or raise ``InvalidEnumValueError``."""
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidEnumValueError(
            field, value, [m.value for m in enum_cls], index=index
        ) from None


class MicroNiche(BaseModel):
    """A narrowly-scoped content topic with its own market profile.

    Attributes:
        id: Stable slug, unique within a catalog.
        name: Display name.
        underserved_angle: Short description of the unmet demand.
        skill_signals: Lowercase keywords matched against user interests.
        production_intensity: Weekly time the niche demands.
        monetization_ceiling: ``TieredCeiling`` or ``LongTailCeiling``.
        cpm_range: ``(low, high)`` revenue per thousand views, low <= high.
        monetization_timeline_months: Expected months to first revenue (> 0).
        audience_loyalty: Retention signal in [0, 10].
        content_saturation: Competition for attention in [0, 10];
            higher means more saturated.
        search_trend: Direction of search demand.
        competition_level: Creator competition inside the niche.
        format_mix: Ordered content-format labels.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    name: str
    underserved_angle: str = ""
    skill_signals: tuple[str, ...] = ()
    production_intensity: TimeAvailability
    monetization_ceiling: MonetizationCeiling
    cpm_range: tuple[float, float]
    monetization_timeline_months: float
    audience_loyalty: float
    content_saturation: float
    search_trend: SearchTrend
    competition_level: CompetitionLevel
    format_mix: tuple[str, ...] = ()

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("id must not be empty.")
        return v.strip()

    @field_validator("skill_signals")
    @classmethod
    def normalise_signals(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if any(not s.strip() for s in v):
            raise ValueError("skill_signals must not contain blank entries.")
        return tuple(s.strip().lower() for s in v)

    @field_validator("monetization_ceiling", mode="before")
    @classmethod
    def parse_raw_ceiling(cls, v: Any) -> Any:
        if isinstance(v, str):
            return parse_ceiling(v)
        return v

    @field_validator("monetization_timeline_months")
    @classmethod
    def validate_timeline(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"monetization_timeline_months must be > 0, got {v}.")
        return v

    @field_validator("audience_loyalty", "content_saturation")
    @classmethod
    def validate_ten_point_scale(cls, v: float) -> float:
        if not 0.0 <= v <= 10.0:
            raise ValueError(f"value must be in [0, 10], got {v}.")
        return v

    @model_validator(mode="after")
    def validate_cpm_range(self) -> "MicroNiche":
        low, high = self.cpm_range
        if low < 0:
            raise ValueError(f"cpm_range low must be >= 0, got {low}.")
        if high < low:
            raise ValueError(
                f"cpm_range high ({high}) must be >= low ({low})."
            )
        return self

    @property
    def cpm_midpoint(self) -> float:
        low, high = self.cpm_range
        return (low + high) / 2


class CreatorProfile(BaseModel):
    """User inputs the catalog is ranked against.

    ``monetization_goal`` is always a tier; long-tail is a niche attribute
    only and cannot be selected here.
    """

    model_config = ConfigDict(frozen=True)

    interests_text: str = ""
    time_availability: TimeAvailability
    monetization_goal: MonetizationGoal

    @classmethod
    def from_inputs(
        cls,
        interests_text: str,
        time_availability: str,
        monetization_goal: str,
    ) -> "CreatorProfile":
        """Build a profile from raw form values.

        Raises:
            InvalidEnumValueError: If the time tier or goal is not recognised.
        """
        return cls(
            interests_text=interests_text or "",
            time_availability=coerce_enum(
                TimeAvailability, time_availability, "time_availability"
            ),
            monetization_goal=coerce_enum(
                MonetizationGoal, monetization_goal, "monetization_goal"
            ),
        )
