"""Tests for niche taxonomy integrity — enums, goal ordering, ceiling variant."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from niche_scanner.taxonomy.niche_taxonomy import (
    GOAL_ORDER,
    LONG_TAIL,
    CompetitionLevel,
    LongTailCeiling,
    MonetizationGoal,
    SearchTrend,
    TieredCeiling,
    TimeAvailability,
    goal_index,
    parse_ceiling,
)


class TestTimeAvailabilityEnum:
    def test_four_tiers_in_order(self):
        assert [m.value for m in TimeAvailability] == ["under5", "5to10", "10to15", "15plus"]

    def test_str_comparison(self):
        assert TimeAvailability.FROM_5_TO_10 == "5to10"


class TestMonetizationGoalEnum:
    def test_goal_order(self):
        assert [g.value for g in GOAL_ORDER] == [
            "$500/month", "$2000/month", "$5000/month", "maximum growth",
        ]

    def test_goal_index(self):
        assert goal_index(MonetizationGoal.MONTHLY_500) == 0
        assert goal_index(MonetizationGoal.MONTHLY_5000) == 2
        assert goal_index(MonetizationGoal.MAXIMUM_GROWTH) == 3

    def test_long_tail_is_not_a_goal(self):
        with pytest.raises(ValueError):
            MonetizationGoal(LONG_TAIL)


class TestCategoricalEnums:
    def test_trend_values(self):
        assert {m.value for m in SearchTrend} == {"growing", "stable", "declining"}

    def test_competition_values_are_capitalised(self):
        assert {m.value for m in CompetitionLevel} == {"Low", "Medium", "High"}

    @pytest.mark.parametrize("enum_cls", [TimeAvailability, MonetizationGoal, SearchTrend, CompetitionLevel])
    def test_no_duplicate_values(self, enum_cls):
        values = [m.value for m in enum_cls]
        assert len(values) == len(set(values))


class TestParseCeiling:
    def test_long_tail(self):
        assert parse_ceiling("long-tail") == LongTailCeiling()

    def test_tiered(self):
        ceiling = parse_ceiling("$5000/month")
        assert isinstance(ceiling, TieredCeiling)
        assert ceiling.tier == MonetizationGoal.MONTHLY_5000
        assert ceiling.index == 2

    def test_labels(self):
        assert parse_ceiling("long-tail").label == "long-tail"
        assert parse_ceiling("maximum growth").label == "maximum growth"

    def test_unknown_value_raises(self):
        with pytest.raises(ValueError):
            parse_ceiling("$10000/month")

    def test_variants_are_frozen(self):
        ceiling = TieredCeiling(tier=MonetizationGoal.MONTHLY_500)
        with pytest.raises(ValidationError):
            ceiling.tier = MonetizationGoal.MONTHLY_2000  # type: ignore[misc]
