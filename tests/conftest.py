"""
Shared pytest fixtures for the niche scanner test suite.

Provides:
  - ``make_niche``: factory for ``MicroNiche`` records with neutral defaults.
  - ``scenario_catalog`` / ``scenario_profile``: the two-niche leadership
    vs finance scenario used by end-to-end ranking tests.
  - ``seed_catalog_path``: the bundled career-motivation catalog file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from niche_scanner.models.niche import CreatorProfile, MicroNiche
from niche_scanner.taxonomy.niche_taxonomy import MonetizationGoal, TimeAvailability

PROJECT_ROOT = Path(__file__).parent.parent


def _niche(niche_id: str = "test-niche", **overrides: Any) -> MicroNiche:
    fields: dict[str, Any] = {
        "id": niche_id,
        "name": niche_id.replace("-", " ").title(),
        "underserved_angle": "Test angle.",
        "skill_signals": ("leadership",),
        "production_intensity": "5to10",
        "monetization_ceiling": "$2000/month",
        "cpm_range": (10.0, 20.0),
        "monetization_timeline_months": 3,
        "audience_loyalty": 5,
        "content_saturation": 5,
        "search_trend": "stable",
        "competition_level": "Medium",
        "format_mix": ("Shorts", "Long-form"),
    }
    fields.update(overrides)
    return MicroNiche(**fields)


@pytest.fixture
def make_niche() -> Callable[..., MicroNiche]:
    """Return a ``MicroNiche`` factory; keyword overrides use snake_case names."""
    return _niche


@pytest.fixture
def scenario_catalog() -> tuple[MicroNiche, ...]:
    """N1 (leadership, strong market) and N2 (finance, weak market)."""
    n1 = _niche(
        "n1",
        skill_signals=("leadership",),
        production_intensity="5to10",
        monetization_ceiling="$2000/month",
        cpm_range=(10, 20),
        monetization_timeline_months=3,
        audience_loyalty=8,
        content_saturation=2,
        search_trend="growing",
        competition_level="Low",
    )
    n2 = _niche(
        "n2",
        skill_signals=("finance",),
        production_intensity="15plus",
        monetization_ceiling="long-tail",
        cpm_range=(4, 8),
        monetization_timeline_months=9,
        audience_loyalty=5,
        content_saturation=7,
        search_trend="declining",
        competition_level="High",
    )
    return (n1, n2)


@pytest.fixture
def scenario_profile() -> CreatorProfile:
    return CreatorProfile(
        interests_text="leadership coaching",
        time_availability=TimeAvailability.FROM_5_TO_10,
        monetization_goal=MonetizationGoal.MONTHLY_2000,
    )


@pytest.fixture
def seed_catalog_path() -> Path:
    """Path to the committed career-motivation catalog."""
    return PROJECT_ROOT / "config" / "niches" / "career_motivation.json"
