"""
Micro-niche scorer: ranks a catalog against a creator profile.

Score formula (weighted sum, range 0–100)
------------------------------------------
    composite = 100 * (
        interest_fit           * 0.35
        + time_match           * 0.15
        + monetization_ceiling * 0.15
        + search_trend         * 0.10
        + audience_loyalty     * 0.10
        + content_saturation   * 0.10
        + competition          * 0.05
    )

Factor definitions and lookup tables live in ``niche_scanner.scoring.factors``.

Ordering
--------
Results are sorted by composite score descending with Python's stable
``sorted``.  Niches with equal scores keep their catalog order, so the
catalog order is the tie-break.

Purity
------
``analyze_catalog()`` holds no state between calls and never mutates the
catalog.  Calling it twice with the same inputs returns equal results.
Memoisation, if wanted, belongs to the caller, keyed on catalog and profile.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from niche_scanner.errors import EmptyCatalogError
from niche_scanner.models.niche import CreatorProfile, MicroNiche
from niche_scanner.scoring.factors import (
    FACTOR_LABELS,
    WEIGHTS,
    audience_loyalty_score,
    competition_score,
    content_saturation_score,
    monetization_ceiling_score,
    search_trend_score,
    time_match_score,
)
from niche_scanner.scoring.matcher import match_niche
from niche_scanner.scoring.summary import CatalogOverview, compute_overview
from niche_scanner.scoring.tokenizer import tokenize

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreFactor:
    """One line of a score breakdown.

    Attributes:
        key:    Weight key (``"interests"``, ``"time"``, ...).
        label:  Display label (``"Interest Fit"``, ...).
        weight: Fixed factor weight.
        value:  Normalised factor value in [0, 1].
    """

    key:    str
    label:  str
    weight: float
    value:  float

    @property
    def contribution(self) -> float:
        """Points this factor adds to the 0–100 composite."""
        return self.value * self.weight * 100.0


@dataclass(frozen=True)
class AnalysisResult:
    """Scored view of one niche for one profile.

    Attributes:
        micro_niche:       The catalog record.
        composite_score:   Weighted total, 0–100.
        interest_coverage: Matched / total skill signals, 0 when none.
        matched_signals:   Skill signals hit by an interest token.
        score_breakdown:   All seven factors in fixed display order.
    """

    micro_niche:       MicroNiche
    composite_score:   float
    interest_coverage: float
    matched_signals:   tuple[str, ...]
    score_breakdown:   tuple[ScoreFactor, ...]

    def factor(self, key: str) -> ScoreFactor:
        for item in self.score_breakdown:
            if item.key == key:
                return item
        raise KeyError(key)


@dataclass(frozen=True)
class CatalogAnalysis:
    """Ranked results plus the catalog overview for one profile."""

    profile:  CreatorProfile
    results:  tuple[AnalysisResult, ...]
    overview: CatalogOverview

    @property
    def recommended(self) -> AnalysisResult:
        """Highest-scoring niche (first in catalog order on ties)."""
        return self.results[0]

    def top(self, n: int) -> tuple[AnalysisResult, ...]:
        return self.results[:max(n, 0)]


def score_niche(
    niche:   MicroNiche,
    profile: CreatorProfile,
    tokens:  Optional[Iterable[str]] = None,
) -> AnalysisResult:
    """Compute the composite score and breakdown for one niche.

    Args:
        niche:   Catalog record.
        profile: Creator profile.
        tokens:  Pre-tokenised interests; re-derived from
                 ``profile.interests_text`` when omitted.  Must be
                 restartable.

    Returns:
        AnalysisResult with all seven factors populated.
    """
    if tokens is None:
        tokens = tokenize(profile.interests_text)

    matched, coverage = match_niche(niche, tokens)

    values = {
        "interests":   coverage,
        "time":        time_match_score(profile.time_availability, niche.production_intensity),
        "goal":        monetization_ceiling_score(niche.monetization_ceiling, profile.monetization_goal),
        "trend":       search_trend_score(niche.search_trend),
        "loyalty":     audience_loyalty_score(niche.audience_loyalty),
        "saturation":  content_saturation_score(niche.content_saturation),
        "competition": competition_score(niche.competition_level),
    }

    breakdown = tuple(
        ScoreFactor(key=key, label=FACTOR_LABELS[key], weight=weight, value=values[key])
        for key, weight in WEIGHTS.items()
    )
    composite = 100.0 * math.fsum(f.value * f.weight for f in breakdown)

    return AnalysisResult(
        micro_niche=niche,
        composite_score=composite,
        interest_coverage=coverage,
        matched_signals=matched,
        score_breakdown=breakdown,
    )


def rank_results(results: Iterable[AnalysisResult]) -> list[AnalysisResult]:
    """Sort by composite score descending; ties keep input order."""
    return sorted(results, key=lambda r: r.composite_score, reverse=True)


def analyze_catalog(
    catalog: Sequence[MicroNiche],
    profile: CreatorProfile,
) -> CatalogAnalysis:
    """Score and rank every niche in ``catalog`` for ``profile``.

    Args:
        catalog: Ordered, non-empty niche records.  Order is the tie-break.
        profile: Creator profile.

    Returns:
        CatalogAnalysis with results in rank order and the catalog overview.

    Raises:
        EmptyCatalogError: If ``catalog`` is empty.
    """
    if not catalog:
        raise EmptyCatalogError()

    tokens = tokenize(profile.interests_text)
    ranked = rank_results(score_niche(niche, profile, tokens) for niche in catalog)
    overview = compute_overview(catalog)

    top = ranked[0]
    log.debug(
        "Ranked %d niches; top is %s (%.1f)",
        len(ranked),
        top.micro_niche.id,
        top.composite_score,
        extra={
            "niche_count": len(ranked),
            "time_availability": profile.time_availability.value,
            "monetization_goal": profile.monetization_goal.value,
            "top_niche_id": top.micro_niche.id,
            "top_score": round(top.composite_score, 2),
        },
    )

    return CatalogAnalysis(profile=profile, results=tuple(ranked), overview=overview)
