"""
Scoring engine: ranks a micro-niche catalog against a creator profile.

Modules
-------
tokenizer : InterestTokens — lazy, restartable interest token sequence.
matcher   : match_signals() + interest_coverage() — token-in-signal matching.
factors   : Lookup tables, weights, and the seven per-factor functions.
scorer    : ScoreFactor / AnalysisResult / CatalogAnalysis + score_niche()
            + analyze_catalog() — pure functions, no I/O.
summary   : CatalogOverview + compute_overview() — catalog-wide averages.
"""

from niche_scanner.scoring.scorer import (
    AnalysisResult,
    CatalogAnalysis,
    ScoreFactor,
    analyze_catalog,
    score_niche,
)
from niche_scanner.scoring.summary import CatalogOverview, compute_overview

__all__ = [
    "AnalysisResult",
    "CatalogAnalysis",
    "CatalogOverview",
    "ScoreFactor",
    "analyze_catalog",
    "compute_overview",
    "score_niche",
]
