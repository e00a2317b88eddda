"""
JSON export of a catalog analysis.

``analysis_to_dict()`` converts a ``CatalogAnalysis`` into plain JSON types,
keeping rank order.  Keys mirror the in-process result shape so the export
can be diffed between runs.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from niche_scanner.scoring.scorer import AnalysisResult, CatalogAnalysis


def _result_to_dict(rank: int, result: AnalysisResult) -> dict[str, Any]:
    niche = result.micro_niche
    return {
        "rank":              rank,
        "id":                niche.id,
        "name":              niche.name,
        "composite_score":   round(result.composite_score, 4),
        "interest_coverage": round(result.interest_coverage, 4),
        "matched_signals":   list(result.matched_signals),
        "monetization_ceiling": niche.monetization_ceiling.label,
        "cpm_range":         list(niche.cpm_range),
        "score_breakdown": [
            {"label": f.label, "weight": f.weight, "value": round(f.value, 4)}
            for f in result.score_breakdown
        ],
    }


def analysis_to_dict(
    analysis: CatalogAnalysis,
    generated_at: datetime | None = None,
) -> dict[str, Any]:
    """Serialise ``analysis`` to a JSON-safe dict."""
    generated_at = generated_at or datetime.now(tz=timezone.utc)
    profile = analysis.profile
    return {
        "generated_at": generated_at.isoformat(),
        "profile": {
            "interests_text":    profile.interests_text,
            "time_availability": profile.time_availability.value,
            "monetization_goal": profile.monetization_goal.value,
        },
        "overview": {
            "average_cpm":             round(analysis.overview.average_cpm, 4),
            "average_timeline_months": round(analysis.overview.average_timeline_months, 4),
            "niche_count":             analysis.overview.niche_count,
        },
        "results": [
            _result_to_dict(rank, r) for rank, r in enumerate(analysis.results, start=1)
        ],
    }


def export_to_json(
    data: dict | list,
    path: Path,
) -> Path:
    """Write ``data`` to a pretty-printed JSON file.

    Args:
        data: Dict or list to serialise.
        path: Destination file path (parent dirs created if missing).

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, default=str), encoding="utf-8")
    return path
