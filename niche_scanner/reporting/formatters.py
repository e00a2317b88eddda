"""
ASCII terminal formatters for the ``rank`` report.

All formatters accept scorer output and return plain multi-line strings
suitable for ``typer.echo()``.  No third-party dependencies.

Report layout
-------------
    === Catalog Overview ===          average CPM + first-revenue ETA
    === Recommended Launch Niche ===  top result, letter grade, reasons,
                                      format mix, factor breakdown
    === Micro-Niche Scoreboard ===    every ranked niche, one row each

Letter grades
-------------
    >= 85  A
    >= 75  B+
    >= 65  B
    >= 55  C+
    else   C
"""

from __future__ import annotations

from niche_scanner.models.niche import CreatorProfile
from niche_scanner.scoring.scorer import AnalysisResult
from niche_scanner.scoring.summary import CatalogOverview
from niche_scanner.taxonomy.niche_taxonomy import (
    LongTailCeiling,
    TieredCeiling,
    TimeAvailability,
)

TIME_LABELS: dict[TimeAvailability, str] = {
    TimeAvailability.UNDER_5:       "< 5 hrs",
    TimeAvailability.FROM_5_TO_10:  "5-10 hrs",
    TimeAvailability.FROM_10_TO_15: "10-15 hrs",
    TimeAvailability.OVER_15:       "15+ hrs",
}

_GRADE_THRESHOLDS: tuple[tuple[float, str], ...] = (
    (85.0, "A"),
    (75.0, "B+"),
    (65.0, "B"),
    (55.0, "C+"),
)


# ── Scalar helpers ────────────────────────────────────────────────────────────


def score_to_letter(score: float) -> str:
    """Map a 0–100 composite score to a letter grade."""
    for threshold, letter in _GRADE_THRESHOLDS:
        if score >= threshold:
            return letter
    return "C"


def _fmt_number(value: float) -> str:
    return f"{value:g}"


def format_currency_range(cpm_range: tuple[float, float]) -> str:
    """``(12, 24)`` → ``"$12-$24"``."""
    low, high = cpm_range
    return f"${_fmt_number(low)}-${_fmt_number(high)}"


def humanize_ceiling(ceiling: TieredCeiling | LongTailCeiling) -> str:
    """Display label for a monetization ceiling."""
    if isinstance(ceiling, LongTailCeiling):
        return "Audience-first runway"
    return ceiling.label


def _pct(value: float) -> str:
    return f"{round(value * 100)}%"


def build_reasons(result: AnalysisResult, profile: CreatorProfile) -> list[str]:
    """'Why it resonates' bullets for a recommended niche."""
    niche = result.micro_niche
    if result.matched_signals:
        overlap = f"Direct overlap with {', '.join(result.matched_signals)}"
    else:
        overlap = "Flexible narrative that welcomes your current strengths"
    return [
        overlap,
        "Production intensity aligns with your "
        f"{TIME_LABELS[profile.time_availability]} time runway.",
        f"Monetization ceiling supports {humanize_ceiling(niche.monetization_ceiling)} targets.",
    ]


# ── Blocks ────────────────────────────────────────────────────────────────────


def format_overview(overview: CatalogOverview) -> str:
    """Catalog-wide metric tiles."""
    lines = [
        "",
        "=== Catalog Overview ===",
        f"  Baseline CPM:      ${overview.average_cpm:.0f}  (category midpoint)",
        f"  First Revenue ETA: ~{overview.average_timeline_months:.1f} mo  "
        f"(average across {overview.niche_count} micro-niches)",
    ]
    return "\n".join(lines)


def format_recommendation(result: AnalysisResult, profile: CreatorProfile) -> str:
    """Detail block for the top-ranked niche."""
    niche = result.micro_niche
    lines: list[str] = []
    lines.append("")
    lines.append("=== Recommended Launch Micro-Niche ===")
    lines.append(
        f"  {niche.name}  --  {result.composite_score:.1f} "
        f"({score_to_letter(result.composite_score)})"
    )
    if niche.underserved_angle:
        lines.append(f"  {niche.underserved_angle}")
    lines.append(
        f"  [{niche.competition_level.value} competition]  "
        f"[CPM {format_currency_range(niche.cpm_range)}]  "
        f"[Trend {niche.search_trend.value}]"
    )

    lines.append("")
    lines.append("  Why it resonates:")
    for reason in build_reasons(result, profile):
        lines.append(f"    - {reason}")

    if niche.format_mix:
        lines.append("")
        lines.append("  Content architecture:")
        for fmt in niche.format_mix:
            lines.append(f"    - {fmt}")

    lines.append("")
    lines.append(f"    {'Factor':<22}  {'Value':>6}  {'Weight':>6}")
    lines.append("    " + "-" * 38)
    for item in result.score_breakdown:
        lines.append(
            f"    {item.label:<22}  {_pct(item.value):>6}  {_pct(item.weight):>6}"
        )
    return "\n".join(lines)


def format_scoreboard(results: list[AnalysisResult] | tuple[AnalysisResult, ...]) -> str:
    """One row per ranked niche, in the order given."""
    lines: list[str] = []
    lines.append("")
    lines.append("=== Micro-Niche Scoreboard ===")

    if not results:
        lines.append("  (no micro-niches to display)")
        return "\n".join(lines)

    header = (
        f"  {'Rank':>4}  {'Micro-Niche':<34}  {'Competition':<11}  {'CPM':>9}  "
        f"{'Trend':<9}  {'Loyalty':>7}  {'Saturation':>10}  {'ETA':>6}  {'Fit':>5}"
    )
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))
    for rank, result in enumerate(results, start=1):
        n = result.micro_niche
        lines.append(
            f"  {rank:>4}  {n.name[:34]:<34}  {n.competition_level.value:<11}  "
            f"{format_currency_range(n.cpm_range):>9}  {n.search_trend.value:<9}  "
            f"{_fmt_number(n.audience_loyalty) + '/10':>7}  "
            f"{_fmt_number(n.content_saturation) + '/10':>10}  "
            f"{_fmt_number(n.monetization_timeline_months) + ' mo':>6}  "
            f"{result.composite_score:>5.1f}"
        )
    return "\n".join(lines)


def format_profile(profile: CreatorProfile) -> str:
    """Echo of the inputs the report was ranked against."""
    interests = profile.interests_text.strip() or "(none)"
    return "\n".join([
        "",
        "=== Creator Profile ===",
        f"  Interests:         {interests}",
        f"  Weekly bandwidth:  {TIME_LABELS[profile.time_availability]}",
        f"  Monetization goal: {profile.monetization_goal.value}",
    ])
