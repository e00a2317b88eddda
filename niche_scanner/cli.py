"""
Niche Scanner — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Load and validate the niche catalog.
  4. Run the scorer (``rank``) or report on the catalog.
  5. Print the result to stdout.

Install and run::

    pip install -e .
    niche-scanner --help
    niche-scanner rank --interests "leadership, coaching" --time 5to10 --goal '$2000/month'
    niche-scanner validate-catalog
    niche-scanner validate-config --full
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="niche-scanner",
    help="Career-motivation micro-niche opportunity scanner.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from niche_scanner.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from niche_scanner.utils.logging import configure_logging
    configure_logging(config.logging)


def _load_catalog_or_exit(config, catalog_path: Optional[str]):
    """Load the niche catalog, printing a friendly error and exiting on failure."""
    from pydantic import ValidationError

    from niche_scanner.catalog.seed_loader import load_catalog
    from niche_scanner.errors import NicheScannerError

    path = Path(catalog_path) if catalog_path else Path(config.catalog.seed_file)
    if not path.exists():
        typer.echo(f"[ERROR] Catalog file not found: {path}", err=True)
        raise typer.Exit(code=1)

    try:
        return load_catalog(path)
    except NicheScannerError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except ValidationError as exc:
        typer.echo(f"[ERROR] Catalog validation failed:\n{exc}", err=True)
        raise typer.Exit(code=1)
    except ValueError as exc:
        # json.JSONDecodeError is a ValueError subclass.
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("rank")
def rank(
    interests: Optional[str] = typer.Option(
        None,
        "--interests",
        "-i",
        help="Interests and professional strengths, free text.",
    ),
    time_availability: Optional[str] = typer.Option(
        None,
        "--time",
        "-t",
        help="Weekly production bandwidth: under5, 5to10, 10to15, 15plus.",
    ),
    monetization_goal: Optional[str] = typer.Option(
        None,
        "--goal",
        "-g",
        help="Monetization goal: '$500/month', '$2000/month', '$5000/month', 'maximum growth'.",
    ),
    top: Optional[int] = typer.Option(
        None,
        "--top",
        "-n",
        min=1,
        help="Rows to show in the scoreboard (default: config report.top_n).",
    ),
    catalog_path: Optional[str] = typer.Option(
        None,
        "--catalog",
        help="Path to catalog JSON (default: config catalog.seed_file).",
    ),
    json_out: Optional[str] = typer.Option(
        None,
        "--json-out",
        help="Also write the full ranked analysis to this JSON file.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Rank the catalog against a creator profile and print the report.

    Omitted profile options fall back to the [profile] section of the
    config file.
    """
    from niche_scanner.errors import NicheScannerError
    from niche_scanner.models.niche import CreatorProfile
    from niche_scanner.reporting.export import analysis_to_dict, export_to_json
    from niche_scanner.reporting.formatters import (
        format_overview,
        format_profile,
        format_recommendation,
        format_scoreboard,
    )
    from niche_scanner.scoring.scorer import analyze_catalog

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    catalog = _load_catalog_or_exit(config, catalog_path)

    try:
        profile = CreatorProfile.from_inputs(
            interests_text=interests if interests is not None else config.profile.interests,
            time_availability=time_availability or config.profile.time_availability.value,
            monetization_goal=monetization_goal or config.profile.monetization_goal.value,
        )
        analysis = analyze_catalog(catalog, profile)
    except NicheScannerError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    top_n = top or config.report.top_n

    typer.echo(format_profile(profile))
    typer.echo(format_overview(analysis.overview))
    typer.echo(format_recommendation(analysis.recommended, profile))
    typer.echo(format_scoreboard(analysis.top(top_n)))

    if json_out:
        out_path = export_to_json(analysis_to_dict(analysis), Path(json_out))
        typer.echo("")
        typer.echo(f"[OK] Analysis written to {out_path}")

    typer.echo("")


@app.command("validate-catalog")
def validate_catalog(
    catalog_path: Optional[str] = typer.Option(
        None,
        "--catalog",
        help="Path to catalog JSON (default: config catalog.seed_file).",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Load and validate the niche catalog and print catalog-wide averages.

    Exits with code 1 if the catalog is missing, empty, or malformed.
    """
    from niche_scanner.reporting.formatters import format_overview
    from niche_scanner.scoring.summary import compute_overview

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    catalog = _load_catalog_or_exit(config, catalog_path)

    typer.echo(f"Catalog validated: {len(catalog)} micro-niches.")
    for niche in catalog:
        typer.echo(f"  - {niche.id}: {niche.name}")
    typer.echo(format_overview(compute_overview(catalog)))
    typer.echo("")
    typer.echo("[OK] Catalog valid.")


@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Catalog file:      {config.catalog.seed_file}")
    typer.echo(f"  Default interests: {config.profile.interests}")
    typer.echo(f"  Default time:      {config.profile.time_availability.value}")
    typer.echo(f"  Default goal:      {config.profile.monetization_goal.value}")
    typer.echo(f"  Scoreboard rows:   {config.report.top_n}")
    typer.echo(f"  Log level:         {config.logging.level}")
    typer.echo(f"  Debug mode:        {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(mode="json"), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


if __name__ == "__main__":
    app()
