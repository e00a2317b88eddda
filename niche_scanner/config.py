"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local env overrides (gitignored)
  4. Environment variables        — ``NICHE_SCANNER_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

CLI commands receive an ``AppConfig`` instance.  The scoring engine itself
takes no configuration: its weights and lookup tables are fixed.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from niche_scanner.taxonomy.niche_taxonomy import MonetizationGoal, TimeAvailability

# ── Sub-config models ─────────────────────────────────────────────────────────


class CatalogConfig(BaseModel):
    """Location of the niche catalog seed file."""

    model_config = ConfigDict(frozen=True)

    seed_file: str = "config/niches/career_motivation.json"


class ProfileConfig(BaseModel):
    """Default creator profile used when CLI options are omitted."""

    model_config = ConfigDict(frozen=True)

    interests: str = "leadership development, productivity systems, tech career coaching"
    time_availability: TimeAvailability = TimeAvailability.FROM_5_TO_10
    monetization_goal: MonetizationGoal = MonetizationGoal.MONTHLY_2000


class ReportConfig(BaseModel):
    """Terminal report settings."""

    model_config = ConfigDict(frozen=True)

    top_n: int = 10

    @field_validator("top_n")
    @classmethod
    def validate_top_n(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"top_n must be >= 1, got {v}.")
        return v


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "WARNING"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration.

    Constructed by ``load_config()`` which merges TOML + .env + environment.
    """

    model_config = ConfigDict(frozen=True)

    catalog: CatalogConfig = CatalogConfig()
    profile: ProfileConfig = ProfileConfig()
    report: ReportConfig = ReportConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``; when that default file
            is absent, built-in defaults are used.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If an explicit ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # 1. Load .env file (silently skip if missing)
    load_dotenv(dotenv_path=root / ".env", override=False)

    # 2. Load TOML config
    raw: dict[str, Any] = {}
    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        config_path = root / "config" / "default.toml"

    if config_path.exists():
        with open(config_path, "rb") as f:
            raw = tomllib.load(f)

        local_config_path = config_path.parent / "local.toml"
        if local_config_path.exists():
            with open(local_config_path, "rb") as f:
                raw = _deep_merge(raw, tomllib.load(f))

    # 3. Apply NICHE_SCANNER_* environment variable overrides
    raw = _apply_env_overrides(raw)

    # 4. Build and validate AppConfig
    return _build_app_config(raw, root)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply NICHE_SCANNER_* env vars to the raw config dict.

    Supported overrides:
      NICHE_SCANNER_CATALOG_PATH → raw["catalog"]["seed_file"]
      NICHE_SCANNER_LOG_LEVEL    → raw["logging"]["level"]
      NICHE_SCANNER_DEBUG        → raw["debug"]
    """
    if catalog_path := os.environ.get("NICHE_SCANNER_CATALOG_PATH"):
        raw.setdefault("catalog", {})["seed_file"] = catalog_path

    if log_level := os.environ.get("NICHE_SCANNER_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if debug := os.environ.get("NICHE_SCANNER_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any], root: Path) -> AppConfig:
    """Map raw TOML dict to ``AppConfig``; relative catalog paths resolve from ``root``."""
    catalog = dict(raw.get("catalog", {}))
    seed_file = catalog.get("seed_file")
    if seed_file and not Path(seed_file).is_absolute():
        catalog["seed_file"] = str(root / seed_file)
    elif not seed_file:
        catalog["seed_file"] = str(root / CatalogConfig().seed_file)

    return AppConfig(
        catalog=CatalogConfig(**catalog),
        profile=ProfileConfig(**raw.get("profile", {})),
        report=ReportConfig(**raw.get("report", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", False),
    )
