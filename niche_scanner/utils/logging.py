"""
Logging setup for the niche scanner.

``configure_logging(config)`` is called once by each CLI command.  It owns
the ``niche_scanner`` package logger only: handlers are replaced on every
call, and records do not propagate to the root logger, so embedding the
scorer in another application leaves that application's logging alone.

Structured context
------------------
The catalog loader and the scorer pass context through ``extra=``.  Only
the keys in ``CONTEXT_FIELDS`` are rendered:

    catalog_source     path of the catalog file being loaded
    niche_count        number of micro-niches loaded or ranked
    time_availability  profile bandwidth the catalog was ranked for
    monetization_goal  profile goal the catalog was ranked for
    top_niche_id       id of the recommended niche
    top_score          composite score of the recommended niche

Plain lines append them as ``key=value`` pairs; JSON lines
(``json_format = true``) carry them as top-level keys.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from niche_scanner.config import LoggingConfig

PACKAGE_LOGGER = "niche_scanner"

CONTEXT_FIELDS: tuple[str, ...] = (
    "catalog_source",
    "niche_count",
    "time_availability",
    "monetization_goal",
    "top_niche_id",
    "top_score",
)


def record_context(record: logging.LogRecord) -> dict[str, Any]:
    """Known context fields set on ``record``, in ``CONTEXT_FIELDS`` order."""
    return {key: getattr(record, key) for key in CONTEXT_FIELDS if hasattr(record, key)}


class ContextFormatter(logging.Formatter):
    """``LEVEL logger: message  key=value ...`` for terminal output."""

    def __init__(self) -> None:
        super().__init__("%(levelname)-7s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = record_context(record)
        if context:
            line += "  " + " ".join(f"{k}={v}" for k, v in context.items())
        return line


class JsonFormatter(logging.Formatter):
    """One JSON object per record: ``ts``, ``level``, ``logger``, ``msg``, context."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
                timespec="seconds"
            ),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            **record_context(record),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(config: "LoggingConfig") -> logging.Logger:
    """Attach stderr (and optional file) handlers to the package logger.

    Returns the configured ``niche_scanner`` logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logging.getLevelName(config.level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter: logging.Formatter = JsonFormatter() if config.json_format else ContextFormatter()

    # Report output owns stdout.
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.setLevel(level)
    logger.propagate = False
    return logger
