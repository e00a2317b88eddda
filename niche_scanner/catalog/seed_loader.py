"""
Seed catalog loader: JSON → validated ``MicroNiche`` tuple.

File format
-----------
A JSON array of niche objects using the camelCase keys of the catalog data
file::

    {
      "id": "first-time-manager-confidence",
      "name": "First-Time Manager Confidence",
      "underservedAngle": "...",
      "skillSignals": ["leadership", "management", "coaching"],
      "productionIntensity": "5to10",
      "monetizationCeiling": "$2000/month",
      "cpmRange": [14, 26],
      "monetizationTimelineMonths": 4,
      "audienceLoyalty": 8,
      "contentSaturation": 3,
      "searchTrend": "growing",
      "competitionLevel": "Low",
      "formatMix": ["Shorts", "Long-form"]
    }

Objects without an ``id`` key whose keys all start with ``_comment`` are
treated as annotations and skipped.

Validation rules
----------------
- Entries that are not JSON objects, and missing or duplicate ``id``
  values, are rejected (``ValueError``).
- ``productionIntensity``, ``monetizationCeiling``, ``searchTrend`` and
  ``competitionLevel`` must be in their closed enumerations
  (``InvalidEnumValueError``, with the record index).
- Ranges, CPM ordering and timeline positivity are enforced by the
  ``MicroNiche`` model (``pydantic.ValidationError``).
- A file with no niche records raises ``EmptyCatalogError``.

Record order is preserved; it is the ranking tie-break.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from niche_scanner.errors import EmptyCatalogError, InvalidEnumValueError
from niche_scanner.models.niche import MicroNiche, coerce_enum
from niche_scanner.taxonomy.niche_taxonomy import (
    LONG_TAIL,
    CompetitionLevel,
    MonetizationGoal,
    SearchTrend,
    TimeAvailability,
)

log = logging.getLogger(__name__)

_VALID_CEILINGS: tuple[str, ...] = (*(g.value for g in MonetizationGoal), LONG_TAIL)


def _is_comment(rec: dict[str, Any]) -> bool:
    return "id" not in rec and all(k.startswith("_comment") for k in rec)


def _validate_records(records: list[dict[str, Any]]) -> None:
    """Raise for missing/duplicate ids and out-of-enumeration values."""
    seen_ids: set[str] = set()
    for i, rec in enumerate(records):
        niche_id = rec.get("id")
        if not niche_id:
            raise ValueError(f"Niche at index {i} is missing 'id' field.")
        if niche_id in seen_ids:
            raise ValueError(f"Duplicate niche id '{niche_id}' at index {i}.")
        seen_ids.add(niche_id)

        coerce_enum(TimeAvailability, rec.get("productionIntensity"), "productionIntensity", i)
        coerce_enum(SearchTrend, rec.get("searchTrend"), "searchTrend", i)
        coerce_enum(CompetitionLevel, rec.get("competitionLevel"), "competitionLevel", i)

        ceiling = rec.get("monetizationCeiling")
        if ceiling not in _VALID_CEILINGS:
            raise InvalidEnumValueError("monetizationCeiling", ceiling, _VALID_CEILINGS, index=i)


def parse_catalog(
    raw_records: Iterable[dict[str, Any]],
    source: str | None = None,
) -> tuple[MicroNiche, ...]:
    """Validate raw niche dicts and build the catalog.

    Args:
        raw_records: Decoded JSON objects, in catalog order.
        source:      Label for error messages (usually the file path).

    Returns:
        Tuple of ``MicroNiche`` in input order.

    Raises:
        EmptyCatalogError:     No niche records after dropping comments.
        InvalidEnumValueError: A record has an out-of-enumeration value.
        ValueError:            Non-object entries, missing or duplicate ids.
        pydantic.ValidationError: Any other malformed field.
    """
    records: list[dict[str, Any]] = []
    for i, rec in enumerate(raw_records):
        if not isinstance(rec, dict):
            raise ValueError(
                f"Niche at index {i} must be a JSON object, got {type(rec).__name__}."
            )
        if not _is_comment(rec):
            records.append(rec)
    if not records:
        raise EmptyCatalogError(source)
    _validate_records(records)
    return tuple(MicroNiche.model_validate(rec) for rec in records)


def load_catalog(path: Path) -> tuple[MicroNiche, ...]:
    """Load and validate a catalog JSON file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the top-level value is not an array.
        Plus everything ``parse_catalog()`` raises.
    """
    path = Path(path)
    log.info("Loading niche catalog", extra={"catalog_source": str(path)})
    raw: Any = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise ValueError(
            f"Catalog file {path} must contain a JSON array, got {type(raw).__name__}."
        )
    catalog = parse_catalog(raw, source=str(path))
    log.info(
        "Loaded %d micro-niches",
        len(catalog),
        extra={"catalog_source": str(path), "niche_count": len(catalog)},
    )
    return catalog
