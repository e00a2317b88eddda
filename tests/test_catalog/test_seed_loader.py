"""
Tests for niche_scanner/catalog/seed_loader.py.

Covers:
  - The committed catalog loads, keeps file order, and has unique ids.
  - Comment-only entries are skipped.
  - Validation: missing/duplicate ids, out-of-enumeration values, model
    range errors.
  - Empty catalogs raise EmptyCatalogError.
  - Non-array JSON is rejected.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from niche_scanner.catalog.seed_loader import load_catalog, parse_catalog
from niche_scanner.errors import EmptyCatalogError, InvalidEnumValueError
from niche_scanner.taxonomy.niche_taxonomy import LongTailCeiling


def _record(niche_id: str = "rec-a", **overrides) -> dict:
    base = {
        "id": niche_id,
        "name": "Record",
        "underservedAngle": "Angle.",
        "skillSignals": ["leadership"],
        "productionIntensity": "5to10",
        "monetizationCeiling": "$2000/month",
        "cpmRange": [10, 20],
        "monetizationTimelineMonths": 3,
        "audienceLoyalty": 8,
        "contentSaturation": 2,
        "searchTrend": "growing",
        "competitionLevel": "Low",
        "formatMix": ["Shorts"],
    }
    base.update(overrides)
    return base


def _write(tmp_path: Path, data) -> Path:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


# ── Committed catalog ─────────────────────────────────────────────────────────

class TestSeedCatalog:
    def test_loads(self, seed_catalog_path):
        catalog = load_catalog(seed_catalog_path)
        assert len(catalog) >= 2

    def test_ids_unique(self, seed_catalog_path):
        ids = [n.id for n in load_catalog(seed_catalog_path)]
        assert len(ids) == len(set(ids))

    def test_preserves_file_order(self, seed_catalog_path):
        raw = json.loads(seed_catalog_path.read_text(encoding="utf-8"))
        file_ids = [r["id"] for r in raw if "id" in r]
        assert [n.id for n in load_catalog(seed_catalog_path)] == file_ids

    def test_contains_a_long_tail_niche(self, seed_catalog_path):
        catalog = load_catalog(seed_catalog_path)
        assert any(isinstance(n.monetization_ceiling, LongTailCeiling) for n in catalog)


# ── parse_catalog ─────────────────────────────────────────────────────────────

class TestParseCatalog:
    def test_valid_records(self):
        catalog = parse_catalog([_record("a"), _record("b")])
        assert [n.id for n in catalog] == ["a", "b"]
        assert isinstance(catalog, tuple)

    def test_comment_entries_skipped(self):
        catalog = parse_catalog([{"_comment": "header"}, _record("a")])
        assert [n.id for n in catalog] == ["a"]

    @pytest.mark.parametrize("entry, type_name", [(5, "int"), ("niche", "str"), ([1, 2], "list")])
    def test_non_object_entry_raises(self, entry, type_name):
        with pytest.raises(ValueError, match=f"index 1 must be a JSON object, got {type_name}"):
            parse_catalog([_record("a"), entry])

    def test_missing_id_raises(self):
        rec = _record()
        del rec["id"]
        with pytest.raises(ValueError, match="missing 'id'"):
            parse_catalog([rec])

    def test_duplicate_id_raises(self):
        with pytest.raises(ValueError, match="Duplicate niche id 'a'"):
            parse_catalog([_record("a"), _record("a")])

    @pytest.mark.parametrize(
        "field, bad",
        [
            ("productionIntensity", "20plus"),
            ("searchTrend", "exploding"),
            ("competitionLevel", "low"),
            ("monetizationCeiling", "$9000/month"),
        ],
    )
    def test_out_of_enum_value_raises(self, field, bad):
        with pytest.raises(InvalidEnumValueError) as exc_info:
            parse_catalog([_record("a"), _record("b", **{field: bad})])
        assert exc_info.value.field == field
        assert exc_info.value.value == bad
        assert exc_info.value.index == 1

    def test_missing_enum_field_raises(self):
        rec = _record()
        del rec["searchTrend"]
        with pytest.raises(InvalidEnumValueError, match="searchTrend"):
            parse_catalog([rec])

    def test_range_violation_raises_validation_error(self):
        with pytest.raises(ValidationError):
            parse_catalog([_record(audienceLoyalty=11)])

    def test_empty_raises(self):
        with pytest.raises(EmptyCatalogError):
            parse_catalog([])

    def test_only_comments_raises(self):
        with pytest.raises(EmptyCatalogError):
            parse_catalog([{"_comment": "nothing here"}])


# ── load_catalog ──────────────────────────────────────────────────────────────

class TestLoadCatalog:
    def test_round_trip_from_file(self, tmp_path):
        path = _write(tmp_path, [_record("a"), _record("b", monetizationCeiling="long-tail")])
        catalog = load_catalog(path)
        assert catalog[1].monetization_ceiling == LongTailCeiling()

    def test_empty_file_array_names_source(self, tmp_path):
        path = _write(tmp_path, [])
        with pytest.raises(EmptyCatalogError, match="catalog.json"):
            load_catalog(path)

    def test_non_array_rejected(self, tmp_path):
        path = _write(tmp_path, {"id": "a"})
        with pytest.raises(ValueError, match="JSON array"):
            load_catalog(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path / "absent.json")
