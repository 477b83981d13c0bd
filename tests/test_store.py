"""Tests for loading the tools dataset."""

import json

import pytest
from pydantic import ValidationError

from aitools_api.catalog.errors import DatasetError
from aitools_api.catalog.store import ToolStore, load_store
from aitools_api.config import DATA_FILE


class TestToolStore:
    def test_preserves_dataset_order(self, store):
        assert [t.slug for t in store] == [
            "alpha-chat",
            "beta-code",
            "gamma-draw",
            "delta-bot",
            "epsilon-write",
        ]
        assert len(store) == 5

    def test_get_by_slug(self, store):
        assert store.get("beta-code").name == "beta Code"
        assert store.get("nope") is None

    def test_absent_fields_stay_none(self, store):
        """Missing optional fields are None, not zero or empty."""
        delta = store.get("delta-bot")
        assert delta.rating is None
        assert delta.popularity_score is None
        assert delta.features is None
        assert delta.pricing.starting_price is None

    def test_pricing_defaults(self, store):
        pricing = store.get("alpha-chat").pricing
        assert pricing.currency == "USD"
        assert pricing.billing_cycle == "monthly"

    def test_extra_fields_are_kept(self):
        store = ToolStore.from_records(
            [
                {
                    "slug": "x",
                    "name": "X",
                    "category": "Misc",
                    "pricing": {"model": "Free"},
                    "launched": 2023,
                }
            ]
        )
        assert store.get("x").model_dump()["launched"] == 2023

    def test_duplicate_slug_rejected(self, records):
        records.append(dict(records[0]))
        with pytest.raises(DatasetError, match="alpha-chat"):
            ToolStore.from_records(records)

    def test_invalid_record_rejected(self):
        with pytest.raises(DatasetError, match="index 0"):
            ToolStore.from_records([{"slug": "no-name"}])

    def test_records_are_frozen(self, store):
        with pytest.raises(ValidationError):
            store.get("alpha-chat").name = "Changed"


class TestLoadStore:
    def test_load_from_file(self, tmp_path, records):
        path = tmp_path / "tools.json"
        path.write_text(json.dumps(records), encoding="utf-8")

        store = load_store(path)

        assert len(store) == len(records)

    def test_missing_file(self, tmp_path):
        with pytest.raises(DatasetError):
            load_store(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "tools.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(DatasetError):
            load_store(path)

    def test_not_an_array(self, tmp_path):
        path = tmp_path / "tools.json"
        path.write_text(json.dumps({"tools": []}), encoding="utf-8")
        with pytest.raises(DatasetError, match="JSON array"):
            load_store(path)

    def test_bundled_dataset_loads(self):
        store = load_store(DATA_FILE)
        assert len(store) > 0
        assert len({t.slug for t in store}) == len(store)
