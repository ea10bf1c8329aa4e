"""Tests for draft helpers and the Schema view."""

import json

import pytest

from sconf.core.draft import load_draft, preset
from sconf.core.errors import KeyNotFound, ValidationError
from sconf.core.schema import Schema, infer_type


class TestPreset:
    def test_wraps_value(self):
        assert preset(3) == {"preset": 3}

    def test_copies_metadata_next_to_preset(self):
        meta = {"description": "Retries", "min": 0}
        entry = preset(3, meta)
        assert entry == {"description": "Retries", "min": 0, "preset": 3}
        assert "preset" not in meta

    def test_value_wins_over_preset_in_meta(self):
        assert preset(1, {"preset": 2})["preset"] == 1


class TestSchema:
    def test_flattened_preserves_draft_order(self, sample_draft, sample_presets):
        schema = Schema(sample_draft)
        assert list(schema.flattened) == ["animal", "fruit", "person", "list"]
        assert dict(schema.flattened) == sample_presets

    def test_flattened_is_read_only(self, sample_draft):
        schema = Schema(sample_draft)
        with pytest.raises(TypeError):
            schema.flattened["animal"] = "dog"

    def test_has(self, sample_draft):
        schema = Schema(sample_draft)
        assert schema.has("animal")
        assert not schema.has("colour")
        assert "fruit" in schema
        assert len(schema) == 4

    def test_get_returns_preset(self, sample_draft):
        schema = Schema(sample_draft)
        assert schema.get("person") == {"name": "John", "age": 21}

    def test_get_unknown_key_raises(self, sample_draft):
        schema = Schema(sample_draft)
        with pytest.raises(KeyNotFound):
            schema.get("colour")

    def test_meta_excludes_preset(self, sample_draft):
        schema = Schema(sample_draft)
        assert schema.meta("person") == {"description": "Owner"}
        assert schema.meta("animal") == {}

    def test_meta_unknown_key_raises(self, sample_draft):
        schema = Schema(sample_draft)
        with pytest.raises(KeyNotFound):
            schema.meta("colour")

    def test_defaults_are_independent_copies(self, sample_draft):
        schema = Schema(sample_draft)
        first = schema.defaults()
        first["list"].append(6)
        first["person"]["age"] = 99
        assert schema.defaults()["list"] == [1, 2, 3, 4, 5]
        assert schema.get("person")["age"] == 21

    def test_schema_is_isolated_from_draft_mutation(self, sample_draft):
        schema = Schema(sample_draft)
        sample_draft["list"]["preset"].append(6)
        assert schema.get("list") == [1, 2, 3, 4, 5]

    @pytest.mark.parametrize("draft", [{}, [], "animal", None])
    def test_rejects_empty_or_non_mapping_draft(self, draft):
        with pytest.raises(ValidationError):
            Schema(draft)

    def test_rejects_entry_without_preset(self):
        with pytest.raises(ValidationError, match="animal"):
            Schema({"animal": {"description": "no preset"}})

    def test_field_type(self, sample_draft):
        schema = Schema(sample_draft)
        assert schema.field_type("animal") is str
        assert schema.field_type("person") is dict
        assert schema.field_type("list") is list


def test_infer_type_distinguishes_bool_from_int():
    assert infer_type(True) is bool
    assert infer_type(1) is int
    assert infer_type(1.5) is float
    assert infer_type(None) is type(None)
    assert infer_type((1, 2)) is tuple


class TestLoadDraft:
    def test_loads_entries(self, tmp_path):
        path = tmp_path / "draft.json"
        path.write_text(json.dumps({"theme": {"preset": "dark", "description": "UI"}}))
        draft = load_draft(path)
        assert Schema(draft).meta("theme") == {"description": "UI"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ValidationError, match="not found"):
            load_draft(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "draft.json"
        path.write_text("{not json")
        with pytest.raises(ValidationError):
            load_draft(path)

    def test_non_object(self, tmp_path):
        path = tmp_path / "draft.json"
        path.write_text("[1, 2]")
        with pytest.raises(ValidationError, match="JSON object"):
            load_draft(path)
