"""Tests for frontmatter_lint.schema"""

import json
from pathlib import Path

import pytest

from frontmatter_lint.errors import SchemaError
from frontmatter_lint.schema import (
    ARRAY,
    BOOLEAN,
    NUMBER,
    STRING,
    UNRESOLVED,
    FieldSpec,
    Schema,
    load_schema_file,
    resolve_type,
)


# ─── Type resolution ───────────────────────────────────────────────────────

class TestResolveType:
    def test_canonical_names(self):
        assert resolve_type("String") is STRING
        assert resolve_type("Number") is NUMBER
        assert resolve_type("Boolean") is BOOLEAN

    def test_aliases_are_case_insensitive(self):
        assert resolve_type("str") is STRING
        assert resolve_type("TEXT") is STRING
        assert resolve_type("list") is ARRAY

    def test_python_classes(self):
        assert resolve_type(str) is STRING
        assert resolve_type(int) is NUMBER
        assert resolve_type(float) is NUMBER
        assert resolve_type(bool) is BOOLEAN

    def test_other_class_is_nominal(self):
        descriptor = resolve_type(Path)
        assert descriptor.name == "Path"
        assert not descriptor.primitive
        assert descriptor.pytype is Path

    def test_unknown_name_keeps_its_name(self):
        descriptor = resolve_type("Url")
        assert descriptor.name == "Url"
        assert descriptor.pytype is None

    def test_missing_type_is_unresolved(self):
        assert resolve_type(None) is UNRESOLVED
        assert resolve_type("") is UNRESOLVED
        assert resolve_type(42) is UNRESOLVED


# ─── Schema.from_mapping ───────────────────────────────────────────────────

class TestFromMapping:
    def test_builds_field_specs(self):
        schema = Schema.from_mapping({
            "title": {"required": True, "type": "String"},
            "tag": {"type": str, "allowedValues": ["blog", "news"]},
        })
        assert schema["title"] == FieldSpec(True, STRING, None)
        assert schema["tag"] == FieldSpec(False, STRING, ("blog", "news"))

    def test_snake_case_allowed_values(self):
        schema = Schema.from_mapping({"tag": {"type": "String", "allowed_values": ["a"]}})
        assert schema["tag"].allowed_values == ("a",)

    def test_lookup_of_unknown_field(self):
        schema = Schema.from_mapping({"title": {"type": "String"}})
        assert schema.get("author") is None
        assert "author" not in schema

    def test_required_fields_in_declaration_order(self):
        schema = Schema.from_mapping({
            "b": {"required": True, "type": "String"},
            "a": {"required": False, "type": "String"},
            "c": {"required": True, "type": "Number"},
        })
        assert schema.required_fields() == ["b", "c"]

    def test_schema_is_read_only(self):
        schema = Schema.from_mapping({"title": {"type": "String"}})
        with pytest.raises(TypeError):
            schema["title"] = FieldSpec(True, STRING)

    def test_empty_mapping_is_a_valid_schema(self):
        schema = Schema.from_mapping({})
        assert len(schema) == 0
        assert schema.required_fields() == []

    def test_not_a_mapping(self):
        with pytest.raises(SchemaError, match="expected mapping, got list"):
            Schema.from_mapping(["title"])

    def test_function_is_not_a_mapping(self):
        with pytest.raises(SchemaError, match="expected mapping, got function"):
            Schema.from_mapping(lambda: {})

    def test_entry_not_a_mapping(self):
        with pytest.raises(SchemaError, match="'title'"):
            Schema.from_mapping({"title": "String"})

    def test_required_must_be_bool(self):
        with pytest.raises(SchemaError, match="'required' must be a boolean"):
            Schema.from_mapping({"title": {"required": "yes", "type": "String"}})

    def test_allowed_values_must_be_a_list(self):
        with pytest.raises(SchemaError, match="'allowedValues' must be a list"):
            Schema.from_mapping({"tag": {"type": "String", "allowedValues": "blog"}})


# ─── Spec files ────────────────────────────────────────────────────────────

class TestLoadSchemaFile:
    def test_yaml(self, tmp_path):
        path = tmp_path / "specs.yml"
        path.write_text(
            "title:\n"
            "  required: true\n"
            "  type: String\n"
            "tag:\n"
            "  type: String\n"
            "  allowedValues: [blog, news]\n"
        )
        schema = load_schema_file(path)
        assert schema.required_fields() == ["title"]
        assert schema["tag"].allowed_values == ("blog", "news")

    def test_json(self, tmp_path):
        path = tmp_path / "specs.json"
        path.write_text(json.dumps({"count": {"type": "Number"}}))
        assert load_schema_file(path)["count"].expected_type is NUMBER

    def test_meta_schema_violation_names_the_path(self, tmp_path):
        path = tmp_path / "specs.yml"
        path.write_text('title:\n  required: "true"\n')
        with pytest.raises(SchemaError, match="title/required"):
            load_schema_file(path)

    def test_unknown_constraint(self, tmp_path):
        path = tmp_path / "specs.yml"
        path.write_text("title:\n  maxLength: 3\n")
        with pytest.raises(SchemaError):
            load_schema_file(path)

    def test_top_level_list(self, tmp_path):
        path = tmp_path / "specs.yml"
        path.write_text("- title\n- tag\n")
        with pytest.raises(SchemaError):
            load_schema_file(path)

    def test_unparseable_yaml(self, tmp_path):
        path = tmp_path / "specs.yml"
        path.write_text("title: [unclosed\n")
        with pytest.raises(SchemaError, match="Cannot parse"):
            load_schema_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(SchemaError, match="Cannot read"):
            load_schema_file(tmp_path / "nope.yml")
