"""Tests for the schema and UI order loaders."""

import json

import pytest

from dynaform.errors import SchemaError
from dynaform.loaders import load_schema, load_ui_order
from dynaform.models.fields import (
    BooleanField,
    DropdownField,
    NumberField,
    TextField,
)


class TestLoadSchema:
    """Tests for load_schema."""

    def test_field_kinds(self, schema_document):
        """Test each property becomes the matching field variant."""
        loaded = load_schema(schema_document)
        by_key = {field.key: field for field in loaded.fields}

        assert isinstance(by_key["name"], TextField)
        assert isinstance(by_key["age"], NumberField)
        assert isinstance(by_key["country"], DropdownField)
        assert isinstance(by_key["newsletter"], BooleanField)

    def test_unsupported_types_skipped(self, schema_document):
        """Test properties with other types are left out."""
        loaded = load_schema(schema_document)
        assert len(loaded.fields) == 4
        assert "tags" not in [field.key for field in loaded.fields]

    def test_schema_order_kept(self, schema_document):
        """Test fields come back in declaration order."""
        loaded = load_schema(schema_document)
        assert [field.key for field in loaded.fields] == ["name", "age", "country", "newsletter"]

    def test_enum_options_in_document_order(self, schema_document):
        """Test dropdown options keep the enum order."""
        loaded = load_schema(schema_document)
        country = next(field for field in loaded.fields if field.key == "country")
        assert country.options == ("Turkey", "Germany", "India")

    def test_default_values(self, schema_document):
        """Test loaded fields start at their type default."""
        loaded = load_schema(schema_document)
        for field in loaded.fields:
            assert field.model_dump().get("error") is None
        by_key = {field.key: field for field in loaded.fields}
        assert by_key["name"].value == ""
        assert by_key["age"].value == ""
        assert by_key["newsletter"].value is False
        assert by_key["country"].selected == ""

    def test_required_keys(self, schema_document):
        """Test the required set is captured."""
        loaded = load_schema(schema_document)
        assert loaded.required == frozenset({"name", "age"})

    def test_required_defaults_to_empty(self):
        """Test a schema without required has no required keys."""
        loaded = load_schema({"properties": {"note": {"type": "string"}}})
        assert loaded.required == frozenset()

    def test_enum_on_number_ignored(self):
        """Test only string properties become dropdowns."""
        loaded = load_schema({"properties": {"level": {"type": "number", "enum": ["1", "2"]}}})
        assert isinstance(loaded.fields[0], NumberField)

    def test_numeric_enum_on_number(self):
        """Test a number property with numeric enum values still loads."""
        loaded = load_schema({"properties": {"level": {"type": "number", "enum": [1, 2]}}})
        assert len(loaded.fields) == 1
        assert isinstance(loaded.fields[0], NumberField)

    def test_numeric_enum_on_unsupported_type(self):
        """Test an unsupported property is skipped whatever its enum holds."""
        loaded = load_schema({
            "properties": {
                "count": {"type": "integer", "enum": [1, 2]},
                "name": {"type": "string"},
            }
        })
        assert [field.key for field in loaded.fields] == ["name"]

    def test_enum_ignored_on_boolean(self):
        """Test a boolean property keeps its kind even with an odd enum."""
        loaded = load_schema({"properties": {"agree": {"type": "boolean", "enum": "yes"}}})
        assert isinstance(loaded.fields[0], BooleanField)

    def test_extra_schema_keywords_allowed(self):
        """Test titles and other keywords do not get in the way."""
        loaded = load_schema({
            "$schema": "https://json-schema.org/draft/2020-12/schema",
            "type": "object",
            "properties": {"email": {"type": "string", "title": "Email", "format": "email"}},
        })
        assert [field.key for field in loaded.fields] == ["email"]

    def test_load_from_file(self, document_files):
        """Test loading from a path."""
        schema_path, _ = document_files
        loaded = load_schema(schema_path)
        assert len(loaded.fields) == 4

        loaded = load_schema(str(schema_path))
        assert len(loaded.fields) == 4

    def test_missing_file(self, tmp_path):
        """Test an unreadable document is a SchemaError."""
        with pytest.raises(SchemaError) as exc_info:
            load_schema(tmp_path / "missing.json")
        assert exc_info.value.source == tmp_path / "missing.json"

    def test_invalid_json(self, tmp_path):
        """Test a document that is not JSON."""
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SchemaError):
            load_schema(path)

    @pytest.mark.parametrize(
        "document",
        [
            {},
            {"required": ["name"]},
            {"properties": []},
            {"properties": {"name": "string"}},
            {"properties": {"name": {"title": "Name"}}},
            {"properties": {"country": {"type": "string", "enum": [1, 2]}}},
            {"properties": {"country": {"type": "string", "enum": []}}},
            {"properties": {"country": {"type": "string", "enum": "Turkey"}}},
            {"properties": {}, "required": "name"},
            [],
        ],
    )
    def test_malformed_documents(self, document):
        """Test shapes the loader cannot use."""
        with pytest.raises(SchemaError):
            load_schema(document)


class TestLoadUIOrder:
    """Tests for load_ui_order."""

    def test_keys_from_scopes(self, ui_document):
        """Test the last scope segment is the key."""
        assert load_ui_order(ui_document) == ["country", "name", "age"]

    def test_duplicates_kept(self):
        """Test the order is passed through as is."""
        document = {
            "elements": [
                {"scope": "#/properties/name"},
                {"scope": "#/properties/age"},
                {"scope": "#/properties/name"},
            ]
        }
        assert load_ui_order(document) == ["name", "age", "name"]

    def test_scope_without_separator(self):
        """Test a bare scope is used whole."""
        assert load_ui_order({"elements": [{"scope": "name"}]}) == ["name"]

    def test_empty_elements(self):
        """Test an empty layout gives an empty order."""
        assert load_ui_order({"elements": []}) == []

    def test_load_from_file(self, document_files):
        """Test loading from a path."""
        _, ui_path = document_files
        assert load_ui_order(ui_path) == ["country", "name", "age"]

    def test_missing_file(self, tmp_path):
        """Test an unreadable document is a SchemaError."""
        with pytest.raises(SchemaError):
            load_ui_order(tmp_path / "missing.json")

    @pytest.mark.parametrize(
        "document",
        [
            {},
            {"elements": {}},
            {"elements": [{"type": "Control"}]},
            {"elements": [{"scope": 3}]},
        ],
    )
    def test_malformed_documents(self, document):
        """Test shapes the resolver cannot use."""
        with pytest.raises(SchemaError):
            load_ui_order(document)

    def test_invalid_json(self, tmp_path):
        """Test a document that is not JSON."""
        path = tmp_path / "ui.json"
        path.write_text(json.dumps({"elements": []})[:-1], encoding="utf-8")
        with pytest.raises(SchemaError):
            load_ui_order(path)
