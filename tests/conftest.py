"""Shared fixtures for dynaform tests."""

import json

import pytest

from dynaform.config import DynaformConfig
from dynaform.state import FormState


@pytest.fixture
def schema_document():
    """Schema with one field of every kind plus an unsupported one."""
    return {
        "properties": {
            "name": {"type": "string"},
            "age": {"type": "number"},
            "country": {"type": "string", "enum": ["Turkey", "Germany", "India"]},
            "newsletter": {"type": "boolean"},
            "tags": {"type": "array"},
        },
        "required": ["name", "age"],
    }


@pytest.fixture
def ui_document():
    """UI order that leaves out ``newsletter``."""
    return {
        "type": "VerticalLayout",
        "elements": [
            {"type": "Control", "scope": "#/properties/country"},
            {"type": "Control", "scope": "#/properties/name"},
            {"type": "Control", "scope": "#/properties/age"},
        ],
    }


@pytest.fixture
def config():
    """Configuration with the built-in defaults, independent of the environment."""
    return DynaformConfig()


@pytest.fixture
def document_files(tmp_path, schema_document, ui_document):
    """Write both documents to disk and return their paths."""
    schema_path = tmp_path / "form_schema.json"
    ui_path = tmp_path / "ui_schema.json"
    schema_path.write_text(json.dumps(schema_document), encoding="utf-8")
    ui_path.write_text(json.dumps(ui_document), encoding="utf-8")
    return schema_path, ui_path


@pytest.fixture
def form(document_files, config):
    """Form loaded from the on-disk documents."""
    schema_path, ui_path = document_files
    return FormState(schema_path, ui_path, config=config)
