"""
Schema loader.

Turns a JSON Schema style document into the form's field models:

    {
        "properties": {
            "name": {"type": "string"},
            "age": {"type": "number"},
            "country": {"type": "string", "enum": ["TR", "DE"]},
            "newsletter": {"type": "boolean"}
        },
        "required": ["name"]
    }

Properties with a type the form cannot render are skipped.
"""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from dynaform.errors import SchemaError
from dynaform.loaders.documents import DocumentSource, describe_source, read_document
from dynaform.models.fields import (
    BooleanField,
    DropdownField,
    FormField,
    NumberField,
    TextField,
)

logger = logging.getLogger("dynaform")

# Dropdown options must be a list of strings
_ENUM_OPTIONS = TypeAdapter(list[str])


class PropertyDefinition(BaseModel):
    """One entry of the schema's ``properties`` object."""

    model_config = ConfigDict(extra="allow")

    type: Any = Field(..., description="JSON Schema type: string, number, boolean")
    enum: Any = Field(default=None, description="Allowed values, only read for strings")


class SchemaDocument(BaseModel):
    """Top level of a schema document."""

    model_config = ConfigDict(extra="allow")

    properties: dict[str, PropertyDefinition] = Field(..., description="Field key to definition")
    required: list[str] = Field(default_factory=list, description="Keys that must be filled in")


class LoadedSchema(BaseModel):
    """Fields built from a schema, in schema order, with the required keys."""

    fields: list[FormField] = Field(default_factory=list)
    required: frozenset[str] = Field(default_factory=frozenset)


def _build_field(key: str, definition: PropertyDefinition) -> FormField | None:
    """Create the default-valued field for one property, or None if unsupported."""
    if definition.type == "string":
        if definition.enum is not None:
            options = _ENUM_OPTIONS.validate_python(definition.enum)
            return DropdownField(key=key, options=tuple(options))
        return TextField(key=key)
    if definition.type == "number":
        return NumberField(key=key)
    if definition.type == "boolean":
        return BooleanField(key=key)
    return None


def load_schema(source: DocumentSource) -> LoadedSchema:
    """
    Load the field models described by a schema document.

    Args:
        source: Path to the schema JSON file, or the decoded document.

    Returns:
        LoadedSchema with one field per supported property, in the
        order the properties are declared, and the required key set.

    Raises:
        SchemaError: If the document cannot be read or does not have the
            expected shape. No fields are returned in that case.
    """
    raw = read_document(source)
    label = describe_source(source)

    try:
        document = SchemaDocument.model_validate(raw)
    except ValidationError as e:
        logger.error(f"Malformed schema document {label}: {e}")
        raise SchemaError(f"Malformed schema document: {e}", source) from e

    fields: list[FormField] = []
    for key, definition in document.properties.items():
        try:
            field = _build_field(key, definition)
        except ValidationError as e:
            logger.error(f"Invalid property '{key}' in {label}: {e}")
            raise SchemaError(f"Invalid property '{key}': {e}", source) from e

        if field is None:
            logger.debug(f"Skipping property '{key}' with unsupported type {definition.type!r}")
            continue
        fields.append(field)

    logger.info(f"Loaded {len(fields)} field(s) from {label}")
    return LoadedSchema(fields=fields, required=frozenset(document.required))
