"""
Result serializer.

Projects the current field values into a flat ``{key: value}`` payload.
The projection does not look at validation errors.
"""

import json
from typing import Any, Callable, Iterable

from dynaform.models.fields import FieldKind, FormField, parse_int

_PROJECTIONS: dict[FieldKind, Callable[[FormField], Any]] = {
    FieldKind.TEXT: lambda field: field.value,
    FieldKind.NUMBER: lambda field: parse_int(field.value) or 0,
    FieldKind.BOOLEAN: lambda field: field.value,
    FieldKind.DROPDOWN: lambda field: field.selected,
}


def serialize(fields: Iterable[FormField]) -> dict[str, str | int | bool]:
    """
    Build the result payload.

    Text and dropdown values are kept as strings, booleans as booleans,
    and number inputs become integers (0 when empty or unparseable).
    """
    return {field.key: _PROJECTIONS[FieldKind(field.kind)](field) for field in fields}


def to_json(fields: Iterable[FormField], indent: int | None = None) -> str:
    """Build the result payload as a JSON string."""
    return json.dumps(serialize(fields), indent=indent, ensure_ascii=False)
