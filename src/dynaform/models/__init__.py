"""
Data models for dynaform.

This module contains Pydantic models for:
- Form fields (one variant per supported type)
- Validation results
"""

from dynaform.models.fields import (
    BooleanField,
    DropdownField,
    FieldKind,
    FormField,
    NumberField,
    TextField,
    digits_only,
    field_error,
    field_value,
    parse_int,
    replace_field,
)
from dynaform.models.validation_result import (
    FieldValidationError,
    ValidationResult,
)

__all__ = [
    # Fields
    "FieldKind",
    "FormField",
    "TextField",
    "NumberField",
    "BooleanField",
    "DropdownField",
    # Field helpers
    "digits_only",
    "field_error",
    "field_value",
    "parse_int",
    "replace_field",
    # Validation
    "ValidationResult",
    "FieldValidationError",
]
