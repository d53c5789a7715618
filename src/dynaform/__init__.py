"""
dynaform: Schema-driven forms.

Build a typed, ordered form from a JSON Schema document and a UI schema
document, validate what the user typed, and get the result back as a flat
payload.

Simple Usage:
    from dynaform import FormState

    form = FormState("form_schema.json", "ui_schema.json")

    for field in form.fields():
        print(field.kind, field.key)

    form.set_value("name", "Ada Lovelace")
    form.set_value("age", "36")

    if form.validate():
        print(form.result_json(indent=2))
    else:
        print(form.last_validation.to_error_dict())

Building Blocks:
    from dynaform import load_schema, load_ui_order, order_fields, ValidationEngine

    loaded = load_schema("form_schema.json")
    fields = order_fields(loaded.fields, load_ui_order("ui_schema.json"))

    engine = ValidationEngine(loaded.required, number_minimum=21)
    fields, result = engine.evaluate(fields)
"""

from dynaform.state import (
    FormState,
    order_fields,
)
from dynaform.errors import (
    DynaformError,
    SchemaError,
    TypeMismatch,
)
from dynaform.loaders import (
    LoadedSchema,
    load_schema,
    load_ui_order,
)
from dynaform.models.fields import (
    BooleanField,
    DropdownField,
    FieldKind,
    FormField,
    NumberField,
    TextField,
    digits_only,
)
from dynaform.models.validation_result import (
    ValidationResult,
    FieldValidationError,
)
from dynaform.validation import ValidationEngine
from dynaform.serializer import serialize, to_json

__all__ = [
    # Main interface
    "FormState",
    "order_fields",
    # Errors
    "DynaformError",
    "SchemaError",
    "TypeMismatch",
    # Loaders
    "LoadedSchema",
    "load_schema",
    "load_ui_order",
    # Fields
    "FieldKind",
    "FormField",
    "TextField",
    "NumberField",
    "BooleanField",
    "DropdownField",
    "digits_only",
    # Validation
    "ValidationEngine",
    "ValidationResult",
    "FieldValidationError",
    # Serialization
    "serialize",
    "to_json",
]

__version__ = "0.1.0"
