"""
Field models for schema-driven forms.

Every field in a form is one of four variants, distinguished by its
``kind`` tag. The models are frozen: a change of value produces a new
field object, and the ``key`` and dropdown ``options`` never change after
the schema has been loaded.
"""

import re
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Raw input buffer of a number field (empty or ASCII digits only)
DIGITS_ONLY = re.compile(r"[0-9]*")

# What counts as an integer when a number field is read back
INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class FieldKind(str, Enum):
    """Tag of a field variant."""

    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DROPDOWN = "dropdown"


class _BaseField(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    key: str = Field(..., min_length=1, description="Field key, shared by schema and UI order")


class TextField(_BaseField):
    """Free text input."""

    kind: Literal["text"] = "text"
    value: str = Field(default="", description="Current text")
    error: str | None = Field(default=None, description="Message from the last validation pass")


class NumberField(_BaseField):
    """
    Numeric input kept as its raw digit buffer.

    The value stays a string so that an empty input can be told apart
    from zero; it is parsed only when validating or serializing.
    """

    kind: Literal["number"] = "number"
    value: str = Field(default="", description="Raw digit-only input")
    error: str | None = Field(default=None, description="Message from the last validation pass")

    @field_validator("value")
    @classmethod
    def _digits_only(cls, value: str) -> str:
        if not DIGITS_ONLY.fullmatch(value):
            raise ValueError("number input may only contain the digits 0-9")
        return value


class BooleanField(_BaseField):
    """On/off switch. Never carries a validation error."""

    kind: Literal["boolean"] = "boolean"
    value: bool = Field(default=False)


class DropdownField(_BaseField):
    """Selection from a fixed list of options."""

    kind: Literal["dropdown"] = "dropdown"
    options: tuple[str, ...] = Field(..., min_length=1, description="Allowed values, in schema order")
    selected: str = Field(default="", description="Selected option, empty when unset")
    error: str | None = Field(default=None, description="Message from the last validation pass")

    @model_validator(mode="after")
    def _selected_is_an_option(self) -> "DropdownField":
        if self.selected and self.selected not in self.options:
            raise ValueError(f"'{self.selected}' is not one of {list(self.options)}")
        return self


FormField = Annotated[
    Union[TextField, NumberField, BooleanField, DropdownField],
    Field(discriminator="kind"),
]

# Attribute holding the user-editable value of each variant
VALUE_ATTRIBUTES: dict[FieldKind, str] = {
    FieldKind.TEXT: "value",
    FieldKind.NUMBER: "value",
    FieldKind.BOOLEAN: "value",
    FieldKind.DROPDOWN: "selected",
}

# Python type a value change must have for each variant
VALUE_TYPES: dict[FieldKind, type] = {
    FieldKind.TEXT: str,
    FieldKind.NUMBER: str,
    FieldKind.BOOLEAN: bool,
    FieldKind.DROPDOWN: str,
}


def field_value(field: FormField) -> Any:
    """Current user-editable value of a field."""
    return getattr(field, VALUE_ATTRIBUTES[FieldKind(field.kind)])


def field_error(field: FormField) -> str | None:
    """Current error of a field (always None for booleans)."""
    if FieldKind(field.kind) is FieldKind.BOOLEAN:
        return None
    return field.error


def replace_field(field: FormField, **changes: Any) -> FormField:
    """
    Return a copy of ``field`` with ``changes`` applied.

    Unlike ``model_copy`` the copy is validated again, so the variant's
    invariants hold for the result.

    Raises:
        pydantic.ValidationError: If the changes break an invariant.
    """
    data = field.model_dump()
    data.update(changes)
    return field.__class__.model_validate(data)


def digits_only(raw: str) -> str:
    """Drop every character that is not an ASCII digit."""
    return "".join(ch for ch in raw if "0" <= ch <= "9")


def parse_int(raw: str) -> int | None:
    """
    Parse ``raw`` as a signed 32-bit integer.

    Returns None for empty input, anything that is not an optionally
    signed run of ASCII digits, and values outside the 32-bit range.
    """
    if not INTEGER_LITERAL.fullmatch(raw):
        return None
    number = int(raw)
    if number < INT32_MIN or number > INT32_MAX:
        return None
    return number
