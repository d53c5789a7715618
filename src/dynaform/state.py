"""
Form state.

Owns the ordered list of fields of one form session. The list is built
from the schema and UI order documents, then changed one field at a time
through ``set_value`` and checked through ``validate``.

Usage:
    form = FormState("form_schema.json", "ui_schema.json")

    for field in form.fields():
        render(field)

    form.set_value("name", "Ada")
    form.set_value("newsletter", True)

    if form.validate():
        payload = form.serialize()

A FormState has no internal locking; callers sharing one across threads
must serialize access themselves.
"""

import logging
from typing import Any, Iterable, Mapping, Sequence

from pydantic import ValidationError

from dynaform.config import DynaformConfig, get_config
from dynaform.errors import TypeMismatch
from dynaform.loaders.documents import DocumentSource
from dynaform.loaders.schema_loader import load_schema
from dynaform.loaders.ui_order import load_ui_order
from dynaform.models.fields import (
    VALUE_ATTRIBUTES,
    VALUE_TYPES,
    FieldKind,
    FormField,
    replace_field,
)
from dynaform.models.validation_result import ValidationResult
from dynaform.serializer import serialize, to_json
from dynaform.validation import ValidationEngine

logger = logging.getLogger("dynaform")


def order_fields(fields: Iterable[FormField], order: Sequence[str]) -> list[FormField]:
    """
    Sort fields by the position of their key in ``order``.

    The sort is stable. Keys listed more than once count at their first
    position, and fields missing from ``order`` go last in their original
    relative order.
    """
    positions: dict[str, int] = {}
    for index, key in enumerate(order):
        positions.setdefault(key, index)

    unordered = len(order)
    return sorted(fields, key=lambda field: positions.get(field.key, unordered))


class FormState:
    """Live, ordered, mutable collection of the fields of one form."""

    def __init__(
        self,
        schema_source: DocumentSource | None = None,
        ui_schema_source: DocumentSource | None = None,
        *,
        config: DynaformConfig | None = None,
    ):
        """
        Load the form.

        Args:
            schema_source: Schema document path or mapping. Defaults to
                ``config.schema_path``.
            ui_schema_source: UI order document path or mapping. Defaults
                to ``config.ui_schema_path``.
            config: Settings for the validation rules. Defaults to the
                global configuration.

        Raises:
            SchemaError: If either document cannot be loaded.
        """
        self.config = config or get_config()
        self.schema_source = schema_source if schema_source is not None else self.config.schema_path
        self.ui_schema_source = (
            ui_schema_source if ui_schema_source is not None else self.config.ui_schema_path
        )

        self._fields: list[FormField] = []
        self._required: frozenset[str] = frozenset()
        self.last_validation: ValidationResult | None = None

        self._load()

    def _load(self) -> None:
        loaded = load_schema(self.schema_source)
        order = load_ui_order(self.ui_schema_source)

        # Only swap in the new state once both documents loaded
        self._fields = order_fields(loaded.fields, order)
        self._required = loaded.required
        self.last_validation = None

        logger.info(f"Form ready with {len(self._fields)} field(s): {[f.key for f in self._fields]}")

    @property
    def required(self) -> frozenset[str]:
        """Keys of the fields that must be filled in."""
        return self._required

    def fields(self) -> tuple[FormField, ...]:
        """Current fields in display order."""
        return tuple(self._fields)

    def _index_of(self, key: str) -> int:
        for index, field in enumerate(self._fields):
            if field.key == key:
                return index
        raise TypeMismatch(f"No field with key '{key}'", key=key)

    def field(self, key: str) -> FormField:
        """
        Get one field by key.

        Raises:
            TypeMismatch: If no field has this key.
        """
        return self._fields[self._index_of(key)]

    def _updated(self, key: str, value: Any) -> tuple[int, FormField]:
        index = self._index_of(key)
        current = self._fields[index]
        kind = FieldKind(current.kind)

        expected = VALUE_TYPES[kind]
        if type(value) is not expected:
            raise TypeMismatch(
                f"Field '{key}' ({kind.value}) expects {expected.__name__}, got {type(value).__name__}",
                key=key,
            )

        changes: dict[str, Any] = {VALUE_ATTRIBUTES[kind]: value}
        if kind is not FieldKind.BOOLEAN:
            changes["error"] = None

        try:
            return index, replace_field(current, **changes)
        except ValidationError as e:
            raise TypeMismatch(f"Invalid value for field '{key}': {e.errors()[0]['msg']}", key=key) from e

    def set_value(self, key: str, value: Any) -> FormField:
        """
        Replace the value of one field and clear its error.

        Text, number and dropdown fields take a ``str``; boolean fields
        take a ``bool``. Number input must be digits only and a dropdown
        selection must be one of the options or ``""``.

        Returns:
            The updated field.

        Raises:
            TypeMismatch: If the key is unknown or the value does not fit
                the field. The form is left unchanged.
        """
        index, updated = self._updated(key, value)
        self._fields[index] = updated
        logger.debug(f"Set {key}={value!r}")
        return updated

    def set_values(self, values: Mapping[str, Any]) -> None:
        """
        Apply several ``set_value`` calls as one update.

        Every value is checked before any is applied, so a single bad
        value leaves the whole form unchanged.

        Raises:
            TypeMismatch: On the first key or value that does not fit.
        """
        staged = list(self._fields)
        for key, value in values.items():
            index, updated = self._updated(key, value)
            staged[index] = updated

        self._fields = staged
        logger.debug(f"Set {len(values)} value(s): {list(values)}")

    def _engine(self) -> ValidationEngine:
        return ValidationEngine(
            self._required,
            min_text_length=self.config.min_text_length,
            number_minimum=self.config.number_minimum,
            number_minimum_message=self.config.number_minimum_message,
        )

    def validate(self) -> bool:
        """
        Run every field rule and store the messages on the fields.

        The detailed outcome is kept in ``last_validation``.

        Returns:
            True if no field has an error.
        """
        checked, result = self._engine().evaluate(self._fields)
        if result.is_valid:
            result.validated_data = serialize(checked)

        self._fields = checked
        self.last_validation = result
        return result.is_valid

    def serialize(self) -> dict[str, str | int | bool]:
        """Current values as a flat ``{key: value}`` payload."""
        return serialize(self._fields)

    def result_json(self, indent: int | None = None) -> str:
        """Current values as a JSON object string."""
        return to_json(self._fields, indent=indent)

    def reset(self) -> None:
        """
        Reload both documents and start over with default values.

        Raises:
            SchemaError: If loading fails. The current fields are kept.
        """
        logger.info("Resetting form")
        self._load()
