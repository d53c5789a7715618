"""
Per-field validation rules.

Each variant has its own rule, picked by the field's ``kind``. Rules look
at one field at a time; there are no cross-field rules. Validation only
ever writes the ``error`` slot of a field, never its value.
"""

import logging
from typing import Callable, Iterable

from dynaform.models.fields import (
    FieldKind,
    FormField,
    field_value,
    parse_int,
    replace_field,
)
from dynaform.models.validation_result import FieldValidationError, ValidationResult

logger = logging.getLogger("dynaform")

REQUIRED_MESSAGE = "This field is required"
MIN_LENGTH_MESSAGE = "Minimum {min_length} characters"
NOT_A_NUMBER_MESSAGE = "Must be a valid number"
DEFAULT_NUMBER_MINIMUM = 18
DEFAULT_NUMBER_MINIMUM_MESSAGE = "Age must be 18 or older"
DEFAULT_MIN_TEXT_LENGTH = 3

# (error_type, message) or None when the field passes
RuleOutcome = tuple[str, str] | None


class ValidationEngine:
    """
    Evaluates the per-field rules of a form.

    Usage:
        engine = ValidationEngine(required={"name"})
        fields, result = engine.evaluate(fields)
        if result.is_valid:
            ...
    """

    def __init__(
        self,
        required: Iterable[str] = (),
        *,
        min_text_length: int = DEFAULT_MIN_TEXT_LENGTH,
        number_minimum: int = DEFAULT_NUMBER_MINIMUM,
        number_minimum_message: str = DEFAULT_NUMBER_MINIMUM_MESSAGE,
    ):
        """
        Initialize the engine.

        Args:
            required: Keys of the fields that must be filled in.
            min_text_length: Shortest accepted non-empty text.
            number_minimum: Smallest accepted value of a number field.
            number_minimum_message: Message shown below the minimum.
        """
        self.required = frozenset(required)
        self.min_text_length = min_text_length
        self.number_minimum = number_minimum
        self.number_minimum_message = number_minimum_message

        self._rules: dict[FieldKind, Callable[[FormField], RuleOutcome]] = {
            FieldKind.TEXT: self._check_text,
            FieldKind.NUMBER: self._check_number,
            FieldKind.BOOLEAN: self._check_boolean,
            FieldKind.DROPDOWN: self._check_dropdown,
        }

    def _is_required(self, field: FormField) -> bool:
        return field.key in self.required

    def _check_text(self, field: FormField) -> RuleOutcome:
        if self._is_required(field) and not field.value:
            return "required", REQUIRED_MESSAGE
        if field.value and len(field.value) < self.min_text_length:
            return "min_length", MIN_LENGTH_MESSAGE.format(min_length=self.min_text_length)
        return None

    def _check_number(self, field: FormField) -> RuleOutcome:
        if self._is_required(field) and not field.value:
            return "required", REQUIRED_MESSAGE
        if not field.value:
            return None
        number = parse_int(field.value)
        if number is None:
            return "not_a_number", NOT_A_NUMBER_MESSAGE
        if number < self.number_minimum:
            return "minimum", self.number_minimum_message
        return None

    def _check_boolean(self, field: FormField) -> RuleOutcome:
        return None

    def _check_dropdown(self, field: FormField) -> RuleOutcome:
        if self._is_required(field) and not field.selected:
            return "required", REQUIRED_MESSAGE
        return None

    def check(self, field: FormField) -> RuleOutcome:
        """Run the rule for a single field."""
        return self._rules[FieldKind(field.kind)](field)

    def evaluate(self, fields: Iterable[FormField]) -> tuple[list[FormField], ValidationResult]:
        """
        Validate every field.

        Args:
            fields: Fields in display order.

        Returns:
            The fields with their error slots rewritten (same order, same
            values), and the ValidationResult of the pass.
        """
        checked: list[FormField] = []
        errors: list[FieldValidationError] = []

        for field in fields:
            outcome = self.check(field)

            # Booleans have no error slot
            if FieldKind(field.kind) is FieldKind.BOOLEAN:
                checked.append(field)
                continue

            if outcome is None:
                checked.append(replace_field(field, error=None))
                continue

            error_type, message = outcome
            checked.append(replace_field(field, error=message))
            errors.append(
                FieldValidationError(
                    field_name=field.key,
                    error_type=error_type,
                    message=message,
                    received=field_value(field),
                )
            )

        result = ValidationResult(is_valid=not errors, errors=errors)
        if result.is_valid:
            logger.info(f"Validated {len(checked)} field(s): valid")
        else:
            logger.info(f"Validated {len(checked)} field(s): {result.error_count} error(s)")
        return checked, result
