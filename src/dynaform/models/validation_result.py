"""
Validation result models for form validation.

These models describe the outcome of one validation pass over a form.
"""

from typing import Any

from pydantic import BaseModel, Field


class FieldValidationError(BaseModel):
    """Validation error for a specific field."""

    field_name: str = Field(..., description="Key of the field with error")
    error_type: str = Field(..., description="Rule that failed: required, min_length, not_a_number, minimum")
    message: str = Field(..., description="Human-readable error message")
    received: Any | None = Field(default=None, description="Received value")


class ValidationResult(BaseModel):
    """Result of form validation."""

    is_valid: bool = Field(..., description="Whether every field passed its rules")
    errors: list[FieldValidationError] = Field(
        default_factory=list, description="List of validation errors, in display order"
    )
    validated_data: dict[str, Any] | None = Field(
        default=None, description="Result payload if valid"
    )

    @property
    def error_count(self) -> int:
        """Get the number of validation errors."""
        return len(self.errors)

    def get_field_errors(self, field_name: str) -> list[FieldValidationError]:
        """Get all errors for a specific field."""
        return [e for e in self.errors if e.field_name == field_name]

    def to_error_dict(self) -> dict[str, str]:
        """Convert errors to a dict mapping field keys to their message."""
        return {error.field_name: error.message for error in self.errors}
