"""
Exceptions raised by the form engine.

Validation failures are not exceptions: they are reported per field
through the ``error`` attribute and the ``ValidationResult`` model.
"""

import os


class DynaformError(Exception):
    """Base class for all form engine errors."""


class SchemaError(DynaformError):
    """A schema or UI order document could not be read or understood."""

    def __init__(self, message: str, source: str | os.PathLike | None = None):
        self.source = source
        if source is not None:
            message = f"{message} (source: {source})"
        super().__init__(message)


class TypeMismatch(DynaformError, TypeError):
    """A value change does not fit the target field, or the field does not exist."""

    def __init__(self, message: str, key: str | None = None):
        self.key = key
        super().__init__(message)
