"""
UI order resolver.

Reads the display order of the fields from a UI schema document:

    {"elements": [{"scope": "#/properties/age"}, {"scope": "#/properties/name"}]}

Only the last path segment of each ``scope`` is used. Keys come back in
document order and duplicates are kept.
"""

import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dynaform.errors import SchemaError
from dynaform.loaders.documents import DocumentSource, describe_source, read_document

logger = logging.getLogger("dynaform")

SCOPE_SEPARATOR = "/"


class UIElement(BaseModel):
    """One control of the UI schema."""

    model_config = ConfigDict(extra="allow")

    scope: str = Field(..., description="Path to the property, e.g. #/properties/name")

    @property
    def key(self) -> str:
        """Field key the scope points at."""
        return self.scope.rsplit(SCOPE_SEPARATOR, 1)[-1]


class UISchemaDocument(BaseModel):
    """Top level of a UI schema document."""

    model_config = ConfigDict(extra="allow")

    elements: list[UIElement] = Field(..., description="Controls in display order")


def load_ui_order(source: DocumentSource) -> list[str]:
    """
    Load the field keys of a UI schema document in display order.

    Args:
        source: Path to the UI schema JSON file, or the decoded document.

    Raises:
        SchemaError: If the document cannot be read or is malformed.
    """
    raw = read_document(source)

    try:
        document = UISchemaDocument.model_validate(raw)
    except ValidationError as e:
        logger.error(f"Malformed UI schema document {describe_source(source)}: {e}")
        raise SchemaError(f"Malformed UI schema document: {e}", source) from e

    return [element.key for element in document.elements]
