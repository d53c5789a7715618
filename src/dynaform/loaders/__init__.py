"""Loaders for the schema and UI order documents."""

from dynaform.loaders.documents import DocumentSource, read_document
from dynaform.loaders.schema_loader import LoadedSchema, load_schema
from dynaform.loaders.ui_order import load_ui_order

__all__ = [
    "DocumentSource",
    "LoadedSchema",
    "load_schema",
    "load_ui_order",
    "read_document",
]
