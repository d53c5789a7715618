"""Reading of the JSON documents a form is built from."""

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping, Union

from dynaform.errors import SchemaError

logger = logging.getLogger("dynaform")

# A path to a JSON file, or a document that has already been decoded
DocumentSource = Union[str, os.PathLike, Mapping[str, Any]]


def read_document(source: DocumentSource) -> Any:
    """
    Return the decoded JSON document behind ``source``.

    Anything that is not a path is taken as an already decoded document
    and returned unchanged. Paths are read fresh on every call.

    Raises:
        SchemaError: If the file cannot be read or is not valid JSON.
    """
    if not isinstance(source, (str, os.PathLike)):
        return source

    path = Path(source)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Could not read {path}: {e}")
        raise SchemaError(f"Could not read document: {e.strerror or e}", source) from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}: {e}")
        raise SchemaError(f"Invalid JSON: {e}", source) from e


def describe_source(source: DocumentSource) -> str:
    """Short label for ``source`` used in log and error messages."""
    if isinstance(source, (str, os.PathLike)):
        return str(source)
    return "<in-memory document>"
