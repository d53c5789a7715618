"""
MCP Tool definitions for dynaform.

Exposes the form of the current session as MCP tools: read the fields,
change one value, submit, and reset.
"""

import logging
from typing import Any, Callable

from dynaform.config import get_config
from dynaform.errors import DynaformError
from dynaform.models.fields import field_error
from dynaform.state import FormState

logger = logging.getLogger("dynaform-mcp")


def _snapshot(form: FormState) -> dict[str, Any]:
    fields = form.fields()
    return {
        "fields": [field.model_dump(mode="json") for field in fields],
        "required": sorted(form.required),
        "errors": {field.key: field_error(field) for field in fields if field_error(field)},
    }


def get_form_fields(form: FormState, arguments: dict[str, Any]) -> dict[str, Any]:
    """Current fields in display order."""
    return _snapshot(form)


def set_field_value(form: FormState, arguments: dict[str, Any]) -> dict[str, Any]:
    """
    Change the value of one field.

    Args:
        arguments: ``{"key": ..., "value": ...}``; the value is a string
            for text, number and dropdown fields and a boolean for
            boolean fields.

    Returns:
        The updated form snapshot.
    """
    if "key" not in arguments or "value" not in arguments:
        return {"error": "Both 'key' and 'value' are required"}

    form.set_value(arguments["key"], arguments["value"])
    return _snapshot(form)


def submit_form(form: FormState, arguments: dict[str, Any]) -> dict[str, Any]:
    """
    Validate the form and return the result payload if it passes.

    Returns:
        ``{"valid": True, "data": {...}}`` or
        ``{"valid": False, "errors": {key: message}, "fields": [...]}``.
    """
    if form.validate():
        return {
            "valid": True,
            "message": "Form submitted successfully",
            "data": form.last_validation.validated_data,
        }

    return {"valid": False, **_snapshot(form)}


def reset_form(form: FormState, arguments: dict[str, Any]) -> dict[str, Any]:
    """Reload the form documents and clear every value."""
    form.reset()
    return _snapshot(form)


TOOL_HANDLERS: dict[str, Callable[[FormState, dict[str, Any]], dict[str, Any]]] = {
    "get_form_fields": get_form_fields,
    "set_field_value": set_field_value,
    "submit_form": submit_form,
    "reset_form": reset_form,
}


def handle_tool_call(name: str, arguments: dict[str, Any], form: FormState) -> dict[str, Any]:
    """
    Run one tool against a form.

    Form errors are returned as ``{"error": ...}`` instead of raised.
    """
    handler = TOOL_HANDLERS.get(name)
    if handler is None:
        return {"error": f"Unknown tool: {name}"}

    try:
        return handler(form, arguments or {})
    except DynaformError as e:
        logger.warning(f"{name} failed: {e}")
        return {"error": str(e), "error_type": type(e).__name__}


def get_mcp_tools() -> list[dict]:
    """
    Get MCP tool definitions for registration with MCP server.

    Returns list of tool schemas compatible with MCP protocol.
    """
    config = get_config()
    return [
        {
            "name": "get_form_fields",
            "description": """
Get the fields of the form, in the order they should be shown.

Each field has a kind (text, number, boolean, dropdown), a key, its
current value (selected for dropdowns) and, after a failed submit, an
error message. Dropdown fields also list their options.
""".strip(),
            "inputSchema": {
                "type": "object",
                "properties": {},
            },
        },
        {
            "name": "set_field_value",
            "description": """
Set the value of one form field.

VALUE TYPES:
- text: any string
- number: a string of digits only, e.g. "42"
- boolean: true or false
- dropdown: one of the field's options, or "" to clear

Setting a value clears that field's error message.
""".strip(),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "key": {
                        "type": "string",
                        "description": "Key of the field to change",
                    },
                    "value": {
                        "type": ["string", "boolean"],
                        "description": "New value for the field",
                    },
                },
                "required": ["key", "value"],
            },
        },
        {
            "name": "submit_form",
            "description": f"""
Validate the form and, if every field passes, return the result data.

RULES:
- Required fields must not be empty
- Text must be at least {config.min_text_length} characters when filled in
- Numbers must be whole numbers, at least {config.number_minimum}

On failure the per-field error messages are returned instead.
""".strip(),
            "inputSchema": {
                "type": "object",
                "properties": {},
            },
        },
        {
            "name": "reset_form",
            "description": "Reload the form definition and clear every value and error.",
            "inputSchema": {
                "type": "object",
                "properties": {},
            },
        },
    ]
