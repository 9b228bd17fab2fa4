"""JSON schema validation for tool call arguments: required fields and types."""

from __future__ import annotations

from music_assistant_mcp.contracts.json_types import JSONValue
from music_assistant_mcp.contracts.mcp_types import MCPInputSchema, MCPPropertyDef
from music_assistant_mcp.core.tool_validation.models import ValidationError

_TRUE_STRINGS = frozenset({"true", "yes", "1"})
_FALSE_STRINGS = frozenset({"false", "no", "0"})


class _Mismatch(Exception):
    """Raised by ``_coerce`` when a value cannot be read as the declared type."""


def _is_blank(value: JSONValue, prop: MCPPropertyDef | None) -> bool:
    """A required argument counts as missing when absent, null, "" or []."""
    if value is None:
        return True
    expected = prop.get("type") if prop else None
    if expected == "string" and value == "":
        return True
    if expected == "array" and value == []:
        return True
    return False


def _join_fields(fields: list[str]) -> str:
    """``a`` / ``a and b`` / ``a, b and c``."""
    if len(fields) == 1:
        return fields[0]
    return f"{', '.join(fields[:-1])} and {fields[-1]}"


def _check_required(
    params: dict[str, JSONValue],
    schema: MCPInputSchema,
) -> list[ValidationError]:
    """Return one error naming every missing required field, or nothing."""
    properties = schema.get("properties", {})
    missing = [
        name for name in schema.get("required", [])
        if name not in params or _is_blank(params[name], properties.get(name))
    ]
    if not missing:
        return []
    verb = "is" if len(missing) == 1 else "are"
    return [ValidationError(
        field=", ".join(missing),
        message=f"{_join_fields(missing)} {verb} required",
        code="MISSING_REQUIRED",
    )]


def _coerce_number(value: JSONValue, integer: bool) -> int | float:
    if isinstance(value, bool):
        raise _Mismatch
    if isinstance(value, (int, float)):
        return int(value) if integer and float(value).is_integer() else value
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            raise _Mismatch from None
        return int(number) if number.is_integer() else number
    raise _Mismatch


def _coerce(value: JSONValue, prop: MCPPropertyDef) -> JSONValue:
    """Coerce *value* to the property's declared type or raise ``_Mismatch``."""
    expected = prop.get("type")
    if expected == "string":
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        raise _Mismatch
    if expected in ("number", "integer"):
        return _coerce_number(value, integer=expected == "integer")
    if expected == "boolean":
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in _TRUE_STRINGS:
            return True
        if isinstance(value, str) and value.lower() in _FALSE_STRINGS:
            return False
        raise _Mismatch
    if expected == "array":
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, list):
            raise _Mismatch
        items = prop.get("items", {})
        if items.get("type") == "string":
            return [_coerce(v, {"type": "string"}) for v in value]
        return value
    return value


def _validate_types(
    params: dict[str, JSONValue],
    schema: MCPInputSchema,
) -> tuple[dict[str, JSONValue], list[ValidationError]]:
    """Coerce declared properties in place; collect ``TYPE_MISMATCH`` errors.

    Unknown argument names are passed through untouched.
    """
    errors: list[ValidationError] = []
    resolved = dict(params)
    properties = schema.get("properties", {})

    for field, value in params.items():
        prop = properties.get(field)
        if prop is None or value is None:
            continue
        try:
            resolved[field] = _coerce(value, prop)
        except _Mismatch:
            errors.append(ValidationError(
                field=field,
                message=f"{field} must be of type {prop['type']}, got {type(value).__name__}",
                code="TYPE_MISMATCH",
            ))

    return resolved, errors


def _apply_defaults(
    params: dict[str, JSONValue],
    schema: MCPInputSchema,
) -> dict[str, JSONValue]:
    """Fill schema ``default`` values for absent optional arguments."""
    resolved = dict(params)
    for field, prop in schema.get("properties", {}).items():
        if "default" in prop and resolved.get(field) is None:
            resolved[field] = prop["default"]
    return resolved
