"""Enum membership and numeric range validation for tool arguments."""

from __future__ import annotations

from music_assistant_mcp.contracts.json_types import JSONValue
from music_assistant_mcp.contracts.mcp_types import MCPInputSchema
from music_assistant_mcp.core.tool_validation.models import ValidationError


def _validate_enums(
    params: dict[str, JSONValue],
    schema: MCPInputSchema,
) -> list[ValidationError]:
    """Validate enum-constrained arguments hold one of the allowed values."""
    errors: list[ValidationError] = []
    required = set(schema.get("required", []))

    for field, prop in schema.get("properties", {}).items():
        allowed = prop.get("enum")
        value = params.get(field)
        if not allowed or value is None:
            continue
        # an empty optional filter means "no filter"
        if value == "" and field not in required:
            continue
        if value not in allowed:
            errors.append(ValidationError(
                field=field,
                message=(
                    f"Invalid {field}: {value} "
                    f"(expected one of: {', '.join(str(a) for a in allowed)})"
                ),
                code="INVALID_ENUM",
            ))

    return errors


def _validate_value_ranges(
    params: dict[str, JSONValue],
    schema: MCPInputSchema,
) -> list[ValidationError]:
    """Validate numeric arguments fall inside declared ``minimum``/``maximum``."""
    errors: list[ValidationError] = []

    for field, prop in schema.get("properties", {}).items():
        value = params.get(field)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            continue
        min_val = prop.get("minimum")
        max_val = prop.get("maximum")
        if min_val is not None and value < min_val:
            errors.append(ValidationError(
                field=field,
                message=f"{field} must be at least {min_val:g}, got {value}",
                code="VALUE_OUT_OF_RANGE",
            ))
        elif max_val is not None and value > max_val:
            errors.append(ValidationError(
                field=field,
                message=f"{field} must be at most {max_val:g}, got {value}",
                code="VALUE_OUT_OF_RANGE",
            ))

    return errors
