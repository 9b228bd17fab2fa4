"""Main validation entrypoint: validate_tool_call."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from music_assistant_mcp.contracts.json_types import JSONValue
from music_assistant_mcp.contracts.mcp_types import MCPToolDef
from music_assistant_mcp.core.tool_validation.models import ValidationError, ValidationResult
from music_assistant_mcp.core.tool_validation.ranges import _validate_enums, _validate_value_ranges
from music_assistant_mcp.core.tool_validation.schema import (
    _apply_defaults,
    _check_required,
    _validate_types,
)

logger = logging.getLogger(__name__)


def _find_tool(tool_name: str, tools: Sequence[MCPToolDef]) -> MCPToolDef | None:
    return next((t for t in tools if t["name"] == tool_name), None)


def validate_tool_call(
    tool_name: str,
    params: dict[str, JSONValue] | None,
    tools: Sequence[MCPToolDef],
) -> ValidationResult:
    """
    Validate a tool call against the definitions in *tools*.

    Steps:
    1. Catalog lookup
    2. Required fields (stops here when any are missing)
    3. Type check with coercion
    4. Enum and value range checks
    5. Default substitution for absent optional fields
    """
    original = dict(params or {})

    def _result(errors: list[ValidationError], resolved: dict[str, JSONValue]) -> ValidationResult:
        if errors:
            logger.debug("Validation failed for %s: %s", tool_name, "; ".join(map(str, errors)))
        return ValidationResult(
            valid=not errors,
            tool_name=tool_name,
            original_params=original,
            resolved_params=resolved,
            errors=errors,
        )

    # 1. Catalog lookup
    tool = _find_tool(tool_name, tools)
    if tool is None:
        return _result([ValidationError(
            field="tool_name",
            message=f"Unknown tool: {tool_name}",
            code="TOOL_NOT_FOUND",
        )], original)

    schema = tool["inputSchema"]

    # 2. Required fields
    missing = _check_required(original, schema)
    if missing:
        return _result(missing, original)

    # 3. Types
    resolved, errors = _validate_types(original, schema)

    # 4. Enums and ranges
    if not errors:
        errors.extend(_validate_enums(resolved, schema))
        errors.extend(_validate_value_ranges(resolved, schema))

    # 5. Defaults
    if not errors:
        resolved = _apply_defaults(resolved, schema)

    return _result(errors, resolved)
