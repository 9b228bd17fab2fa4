"""
Tool argument validation package.

Validates tool calls before any backend command is issued:
1. Catalog lookup
2. Required fields
3. JSON schema types (with light coercion)
4. Enum membership and value ranges
5. Default substitution

Public API:
    validate_tool_call(tool_name, params, tools) -> ValidationResult
"""

from music_assistant_mcp.core.tool_validation.models import ValidationError, ValidationResult
from music_assistant_mcp.core.tool_validation.schema import (
    _apply_defaults,
    _check_required,
    _validate_types,
)
from music_assistant_mcp.core.tool_validation.ranges import _validate_enums, _validate_value_ranges
from music_assistant_mcp.core.tool_validation.validators import validate_tool_call

__all__ = [
    # Models
    "ValidationError",
    "ValidationResult",
    # Internal helpers (used by tests)
    "_apply_defaults",
    "_check_required",
    "_validate_types",
    "_validate_enums",
    "_validate_value_ranges",
    # Main entrypoint
    "validate_tool_call",
]
