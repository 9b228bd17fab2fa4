"""Shared plumbing for tool handlers."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from music_assistant_mcp.contracts.json_types import JSONObject, JSONValue
from music_assistant_mcp.contracts.mcp_types import MCPToolDef
from music_assistant_mcp.core.tool_validation import ValidationResult, validate_tool_call
from music_assistant_mcp.mcp.results import ToolCallResult, error_result


class CommandClient(Protocol):
    """The part of ``MusicAssistantClient`` the handlers depend on."""

    async def execute_command(self, command: str, args: JSONObject | None = None) -> JSONValue: ...


def check_arguments(
    name: str,
    arguments: JSONObject | None,
    tools: Sequence[MCPToolDef],
) -> ValidationResult | ToolCallResult:
    """Validate *arguments*; return resolved params or an ``isError`` result."""
    validation = validate_tool_call(name, arguments, tools)
    if not validation.valid:
        return error_result(f"Error: {validation.error_message}")
    return validation


def unknown_tool(category: str, name: str) -> ToolCallResult:
    """Fallthrough for a name the catalog lists but the handler does not match."""
    return error_result(f"Unknown {category} tool: {name}")
