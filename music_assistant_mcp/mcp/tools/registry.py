"""MCP tool registry - combines all category lists into the master lists.

Each category is a ``ToolSet``: its tool definitions plus the handler that
executes them. Dispatch walks ``TOOL_SETS`` in order and the first set
containing the name wins.
"""
from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from pydantic import ValidationError

from music_assistant_mcp.contracts.json_types import JSONObject
from music_assistant_mcp.contracts.mcp_types import MCPToolDef, MCPToolDefWire
from music_assistant_mcp.mcp.handlers.base import CommandClient
from music_assistant_mcp.mcp.handlers.browse import handle_browse_tool
from music_assistant_mcp.mcp.handlers.playback import handle_playback_tool
from music_assistant_mcp.mcp.handlers.player import handle_player_tool
from music_assistant_mcp.mcp.handlers.search import handle_search_tool
from music_assistant_mcp.mcp.results import ToolCallResult
from music_assistant_mcp.mcp.tools.browse import BROWSE_TOOLS
from music_assistant_mcp.mcp.tools.playback import PLAYBACK_TOOLS
from music_assistant_mcp.mcp.tools.player import PLAYER_TOOLS
from music_assistant_mcp.mcp.tools.search import SEARCH_TOOLS

ToolHandler = Callable[[CommandClient, str, JSONObject | None], Awaitable[ToolCallResult]]


class CatalogError(RuntimeError):
    """The tool catalog is malformed (bad schema or duplicate names)."""


@dataclass(frozen=True)
class ToolSet:
    """A named group of tool definitions and the handler that runs them."""
    category: str
    tools: list[MCPToolDef]
    handler: ToolHandler

    @property
    def names(self) -> frozenset[str]:
        return frozenset(tool["name"] for tool in self.tools)

    def __contains__(self, name: object) -> bool:
        return name in self.names


TOOL_SETS: tuple[ToolSet, ...] = (
    ToolSet("search", SEARCH_TOOLS, handle_search_tool),
    ToolSet("browse", BROWSE_TOOLS, handle_browse_tool),
    ToolSet("playback", PLAYBACK_TOOLS, handle_playback_tool),
    ToolSet("player", PLAYER_TOOLS, handle_player_tool),
)

MCP_TOOLS: list[MCPToolDef] = [tool for tool_set in TOOL_SETS for tool in tool_set.tools]

TOOL_CATEGORIES: dict[str, str] = {
    tool["name"]: tool_set.category
    for tool_set in reversed(TOOL_SETS)
    for tool in tool_set.tools
}


def find_tool_set(name: str) -> ToolSet | None:
    """Return the first registered set that declares *name*, or None."""
    return next((tool_set for tool_set in TOOL_SETS if name in tool_set), None)


def assert_unique_tool_names(tools: list[MCPToolDef]) -> None:
    """Raise ``CatalogError`` if a definition is malformed or a name repeats.

    Also checks that every ``required`` entry names a declared property.
    """
    seen: set[str] = set()
    for tool in tools:
        try:
            wire = MCPToolDefWire.model_validate(tool)
        except ValidationError as exc:
            raise CatalogError(f"Invalid tool definition {tool.get('name')!r}: {exc}") from exc

        if wire.name in seen:
            raise CatalogError(f"Duplicate tool name: {wire.name}")
        seen.add(wire.name)

        undeclared = [f for f in wire.inputSchema.required if f not in wire.inputSchema.properties]
        if undeclared:
            raise CatalogError(
                f"Tool {wire.name!r} requires undeclared properties: {', '.join(undeclared)}"
            )


assert_unique_tool_names(MCP_TOOLS)
