"""
Music Assistant MCP Server

Model Context Protocol server for Music Assistant.
Allows Claude, Cursor, and other MCP clients to search, browse and control
music playback on a Music Assistant instance.
"""
from __future__ import annotations

import logging
from typing import Optional

from music_assistant_mcp.contracts.json_types import JSONObject
from music_assistant_mcp.contracts.mcp_types import MCPServerInfo, MCPToolDef
from music_assistant_mcp.mcp.handlers.base import CommandClient
from music_assistant_mcp.mcp.results import ToolCallResult, error_result
from music_assistant_mcp.mcp.tools.registry import MCP_TOOLS, find_tool_set

logger = logging.getLogger(__name__)

PROTOCOL_VERSION = "2024-11-05"


class ConfigurationError(RuntimeError):
    """Required settings are missing; the server cannot start."""


class MusicAssistantMCPServer:
    """
    MCP Server for Music Assistant.

    This server:
    1. Exposes search, browse, playback and player tools via MCP
    2. Routes each tool call to the handler of the tool set that declares it
    3. Returns every outcome, including failures, as a tool result
    """

    def __init__(self, client: CommandClient):
        from music_assistant_mcp.config import get_settings
        self.name = "music-assistant-mcp"
        self.version = get_settings().app_version
        self.client = client

    # =========================================================================
    # MCP Protocol Methods
    # =========================================================================

    def get_server_info(self) -> MCPServerInfo:
        """Return MCP server information."""
        return {
            "name": self.name,
            "version": self.version,
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {
                "tools": {},
            },
        }

    def list_tools(self) -> list[MCPToolDef]:
        """List all available MCP tools."""
        return MCP_TOOLS

    async def call_tool(
        self,
        name: str,
        arguments: Optional[JSONObject] = None,
    ) -> ToolCallResult:
        """
        Execute an MCP tool call.

        Never raises: an unknown name, a validation failure, a backend error
        or a bug in a formatter all come back as an ``isError`` result.
        """
        logger.info("MCP tool call: %s", name)
        logger.debug("Arguments: %s", arguments)

        tool_set = find_tool_set(name)
        if tool_set is None:
            logger.warning("Unknown tool requested: %s", name)
            return error_result(f"Unknown tool: {name}")

        try:
            result = await tool_set.handler(self.client, name, arguments)
        except Exception as e:
            logger.exception("Tool call failed: %s", name)
            return error_result(f"Error: {e}")

        if result.is_error:
            logger.info("Tool %s returned an error: %s", name, result.text)
        return result


_server: Optional[MusicAssistantMCPServer] = None


def get_mcp_server() -> MusicAssistantMCPServer:
    """Get the singleton MCP server instance.

    Raises:
        ConfigurationError: ``MA_TOKEN`` is not set.
    """
    global _server
    if _server is None:
        from music_assistant_mcp.config import get_settings
        from music_assistant_mcp.services.music_assistant import MusicAssistantClient

        settings = get_settings()
        if not settings.token:
            raise ConfigurationError("MA_TOKEN environment variable is required")
        client = MusicAssistantClient(settings.url, settings.token, timeout=settings.request_timeout)
        _server = MusicAssistantMCPServer(client)
    return _server


def reset_mcp_server() -> None:
    """Drop the cached server so the next ``get_mcp_server()`` rebuilds it."""
    global _server
    _server = None
