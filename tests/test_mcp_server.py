"""Tests for the MCP server (music_assistant_mcp/mcp/server.py).

Covers: MusicAssistantMCPServer, get_server_info, list_tools, call_tool,
ToolCallResult, get_mcp_server.
"""
from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from music_assistant_mcp.mcp.results import ToolCallResult, error_result, text_result
from music_assistant_mcp.mcp.server import (
    ConfigurationError,
    MusicAssistantMCPServer,
    get_mcp_server,
)
from music_assistant_mcp.mcp.tools.registry import MCP_TOOLS
from music_assistant_mcp.services.music_assistant import (
    BackendError,
    MusicAssistantClient,
    TransportError,
)


@pytest.fixture
def mcp_server(fake_client) -> MusicAssistantMCPServer:
    with patch("music_assistant_mcp.config.get_settings") as mock_settings:
        mock_settings.return_value = MagicMock(app_version="1.0.0")
        server = MusicAssistantMCPServer(fake_client)
    return server


# ---------------------------------------------------------------------------
# ToolCallResult
# ---------------------------------------------------------------------------


class TestToolCallResult:

    def test_success(self) -> None:
        r = text_result("done")
        assert r.success is True
        assert r.is_error is False
        assert r.to_envelope() == {
            "content": [{"type": "text", "text": "done"}],
            "isError": False,
        }

    def test_error(self) -> None:
        r = error_result("fail")
        assert r.success is False
        assert r.to_envelope()["isError"] is True
        assert r.text == "fail"

    def test_text_joins_blocks(self) -> None:
        r = ToolCallResult(
            success=True,
            content=[{"type": "text", "text": "a"}, {"type": "text", "text": "b"}],
        )
        assert r.text == "a\nb"


# ---------------------------------------------------------------------------
# MusicAssistantMCPServer
# ---------------------------------------------------------------------------


class TestMusicAssistantMCPServer:

    def test_get_server_info(self, mcp_server: MusicAssistantMCPServer) -> None:
        info = mcp_server.get_server_info()
        assert info["name"] == "music-assistant-mcp"
        assert info["version"] == "1.0.0"
        assert info["protocolVersion"] == "2024-11-05"
        assert info["capabilities"] == {"tools": {}}

    def test_list_tools(self, mcp_server: MusicAssistantMCPServer) -> None:
        tools = mcp_server.list_tools()
        assert tools == MCP_TOOLS
        assert {"name", "description", "inputSchema"} == set(tools[0])

    @pytest.mark.asyncio
    async def test_unknown_tool(self, mcp_server: MusicAssistantMCPServer, fake_client) -> None:
        result = await mcp_server.call_tool("nonexistent_tool", {})
        assert result.to_envelope() == {
            "content": [{"type": "text", "text": "Unknown tool: nonexistent_tool"}],
            "isError": True,
        }
        assert fake_client.calls == []

    @pytest.mark.asyncio
    async def test_routes_to_owning_tool_set(self, mcp_server: MusicAssistantMCPServer, fake_client) -> None:
        result = await mcp_server.call_tool("stop", {"player_id": "kitchen"})
        assert result.text == "Stopped playback on kitchen"
        assert fake_client.commands == ["player_queues/stop"]

    @pytest.mark.asyncio
    async def test_absent_arguments(self, mcp_server: MusicAssistantMCPServer, fake_client) -> None:
        result = await mcp_server.call_tool("get_recommendations")
        assert result.text == "No recommendations available."

    @pytest.mark.asyncio
    async def test_backend_503_becomes_error_result(
        self, mcp_server: MusicAssistantMCPServer, fake_client,
    ) -> None:
        fake_client.responses["players/all"] = BackendError(503, "Service Unavailable")
        result = await mcp_server.call_tool("get_players", {})
        assert result.is_error
        assert result.text == "Error: API error (503): Service Unavailable"

    @pytest.mark.asyncio
    async def test_transport_error_becomes_error_result(
        self, mcp_server: MusicAssistantMCPServer, fake_client,
    ) -> None:
        fake_client.responses["music/search"] = TransportError("Could not reach Music Assistant")
        result = await mcp_server.call_tool("search", {"query": "x"})
        assert result.is_error
        assert result.text == "Error: Could not reach Music Assistant"

    @pytest.mark.asyncio
    async def test_handler_bug_is_contained(self, mcp_server: MusicAssistantMCPServer) -> None:
        failing = AsyncMock(side_effect=KeyError("name"))
        tool_set = MagicMock(handler=failing)
        with patch("music_assistant_mcp.mcp.server.find_tool_set", return_value=tool_set):
            result = await mcp_server.call_tool("get_player", {"player_id": "x"})
        assert result.is_error
        assert result.text == "Error: 'name'"

    @pytest.mark.asyncio
    async def test_validation_failure_is_not_an_exception(
        self, mcp_server: MusicAssistantMCPServer, fake_client,
    ) -> None:
        result = await mcp_server.call_tool("set_volume", {"player_id": "k"})
        assert result.is_error
        assert result.text == "Error: volume_level is required"
        assert fake_client.calls == []


# ---------------------------------------------------------------------------
# get_mcp_server
# ---------------------------------------------------------------------------


class TestGetMCPServer:

    def test_requires_token(self) -> None:
        with patch("music_assistant_mcp.config.get_settings") as mock_settings:
            mock_settings.return_value = MagicMock(token=None)
            with pytest.raises(ConfigurationError, match="MA_TOKEN"):
                get_mcp_server()

    def test_builds_client_from_settings(self) -> None:
        settings = MagicMock(
            token="tok", url="http://ma.local:8095", request_timeout=3.0, app_version="1.0.0",
        )
        with patch("music_assistant_mcp.config.get_settings", return_value=settings):
            server = get_mcp_server()
            assert get_mcp_server() is server
        assert isinstance(server.client, MusicAssistantClient)
        assert server.client.api_url == "http://ma.local:8095/api"
        assert server.client.timeout == 3.0


# ---------------------------------------------------------------------------
# Dispatch through validation
# ---------------------------------------------------------------------------


def _sample_value(prop: dict) -> object:
    if "enum" in prop:
        return prop["enum"][0]
    return {"number": 1, "boolean": True, "array": ["x"]}.get(prop["type"], "x")


def _required_field_cases() -> list:
    return [
        pytest.param(tool, field, id=f"{tool['name']}-{field}")
        for tool in MCP_TOOLS
        for field in tool["inputSchema"].get("required", [])
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("tool,field", _required_field_cases())
async def test_omitted_required_field_makes_no_backend_call(
    mcp_server: MusicAssistantMCPServer, fake_client, tool, field,
) -> None:
    schema = tool["inputSchema"]
    arguments = {
        name: _sample_value(schema["properties"][name])
        for name in schema["required"]
        if name != field
    }
    result = await mcp_server.call_tool(tool["name"], arguments)

    assert result.is_error
    assert result.text == f"Error: {field} is required"
    assert fake_client.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("tool,arguments,command,default", [
    ("search", {"query": "x"}, "music/search", 10),
    ("search", {"query": "x", "media_type": "track"}, "music/search", 25),
    ("get_library_items", {"media_type": "album"}, "music/albums/library_items", 50),
    ("get_item_children", {"uri": "spotify://playlist/p1", "child_type": "tracks"},
     "music/playlists/tracks", 100),
    ("get_recently_played", {}, "music/recently_played_items", 25),
    ("get_queue", {"player_id": "k"}, "player_queues/items", 25),
])
async def test_zero_limit_uses_default(
    mcp_server: MusicAssistantMCPServer, fake_client, tool, arguments, command, default,
) -> None:
    result = await mcp_server.call_tool(tool, {**arguments, "limit": 0})

    assert not result.is_error, result.text
    assert fake_client.args_for(command)["limit"] == default
