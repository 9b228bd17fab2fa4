"""Tests for the stdio JSON-RPC transport (music_assistant_mcp/mcp/stdio_server.py)."""
from __future__ import annotations

import asyncio
import json
from unittest.mock import MagicMock, patch

import pytest

from music_assistant_mcp.mcp.server import MusicAssistantMCPServer
from music_assistant_mcp.mcp.stdio_server import StdioMCPServer, main


@pytest.fixture
def stdio(fake_client) -> StdioMCPServer:
    with patch("music_assistant_mcp.config.get_settings") as mock_settings:
        mock_settings.return_value = MagicMock(app_version="1.0.0")
        mcp = MusicAssistantMCPServer(fake_client)
    return StdioMCPServer(mcp)


def _reader(*messages: object) -> asyncio.StreamReader:
    reader = asyncio.StreamReader()
    for message in messages:
        line = message if isinstance(message, str) else json.dumps(message)
        reader.feed_data((line + "\n").encode())
    reader.feed_eof()
    return reader


def _responses(captured: str) -> list[dict]:
    return [json.loads(line) for line in captured.splitlines() if line.strip()]


class TestHandleMessage:

    @pytest.mark.asyncio
    async def test_initialize(self, stdio: StdioMCPServer) -> None:
        response = await stdio.handle_message({"jsonrpc": "2.0", "id": 1, "method": "initialize"})
        assert response["id"] == 1
        result = response["result"]
        assert result["protocolVersion"] == "2024-11-05"
        assert result["serverInfo"]["name"] == "music-assistant-mcp"
        assert result["capabilities"] == {"tools": {}}

    @pytest.mark.asyncio
    async def test_tools_list(self, stdio: StdioMCPServer) -> None:
        response = await stdio.handle_message({"jsonrpc": "2.0", "id": 2, "method": "tools/list"})
        assert len(response["result"]["tools"]) == 36

    @pytest.mark.asyncio
    async def test_tools_call_returns_envelope(self, stdio: StdioMCPServer, fake_client) -> None:
        response = await stdio.handle_message({
            "jsonrpc": "2.0",
            "id": 3,
            "method": "tools/call",
            "params": {"name": "pause", "arguments": {"player_id": "kitchen"}},
        })
        assert response == {
            "jsonrpc": "2.0",
            "id": 3,
            "result": {
                "content": [{"type": "text", "text": "Paused playback on kitchen"}],
                "isError": False,
            },
        }
        assert fake_client.commands == ["player_queues/pause"]

    @pytest.mark.asyncio
    async def test_tools_call_unknown_tool(self, stdio: StdioMCPServer) -> None:
        response = await stdio.handle_message({
            "jsonrpc": "2.0", "id": 4, "method": "tools/call",
            "params": {"name": "nonexistent_tool"},
        })
        assert response["result"]["isError"] is True
        assert response["result"]["content"][0]["text"] == "Unknown tool: nonexistent_tool"

    @pytest.mark.asyncio
    async def test_initialized_notification_has_no_response(self, stdio: StdioMCPServer) -> None:
        assert await stdio.handle_message({
            "jsonrpc": "2.0", "method": "notifications/initialized",
        }) is None

    @pytest.mark.asyncio
    async def test_ping(self, stdio: StdioMCPServer) -> None:
        response = await stdio.handle_message({"jsonrpc": "2.0", "id": 5, "method": "ping"})
        assert response == {"jsonrpc": "2.0", "id": 5, "result": {}}

    @pytest.mark.asyncio
    async def test_unknown_method(self, stdio: StdioMCPServer) -> None:
        response = await stdio.handle_message({"jsonrpc": "2.0", "id": 6, "method": "resources/list"})
        assert response["error"] == {"code": -32601, "message": "Method not found: resources/list"}


class TestServeLoop:

    @pytest.mark.asyncio
    async def test_invalid_json_is_skipped(self, stdio: StdioMCPServer, capsys) -> None:
        await stdio.serve(_reader("{not json", {"jsonrpc": "2.0", "id": 1, "method": "ping"}))
        assert _responses(capsys.readouterr().out) == [{"jsonrpc": "2.0", "id": 1, "result": {}}]

    @pytest.mark.asyncio
    async def test_tool_calls_run_concurrently(self, stdio: StdioMCPServer, fake_client, capsys) -> None:
        release = asyncio.Event()
        started: list[str] = []

        async def execute_command(command, args=None):
            started.append(command)
            if command == "player_queues/play":
                await release.wait()
            else:
                release.set()
            return None

        fake_client.execute_command = execute_command
        await stdio.serve(_reader(
            {"jsonrpc": "2.0", "id": "slow", "method": "tools/call",
             "params": {"name": "play", "arguments": {"player_id": "a"}}},
            {"jsonrpc": "2.0", "id": "fast", "method": "tools/call",
             "params": {"name": "stop", "arguments": {"player_id": "b"}}},
        ))

        # the second call completes while the first is still waiting on it
        ids = [r["id"] for r in _responses(capsys.readouterr().out)]
        assert ids == ["fast", "slow"]
        assert started == ["player_queues/play", "player_queues/stop"]

    @pytest.mark.asyncio
    async def test_failed_call_does_not_stop_loop(self, stdio: StdioMCPServer, fake_client, capsys) -> None:
        fake_client.responses["players/all"] = RuntimeError("backend down")
        await stdio.serve(_reader(
            {"jsonrpc": "2.0", "id": 1, "method": "tools/call",
             "params": {"name": "get_players", "arguments": {}}},
            {"jsonrpc": "2.0", "id": 2, "method": "ping"},
        ))
        responses = {r["id"]: r for r in _responses(capsys.readouterr().out)}
        assert responses[1]["result"]["isError"] is True
        assert responses[1]["result"]["content"][0]["text"] == "Error: backend down"
        assert responses[2]["result"] == {}


@pytest.mark.asyncio
async def test_main_exits_without_token(monkeypatch: pytest.MonkeyPatch, caplog) -> None:
    monkeypatch.delenv("MA_TOKEN", raising=False)
    settings = MagicMock(token=None, log_level="INFO")
    with patch("music_assistant_mcp.config.get_settings", return_value=settings):
        with pytest.raises(SystemExit) as exc_info:
            await main()
    assert exc_info.value.code == 1
    assert "MA_TOKEN environment variable is required" in caplog.text
