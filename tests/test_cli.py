"""CLI tests for ``music-assistant-mcp`` using ``typer.testing.CliRunner``."""
from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from music_assistant_mcp.cli import cli
from music_assistant_mcp.config import get_settings

runner = CliRunner()


@pytest.fixture(autouse=True)
def _no_env_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MA_TOKEN", raising=False)
    monkeypatch.delenv("MA_URL", raising=False)
    get_settings.cache_clear()


def test_no_args_shows_help() -> None:
    result = runner.invoke(cli, [])
    assert "serve" in result.output
    assert "call" in result.output


def test_tools_lists_every_category() -> None:
    result = runner.invoke(cli, ["tools"])
    assert result.exit_code == 0
    for heading in ("## search", "## browse", "## playback", "## player"):
        assert heading in result.output
    assert "get_item_children" in result.output
    assert "transfer_queue" in result.output


def test_call_prints_result(fake_client) -> None:
    fake_client.responses["players/all"] = []
    with patch("music_assistant_mcp.cli.MusicAssistantClient", return_value=fake_client) as mock_cls:
        result = runner.invoke(cli, ["call", "get_players", "--token", "tok"])

    assert result.exit_code == 0, result.output
    assert "No players found." in result.output
    mock_cls.assert_called_once_with("http://localhost:8095", "tok", timeout=None)


def test_call_passes_arguments_and_url(fake_client) -> None:
    args = json.dumps({"player_id": "kitchen", "volume_level": 20})
    with patch("music_assistant_mcp.cli.MusicAssistantClient", return_value=fake_client) as mock_cls:
        result = runner.invoke(cli, [
            "call", "set_volume", "--args", args,
            "--url", "http://ma.local:8095", "--token", "tok",
        ])

    assert result.exit_code == 0, result.output
    assert "Set volume to 20% on kitchen" in result.output
    assert mock_cls.call_args.args[0] == "http://ma.local:8095"
    assert fake_client.commands == ["players/cmd/volume_set"]


def test_call_error_result_exits_1(fake_client) -> None:
    with patch("music_assistant_mcp.cli.MusicAssistantClient", return_value=fake_client):
        result = runner.invoke(cli, ["call", "nonexistent_tool", "--token", "tok"])
    assert result.exit_code == 1
    assert "Unknown tool: nonexistent_tool" in result.output


def test_call_rejects_invalid_json() -> None:
    result = runner.invoke(cli, ["call", "search", "--args", "{oops", "--token", "tok"])
    assert result.exit_code == 1
    assert "--args is not valid JSON" in result.output


def test_call_rejects_non_object_json() -> None:
    result = runner.invoke(cli, ["call", "search", "--args", "[1, 2]", "--token", "tok"])
    assert result.exit_code == 1
    assert "--args must be a JSON object" in result.output


def test_missing_token_exits_1() -> None:
    result = runner.invoke(cli, ["call", "get_players"])
    assert result.exit_code == 1
    assert "MA_TOKEN environment variable is required" in result.output


def test_serve_requires_token() -> None:
    with patch("music_assistant_mcp.cli.configure_logging"):
        result = runner.invoke(cli, ["serve"])
    assert result.exit_code == 1


def test_token_from_environment(monkeypatch: pytest.MonkeyPatch, fake_client) -> None:
    monkeypatch.setenv("MA_TOKEN", "env-token")
    get_settings.cache_clear()
    with patch("music_assistant_mcp.cli.MusicAssistantClient", return_value=fake_client) as mock_cls:
        result = runner.invoke(cli, ["call", "get_all_queues"])
    assert result.exit_code == 0, result.output
    assert mock_cls.call_args.args[1] == "env-token"
