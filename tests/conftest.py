"""Pytest configuration and fixtures."""
from __future__ import annotations

import logging
from typing import Any

import pytest

from music_assistant_mcp.contracts.json_types import JSONObject


def pytest_configure(config):
    """Ensure asyncio_mode is auto so async tests run when pyproject is not in cwd."""
    if hasattr(config.option, "asyncio_mode") and config.option.asyncio_mode is None:
        config.option.asyncio_mode = "auto"
    logging.getLogger("httpcore").setLevel(logging.CRITICAL)


class FakeMusicAssistantClient:
    """Records every command and answers from a canned response table.

    ``responses`` maps a command name to either a value (returned) or an
    exception instance (raised). Unlisted commands return ``None``.
    """

    def __init__(self, responses: dict[str, Any] | None = None) -> None:
        self.responses: dict[str, Any] = dict(responses or {})
        self.calls: list[tuple[str, JSONObject | None]] = []

    async def execute_command(self, command: str, args: JSONObject | None = None) -> Any:
        self.calls.append((command, args))
        response = self.responses.get(command)
        if isinstance(response, BaseException):
            raise response
        return response

    @property
    def commands(self) -> list[str]:
        return [command for command, _ in self.calls]

    def args_for(self, command: str) -> JSONObject | None:
        """Arguments of the first call to *command*."""
        return next(args for name, args in self.calls if name == command)


@pytest.fixture
def fake_client() -> FakeMusicAssistantClient:
    return FakeMusicAssistantClient()


@pytest.fixture(autouse=True)
def _reset_singletons():
    """Clear cached settings and the MCP server singleton between tests."""
    yield
    from music_assistant_mcp.config import get_settings
    from music_assistant_mcp.mcp.server import reset_mcp_server
    get_settings.cache_clear()
    reset_mcp_server()
