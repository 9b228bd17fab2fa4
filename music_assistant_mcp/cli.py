"""music-assistant-mcp - Typer application root.

Entry point for the ``music-assistant-mcp`` console script.

Commands:

- ``serve``  - run the MCP server on stdin/stdout (what MCP hosts launch).
- ``tools``  - print the tool catalog grouped by category.
- ``call``   - invoke one tool against Music Assistant and print the result.

``--url`` / ``--token`` override ``MA_URL`` / ``MA_TOKEN``.
"""
from __future__ import annotations

import asyncio
import enum
import json
import logging
from typing import Optional

import typer

from music_assistant_mcp.config import get_settings
from music_assistant_mcp.mcp.server import MusicAssistantMCPServer
from music_assistant_mcp.mcp.stdio_server import StdioMCPServer, configure_logging
from music_assistant_mcp.mcp.tools.registry import TOOL_SETS
from music_assistant_mcp.services.music_assistant import MusicAssistantClient

logger = logging.getLogger(__name__)


class ExitCode(enum.IntEnum):
    """CLI exit codes.

    0 - success
    1 - user error (missing token, bad arguments, tool reported an error)
    """

    SUCCESS = 0
    USER_ERROR = 1


cli = typer.Typer(
    name="music-assistant-mcp",
    help="MCP server exposing Music Assistant search, browsing and playback control.",
    no_args_is_help=True,
)

_URL_OPTION = typer.Option(None, "--url", help="Music Assistant server URL (default: MA_URL).")
_TOKEN_OPTION = typer.Option(None, "--token", help="Long-lived access token (default: MA_TOKEN).")


def _build_server(url: Optional[str], token: Optional[str]) -> MusicAssistantMCPServer:
    settings = get_settings()
    token = token or settings.token
    if not token:
        typer.echo("Error: MA_TOKEN environment variable is required", err=True)
        raise typer.Exit(code=ExitCode.USER_ERROR)
    client = MusicAssistantClient(url or settings.url, token, timeout=settings.request_timeout)
    return MusicAssistantMCPServer(client)


@cli.command("serve", help="Run the MCP server over stdio.")
def serve(
    url: Optional[str] = _URL_OPTION,
    token: Optional[str] = _TOKEN_OPTION,
) -> None:
    configure_logging(get_settings().log_level)
    server = StdioMCPServer(_build_server(url, token))
    asyncio.run(server.run())


@cli.command("tools", help="List the available tools by category.")
def list_tools() -> None:
    for tool_set in TOOL_SETS:
        typer.echo(f"## {tool_set.category}")
        for tool in tool_set.tools:
            typer.echo(f"  {tool['name']:<22} {tool['description']}")
        typer.echo("")


@cli.command("call", help="Invoke a single tool and print its text result.")
def call(
    name: str = typer.Argument(..., help="Tool name, e.g. get_players."),
    args: str = typer.Option("{}", "--args", "-a", help="Tool arguments as a JSON object."),
    url: Optional[str] = _URL_OPTION,
    token: Optional[str] = _TOKEN_OPTION,
) -> None:
    try:
        arguments = json.loads(args)
    except json.JSONDecodeError as exc:
        typer.echo(f"Error: --args is not valid JSON: {exc}", err=True)
        raise typer.Exit(code=ExitCode.USER_ERROR)
    if not isinstance(arguments, dict):
        typer.echo("Error: --args must be a JSON object", err=True)
        raise typer.Exit(code=ExitCode.USER_ERROR)

    server = _build_server(url, token)
    result = asyncio.run(server.call_tool(name, arguments))
    typer.echo(result.text)
    if result.is_error:
        raise typer.Exit(code=ExitCode.USER_ERROR)


if __name__ == "__main__":
    cli()
