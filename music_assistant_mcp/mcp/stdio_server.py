#!/usr/bin/env python3
"""
Music Assistant MCP Stdio Server

Standalone MCP server that communicates via stdio.
This can be registered with Cursor or Claude Desktop.

Requires MA_TOKEN (a Music Assistant long-lived access token); MA_URL
defaults to http://localhost:8095.

Usage:
    MA_TOKEN=<token> python -m music_assistant_mcp.mcp.stdio_server
    MA_URL=http://ma.local:8095 MA_TOKEN=<token> music-assistant-mcp serve
"""
from __future__ import annotations

import sys
import json
import asyncio
import logging
from typing import Optional, cast

from music_assistant_mcp.contracts.json_types import JSONObject
from music_assistant_mcp.contracts.mcp_types import (
    MCPErrorDetail,
    MCPRequest,
    MCPResponse,
    MCPToolCallParams,
)
from music_assistant_mcp.mcp.server import (
    PROTOCOL_VERSION,
    ConfigurationError,
    MusicAssistantMCPServer,
    get_mcp_server,
)

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Send logs to stderr; stdout is reserved for the MCP protocol.

    httpx is kept at WARNING so every backend request does not show up in
    the host's MCP output panel.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


class StdioMCPServer:
    """MCP server that communicates via stdin/stdout.

    ``tools/call`` requests run as independent tasks, so a slow backend call
    does not hold up the requests behind it; responses go out in completion
    order and the host matches them by ``id``.
    """

    def __init__(self, mcp: Optional[MusicAssistantMCPServer] = None) -> None:
        self.mcp = mcp if mcp is not None else get_mcp_server()
        self._pending: set[asyncio.Task[None]] = set()

    async def run(self) -> None:
        """Main loop - read from stdin, write to stdout."""
        logger.info("Music Assistant MCP Server running on stdio")

        reader = asyncio.StreamReader()
        protocol = asyncio.StreamReaderProtocol(reader)
        await asyncio.get_running_loop().connect_read_pipe(
            lambda: protocol, sys.stdin
        )
        await self.serve(reader)

    async def serve(self, reader: asyncio.StreamReader) -> None:
        """Process newline-delimited messages from *reader* until EOF."""
        while True:
            line = await reader.readline()
            if not line:
                break
            if not line.strip():
                continue

            try:
                raw = json.loads(line.decode())
            except json.JSONDecodeError as e:
                logger.error("Invalid JSON: %s", e)
                continue

            message = cast(MCPRequest, raw if isinstance(raw, dict) else {})
            if message.get("method") == "tools/call":
                task = asyncio.create_task(self._respond(message))
                self._pending.add(task)
                task.add_done_callback(self._pending.discard)
            else:
                await self._respond(message)

        if self._pending:
            await asyncio.gather(*self._pending)
        logger.info("stdin closed, shutting down")

    async def _respond(self, message: MCPRequest) -> None:
        try:
            response = await self.handle_message(message)
        except Exception as e:
            logger.exception("Error handling message: %s", e)
            return
        if response:
            self.send_response(response)

    def send_response(self, message: MCPResponse) -> None:
        """Send a response via stdout."""
        sys.stdout.write(json.dumps(message) + "\n")
        sys.stdout.flush()

    async def handle_message(self, message: MCPRequest) -> MCPResponse | None:
        """Handle an incoming MCP message."""
        method = str(message.get("method", ""))
        msg_id = message.get("id")
        raw_params = message.get("params")
        params: JSONObject = raw_params if isinstance(raw_params, dict) else {}

        logger.debug("Received: %s", method)

        if method == "initialize":
            return {
                "jsonrpc": "2.0",
                "id": msg_id,
                "result": {
                    "protocolVersion": PROTOCOL_VERSION,
                    "serverInfo": self.mcp.get_server_info(),
                    "capabilities": {
                        "tools": {},
                    },
                },
            }

        elif method == "tools/list":
            return {
                "jsonrpc": "2.0",
                "id": msg_id,
                "result": {
                    "tools": self.mcp.list_tools(),
                },
            }

        elif method == "tools/call":
            call: MCPToolCallParams = {"name": str(params.get("name", ""))}
            raw_args = params.get("arguments")
            if isinstance(raw_args, dict):
                call["arguments"] = raw_args

            result = await self.mcp.call_tool(call["name"], call.get("arguments"))
            return {
                "jsonrpc": "2.0",
                "id": msg_id,
                "result": result.to_envelope(),
            }

        elif method == "notifications/initialized":
            # Client is ready, no response needed
            logger.info("Client initialized")
            return None

        elif method == "ping":
            return {
                "jsonrpc": "2.0",
                "id": msg_id,
                "result": {},
            }

        else:
            logger.warning("Unknown method: %s", method)
            error: MCPErrorDetail = {
                "code": -32601,
                "message": f"Method not found: {method}",
            }
            return {"jsonrpc": "2.0", "id": msg_id, "error": error}


async def main() -> None:
    from music_assistant_mcp.config import get_settings

    configure_logging(get_settings().log_level)
    try:
        server = StdioMCPServer()
    except ConfigurationError as e:
        logger.error("%s", e)
        sys.exit(1)
    await server.run()


if __name__ == "__main__":
    asyncio.run(main())
