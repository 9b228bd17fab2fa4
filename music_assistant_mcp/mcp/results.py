"""Tool call result type shared by the handlers and the MCP server."""
from __future__ import annotations

from dataclasses import dataclass

from music_assistant_mcp.contracts.mcp_types import MCPCallResult, MCPContentBlock


@dataclass
class ToolCallResult:
    """Result of an MCP tool call.

    ``content`` is never empty: successes carry the rendered text, failures
    carry exactly one block describing the problem.
    """
    success: bool
    content: list[MCPContentBlock]
    is_error: bool = False

    @property
    def text(self) -> str:
        return "\n".join(block["text"] for block in self.content)

    def to_envelope(self) -> MCPCallResult:
        """Return the ``tools/call`` result body sent to the host."""
        return {"content": self.content, "isError": self.is_error}


def text_result(text: str) -> ToolCallResult:
    """Successful result with a single text block."""
    return ToolCallResult(success=True, content=[{"type": "text", "text": text}])


def error_result(text: str) -> ToolCallResult:
    """Failed result with a single text block and ``isError`` set."""
    return ToolCallResult(
        success=False,
        content=[{"type": "text", "text": text}],
        is_error=True,
    )
