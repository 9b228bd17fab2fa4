"""
MCP Tool Definitions for Music Assistant.

These tools are exposed via MCP for LLMs to search, browse and control
a Music Assistant server. They follow the MCP tool schema format.

The combined catalog and the handler wiring live in
``music_assistant_mcp.mcp.tools.registry``; import it directly, since it
depends on the handlers which in turn import the category lists below.
"""

from music_assistant_mcp.mcp.tools.search import SEARCH_TOOLS
from music_assistant_mcp.mcp.tools.browse import BROWSE_TOOLS
from music_assistant_mcp.mcp.tools.playback import PLAYBACK_TOOLS
from music_assistant_mcp.mcp.tools.player import PLAYER_TOOLS

__all__ = [
    "SEARCH_TOOLS",
    "BROWSE_TOOLS",
    "PLAYBACK_TOOLS",
    "PLAYER_TOOLS",
]
