"""Search MCP tool definitions."""
from __future__ import annotations

from music_assistant_mcp.contracts.mcp_types import MCPToolDef
from music_assistant_mcp.contracts.music_types import SEARCHABLE_MEDIA_TYPES

SEARCH_TOOLS: list[MCPToolDef] = [
    {
        "name": "search",
        "description": (
            "Search for music in the library. Can search across all media types or filter "
            "by a specific type (track, album, artist, playlist, radio, podcast, audiobook)."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query string",
                },
                "media_type": {
                    "type": "string",
                    "enum": list(SEARCHABLE_MEDIA_TYPES),
                    "description": (
                        "Optional: Filter results to a specific media type. "
                        "If not provided, searches all types."
                    ),
                },
                "limit": {
                    "type": "number",
                    "description": (
                        "Maximum number of results (default: 25, or 10 per type "
                        "when searching all types)"
                    ),
                },
                "library_only": {
                    "type": "boolean",
                    "default": False,
                    "description": (
                        "Only search items in the library (default: false, "
                        "searches all providers)"
                    ),
                },
            },
            "required": ["query"],
        },
    },
]
