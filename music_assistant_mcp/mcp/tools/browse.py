"""Library browsing MCP tool definitions."""
from __future__ import annotations

from music_assistant_mcp.contracts.mcp_types import MCPToolDef
from music_assistant_mcp.contracts.music_types import LIBRARY_MEDIA_TYPES

LIBRARY_ORDER_BY: list[str | int | float] = [
    "name",
    "sort_name",
    "timestamp_added",
    "timestamp_modified",
    "last_played",
    "play_count",
    "random",
]

BROWSE_TOOLS: list[MCPToolDef] = [
    {
        "name": "browse_library",
        "description": (
            "Browse the music library. Can browse root, specific paths, or provider "
            "content. Use this to explore available music."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": (
                        "Optional path to browse. Leave empty for root. "
                        "Use provider URIs to browse specific providers."
                    ),
                },
            },
            "required": [],
        },
    },
    {
        "name": "get_library_items",
        "description": (
            "Get items from the music library by type (artists, albums, tracks, "
            "playlists, or radio stations)."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "media_type": {
                    "type": "string",
                    "enum": list(LIBRARY_MEDIA_TYPES),
                    "description": "Type of library items to retrieve",
                },
                "limit": {
                    "type": "number",
                    "description": "Maximum number of items to return (default: 50)",
                },
                "offset": {
                    "type": "number",
                    "minimum": 0,
                    "description": "Offset for pagination (default: 0)",
                },
                "search": {
                    "type": "string",
                    "description": "Optional filter by name",
                },
                "favorites_only": {
                    "type": "boolean",
                    "description": "Only show favorites (default: false)",
                },
                "order_by": {
                    "type": "string",
                    "enum": LIBRARY_ORDER_BY,
                    "default": "sort_name",
                    "description": (
                        "Sort order: 'name', 'sort_name', 'timestamp_added', "
                        "'timestamp_modified', 'last_played', 'play_count', 'random' "
                        "(default: 'sort_name')"
                    ),
                },
            },
            "required": ["media_type"],
        },
    },
    {
        "name": "get_item_children",
        "description": (
            "Get child items of a media item: tracks from an album/playlist, "
            "or albums/tracks from an artist."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "uri": {
                    "type": "string",
                    "description": (
                        "The URI of the parent item (e.g., 'spotify://album/abc123', "
                        "'spotify://artist/xyz')"
                    ),
                },
                "child_type": {
                    "type": "string",
                    "enum": ["tracks", "albums"],
                    "description": (
                        "Type of children to get: 'tracks' or 'albums'. "
                        "For albums/playlists use 'tracks'. "
                        "For artists use 'tracks' or 'albums'."
                    ),
                },
                "limit": {
                    "type": "number",
                    "description": (
                        "Maximum number of items to return "
                        "(default: 100, only for playlist tracks)"
                    ),
                },
                "offset": {
                    "type": "number",
                    "minimum": 0,
                    "description": "Offset for pagination (default: 0, only for playlist tracks)",
                },
            },
            "required": ["uri", "child_type"],
        },
    },
    {
        "name": "get_recommendations",
        "description": "Get personalized music recommendations based on listening history.",
        "inputSchema": {
            "type": "object",
            "properties": {},
            "required": [],
        },
    },
    {
        "name": "get_recently_played",
        "description": "Get recently played items.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "limit": {
                    "type": "number",
                    "description": "Maximum number of items to return (default: 25)",
                },
                "media_types": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": (
                        "Filter by media types (e.g., ['track', 'album']). Default: all types"
                    ),
                },
            },
            "required": [],
        },
    },
    {
        "name": "get_item_details",
        "description": "Get detailed information about a media item by its URI.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "uri": {
                    "type": "string",
                    "description": "The URI of the media item (e.g., 'spotify://track/abc123')",
                },
            },
            "required": ["uri"],
        },
    },
]
