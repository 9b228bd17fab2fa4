"""Player management MCP tool definitions."""
from __future__ import annotations

from music_assistant_mcp.contracts.mcp_types import MCPToolDef

PLAYER_TOOLS: list[MCPToolDef] = [
    {
        "name": "get_players",
        "description": (
            "Get all available music players. Use this to find player IDs for playback control."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "include_unavailable": {
                    "type": "boolean",
                    "default": False,
                    "description": "Include unavailable players (default: false)",
                },
                "include_disabled": {
                    "type": "boolean",
                    "default": False,
                    "description": "Include disabled players (default: false)",
                },
            },
            "required": [],
        },
    },
    {
        "name": "get_player",
        "description": "Get detailed information about a specific player.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "player_id": {
                    "type": "string",
                    "description": "The ID of the player",
                },
            },
            "required": ["player_id"],
        },
    },
    {
        "name": "get_player_by_name",
        "description": "Find a player by its name.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "name": {
                    "type": "string",
                    "description": "The name of the player (case-insensitive search)",
                },
            },
            "required": ["name"],
        },
    },
    {
        "name": "get_all_queues",
        "description": "Get all player queues.",
        "inputSchema": {
            "type": "object",
            "properties": {},
            "required": [],
        },
    },
    {
        "name": "group_players",
        "description": "Add a player to a group (sync playback).",
        "inputSchema": {
            "type": "object",
            "properties": {
                "player_id": {
                    "type": "string",
                    "description": "The ID of the player to add to the group",
                },
                "target_player": {
                    "type": "string",
                    "description": "The ID of the target player (group leader)",
                },
            },
            "required": ["player_id", "target_player"],
        },
    },
    {
        "name": "ungroup_player",
        "description": "Remove a player from its group.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "player_id": {
                    "type": "string",
                    "description": "The ID of the player to ungroup",
                },
            },
            "required": ["player_id"],
        },
    },
    {
        "name": "create_player_group",
        "description": "Create a new player group with multiple players.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "target_player": {
                    "type": "string",
                    "description": "The ID of the target player (will be the group leader)",
                },
                "member_player_ids": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "List of player IDs to add to the group",
                },
            },
            "required": ["target_player", "member_player_ids"],
        },
    },
    {
        "name": "get_now_playing",
        "description": "Get information about what is currently playing on a player.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "player_id": {
                    "type": "string",
                    "description": "The ID of the player",
                },
            },
            "required": ["player_id"],
        },
    },
]
