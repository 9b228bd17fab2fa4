"""Playback and queue control MCP tool definitions.

Every tool here addresses a player's queue by ``player_id`` except
``transfer_queue``, which names a source and a target player instead.
"""
from __future__ import annotations

from music_assistant_mcp.contracts.mcp_types import MCPPropertyDef, MCPToolDef
from music_assistant_mcp.contracts.music_types import QUEUE_OPTIONS, REPEAT_MODES

_PLAYER_ID: MCPPropertyDef = {
    "type": "string",
    "description": "The ID of the player",
}


def _player_only_tool(name: str, description: str) -> MCPToolDef:
    """Definition for a tool whose only argument is ``player_id``."""
    return {
        "name": name,
        "description": description,
        "inputSchema": {
            "type": "object",
            "properties": {"player_id": _PLAYER_ID},
            "required": ["player_id"],
        },
    }


PLAYBACK_TOOLS: list[MCPToolDef] = [
    {
        "name": "play_media",
        "description": (
            "Play media (track, album, playlist, artist, radio, etc.) on a player. "
            "Use this to start playing something."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "player_id": {
                    "type": "string",
                    "description": (
                        "The ID of the player to play on. "
                        "Use get_players to find available players."
                    ),
                },
                "media_uri": {
                    "type": "string",
                    "description": "The URI of the media to play (e.g., 'spotify://track/abc123').",
                },
                "media_uris": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Multiple URIs to play (for adding multiple items at once)",
                },
                "queue_option": {
                    "type": "string",
                    "enum": list(QUEUE_OPTIONS),
                    "default": "play",
                    "description": (
                        "How to handle the queue: 'play' (play now), 'replace' (replace queue "
                        "and play), 'next' (play next), 'replace_next' (replace upcoming), "
                        "'add' (add to end). Default: 'play'"
                    ),
                },
                "radio_mode": {
                    "type": "boolean",
                    "default": False,
                    "description": "Enable radio mode (auto-add similar tracks). Default: false",
                },
            },
            "required": ["player_id"],
        },
    },
    _player_only_tool("play", "Resume playback on a player."),
    _player_only_tool("pause", "Pause playback on a player."),
    _player_only_tool("play_pause", "Toggle play/pause on a player."),
    _player_only_tool("stop", "Stop playback on a player."),
    _player_only_tool("next_track", "Skip to the next track in the queue."),
    _player_only_tool("previous_track", "Go back to the previous track in the queue."),
    {
        "name": "seek",
        "description": "Seek to a specific position in the current track.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "player_id": _PLAYER_ID,
                "position": {
                    "type": "number",
                    "minimum": 0,
                    "description": "Position in seconds",
                },
            },
            "required": ["player_id", "position"],
        },
    },
    {
        "name": "set_volume",
        "description": "Set the volume level of a player.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "player_id": _PLAYER_ID,
                # no minimum/maximum: out-of-range levels are clamped, not rejected
                "volume_level": {
                    "type": "number",
                    "description": "Volume level (0-100)",
                },
            },
            "required": ["player_id", "volume_level"],
        },
    },
    _player_only_tool("volume_up", "Increase the volume of a player."),
    _player_only_tool("volume_down", "Decrease the volume of a player."),
    {
        "name": "mute",
        "description": "Mute or unmute a player.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "player_id": _PLAYER_ID,
                "muted": {
                    "type": "boolean",
                    "description": "True to mute, false to unmute",
                },
            },
            "required": ["player_id", "muted"],
        },
    },
    {
        "name": "set_shuffle",
        "description": "Enable or disable shuffle mode.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "player_id": _PLAYER_ID,
                "shuffle": {
                    "type": "boolean",
                    "description": "True to enable shuffle, false to disable",
                },
            },
            "required": ["player_id", "shuffle"],
        },
    },
    {
        "name": "set_repeat",
        "description": "Set the repeat mode.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "player_id": _PLAYER_ID,
                "repeat_mode": {
                    "type": "string",
                    "enum": list(REPEAT_MODES),
                    "description": (
                        "Repeat mode: 'off', 'one' (repeat current track), "
                        "'all' (repeat queue)"
                    ),
                },
            },
            "required": ["player_id", "repeat_mode"],
        },
    },
    _player_only_tool("clear_queue", "Clear the play queue."),
    {
        "name": "get_queue",
        "description": "Get the current play queue for a player.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "player_id": _PLAYER_ID,
                "limit": {
                    "type": "number",
                    "description": "Maximum number of queue items to return (default: 25)",
                },
                "offset": {
                    "type": "number",
                    "minimum": 0,
                    "description": "Offset for pagination (default: 0)",
                },
            },
            "required": ["player_id"],
        },
    },
    {
        "name": "play_queue_index",
        "description": "Play a specific item in the queue by its index.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "player_id": _PLAYER_ID,
                "index": {
                    "type": "number",
                    "minimum": 0,
                    "description": "Index of the item in the queue (0-based)",
                },
            },
            "required": ["player_id", "index"],
        },
    },
    {
        "name": "remove_queue_item",
        "description": "Remove an item from the queue.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "player_id": _PLAYER_ID,
                "item_id_or_index": {
                    "type": "string",
                    "description": "Queue item ID or index to remove",
                },
            },
            "required": ["player_id", "item_id_or_index"],
        },
    },
    {
        "name": "move_queue_item",
        "description": "Move an item in the queue to a different position.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "player_id": _PLAYER_ID,
                "queue_item_id": {
                    "type": "string",
                    "description": "The queue item ID to move",
                },
                "position_shift": {
                    "type": "number",
                    "description": (
                        "Number of positions to shift (negative = earlier, positive = later)"
                    ),
                },
            },
            "required": ["player_id", "queue_item_id", "position_shift"],
        },
    },
    {
        "name": "transfer_queue",
        "description": "Transfer the play queue from one player to another.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "source_player_id": {
                    "type": "string",
                    "description": "The ID of the source player",
                },
                "target_player_id": {
                    "type": "string",
                    "description": "The ID of the target player",
                },
            },
            "required": ["source_player_id", "target_player_id"],
        },
    },
    {
        "name": "power",
        "description": "Power on or off a player.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "player_id": _PLAYER_ID,
                "powered": {
                    "type": "boolean",
                    "description": "True to power on, false to power off",
                },
            },
            "required": ["player_id", "powered"],
        },
    },
]
