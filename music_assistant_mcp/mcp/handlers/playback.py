"""Playback and queue control tool handlers.

Queue commands (``player_queues/*``) address the queue by ``queue_id``;
player commands (``players/cmd/*``) take ``player_id``. A player's queue id
is its player id, so both are filled from the ``player_id`` argument.
"""
from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from music_assistant_mcp.contracts.json_types import JSONObject, JSONValue, jfloat, jint
from music_assistant_mcp.contracts.music_types import PlayerQueue, QueueItem
from music_assistant_mcp.mcp.handlers.base import CommandClient, check_arguments, unknown_tool
from music_assistant_mcp.mcp.handlers.formatting import (
    format_duration,
    format_number,
    format_queue_details,
)
from music_assistant_mcp.mcp.results import ToolCallResult, error_result, text_result
from music_assistant_mcp.mcp.tools.playback import PLAYBACK_TOOLS

logger = logging.getLogger(__name__)

VOLUME_MIN = 0
VOLUME_MAX = 100
QUEUE_PAGE_SIZE = 25

# tool name → (queue command, confirmation prefix)
_SIMPLE_QUEUE_COMMANDS: dict[str, tuple[str, str]] = {
    "play": ("player_queues/play", "Resumed playback on"),
    "pause": ("player_queues/pause", "Paused playback on"),
    "play_pause": ("player_queues/play_pause", "Toggled play/pause on"),
    "stop": ("player_queues/stop", "Stopped playback on"),
    "next_track": ("player_queues/next", "Skipped to next track on"),
    "previous_track": ("player_queues/previous", "Went to previous track on"),
    "clear_queue": ("player_queues/clear", "Cleared queue on"),
}

_SIMPLE_PLAYER_COMMANDS: dict[str, tuple[str, str]] = {
    "volume_up": ("players/cmd/volume_up", "Increased volume on"),
    "volume_down": ("players/cmd/volume_down", "Decreased volume on"),
}


def _clamp_volume(level: float) -> int | float:
    return max(VOLUME_MIN, min(VOLUME_MAX, level))


def _queue_item_ref(value: JSONValue) -> JSONValue:
    """Queue positions arrive as strings; send them to the backend as ints."""
    if isinstance(value, str) and value.isdigit():
        return int(value)
    return value


async def _play_media(client: CommandClient, params: JSONObject) -> ToolCallResult:
    player_id = params["player_id"]
    media = params.get("media_uris") or params.get("media_uri")
    if not media:
        return error_result("Error: Either media_uri or media_uris is required")

    queue_option = params.get("queue_option") or "play"
    await client.execute_command("player_queues/play_media", {
        "queue_id": player_id,
        "media": media,
        "option": queue_option,
        "radio_mode": bool(params.get("radio_mode")),
    })

    description = f"{len(media)} items" if isinstance(media, list) else media
    return text_result(
        f"Started playing {description} on player {player_id} (mode: {queue_option})"
    )


async def _seek(client: CommandClient, params: JSONObject) -> ToolCallResult:
    player_id = params["player_id"]
    position = params["position"]
    await client.execute_command("player_queues/seek", {
        "queue_id": player_id,
        "position": position,
    })
    return text_result(f"Seeked to {format_duration(jfloat(position))} on {player_id}")


async def _set_volume(client: CommandClient, params: JSONObject) -> ToolCallResult:
    player_id = params["player_id"]
    level = params["volume_level"]
    await client.execute_command("players/cmd/volume_set", {
        "player_id": player_id,
        "volume_level": _clamp_volume(jfloat(level)),
    })
    # the confirmation echoes the requested level, not the clamped one
    return text_result(f"Set volume to {format_number(level)}% on {player_id}")


async def _mute(client: CommandClient, params: JSONObject) -> ToolCallResult:
    player_id = params["player_id"]
    muted = bool(params["muted"])
    await client.execute_command("players/cmd/volume_mute", {
        "player_id": player_id,
        "muted": muted,
    })
    return text_result(f"{'Muted' if muted else 'Unmuted'} {player_id}")


async def _set_shuffle(client: CommandClient, params: JSONObject) -> ToolCallResult:
    player_id = params["player_id"]
    shuffle = bool(params["shuffle"])
    await client.execute_command("player_queues/shuffle", {
        "queue_id": player_id,
        "shuffle_enabled": shuffle,
    })
    return text_result(f"{'Enabled' if shuffle else 'Disabled'} shuffle on {player_id}")


async def _set_repeat(client: CommandClient, params: JSONObject) -> ToolCallResult:
    player_id = params["player_id"]
    repeat_mode = params["repeat_mode"]
    await client.execute_command("player_queues/repeat", {
        "queue_id": player_id,
        "repeat_mode": repeat_mode,
    })
    return text_result(f"Set repeat mode to '{repeat_mode}' on {player_id}")


async def _get_queue(client: CommandClient, params: JSONObject) -> ToolCallResult:
    player_id = params["player_id"]
    limit = jint(params.get("limit")) or QUEUE_PAGE_SIZE
    offset = jint(params.get("offset"))

    queue: PlayerQueue | None = await client.execute_command(
        "player_queues/get", {"queue_id": player_id}
    )
    items: list[QueueItem] | None = await client.execute_command("player_queues/items", {
        "queue_id": player_id,
        "limit": limit,
        "offset": offset,
    })
    return text_result(format_queue_details(queue or {}, items, offset))


async def _play_queue_index(client: CommandClient, params: JSONObject) -> ToolCallResult:
    player_id = params["player_id"]
    index = params["index"]
    await client.execute_command("player_queues/play_index", {
        "queue_id": player_id,
        "index": index,
    })
    return text_result(f"Playing queue item at index {index} on {player_id}")


async def _remove_queue_item(client: CommandClient, params: JSONObject) -> ToolCallResult:
    player_id = params["player_id"]
    item = params["item_id_or_index"]
    await client.execute_command("player_queues/delete_item", {
        "queue_id": player_id,
        "item_id_or_index": _queue_item_ref(item),
    })
    return text_result(f"Removed item {item} from queue on {player_id}")


async def _move_queue_item(client: CommandClient, params: JSONObject) -> ToolCallResult:
    queue_item_id = params["queue_item_id"]
    shift = params["position_shift"]
    await client.execute_command("player_queues/move_item", {
        "queue_id": params["player_id"],
        "queue_item_id": queue_item_id,
        "pos_shift": shift,
    })
    return text_result(f"Moved queue item {queue_item_id} by {shift} positions")


async def _transfer_queue(client: CommandClient, params: JSONObject) -> ToolCallResult:
    source = params["source_player_id"]
    target = params["target_player_id"]
    await client.execute_command("player_queues/transfer", {
        "source_queue_id": source,
        "target_queue_id": target,
    })
    return text_result(f"Transferred queue from {source} to {target}")


async def _power(client: CommandClient, params: JSONObject) -> ToolCallResult:
    player_id = params["player_id"]
    powered = bool(params["powered"])
    await client.execute_command("players/cmd/power", {
        "player_id": player_id,
        "powered": powered,
    })
    return text_result(f"{'Powered on' if powered else 'Powered off'} {player_id}")


_TOOL_HANDLERS: dict[str, Callable[[CommandClient, JSONObject], Awaitable[ToolCallResult]]] = {
    "play_media": _play_media,
    "seek": _seek,
    "set_volume": _set_volume,
    "mute": _mute,
    "set_shuffle": _set_shuffle,
    "set_repeat": _set_repeat,
    "get_queue": _get_queue,
    "play_queue_index": _play_queue_index,
    "remove_queue_item": _remove_queue_item,
    "move_queue_item": _move_queue_item,
    "transfer_queue": _transfer_queue,
    "power": _power,
}


async def _run_simple(
    client: CommandClient,
    name: str,
    params: JSONObject,
) -> ToolCallResult:
    player_id = params["player_id"]
    if name in _SIMPLE_QUEUE_COMMANDS:
        command, done = _SIMPLE_QUEUE_COMMANDS[name]
        await client.execute_command(command, {"queue_id": player_id})
    else:
        command, done = _SIMPLE_PLAYER_COMMANDS[name]
        await client.execute_command(command, {"player_id": player_id})
    return text_result(f"{done} {player_id}")


async def handle_playback_tool(
    client: CommandClient,
    name: str,
    arguments: JSONObject | None,
) -> ToolCallResult:
    """Execute a playback or queue control tool call."""
    simple = name in _SIMPLE_QUEUE_COMMANDS or name in _SIMPLE_PLAYER_COMMANDS
    if not simple and name not in _TOOL_HANDLERS:
        return unknown_tool("playback", name)

    checked = check_arguments(name, arguments, PLAYBACK_TOOLS)
    if isinstance(checked, ToolCallResult):
        return checked

    params = checked.resolved_params
    logger.debug("Playback tool %s params=%s", name, params)
    if simple:
        return await _run_simple(client, name, params)
    return await _TOOL_HANDLERS[name](client, params)
