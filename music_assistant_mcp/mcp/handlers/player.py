"""Player management tool handlers."""
from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import cast

from music_assistant_mcp.contracts.json_types import JSONObject, JSONValue
from music_assistant_mcp.contracts.music_types import Player, PlayerQueue
from music_assistant_mcp.mcp.handlers.base import CommandClient, check_arguments, unknown_tool
from music_assistant_mcp.mcp.handlers.formatting import (
    format_now_playing,
    format_player,
    format_player_details,
    format_queue,
)
from music_assistant_mcp.mcp.results import ToolCallResult, text_result
from music_assistant_mcp.mcp.tools.player import PLAYER_TOOLS

logger = logging.getLogger(__name__)


async def _get_players(client: CommandClient, params: JSONObject) -> ToolCallResult:
    players: list[Player] | None = await client.execute_command("players/all", {
        "return_unavailable": bool(params.get("include_unavailable")),
        "return_disabled": bool(params.get("include_disabled")),
    })
    if not players:
        return text_result("No players found.")
    formatted = "\n".join(format_player(player) for player in players)
    return text_result(f"## Available Players\n\n{formatted}")


async def _get_player(client: CommandClient, params: JSONObject) -> ToolCallResult:
    player: Player | None = await client.execute_command(
        "players/get", {"player_id": params["player_id"]}
    )
    if not player:
        return text_result("Player not found.")
    return text_result(format_player_details(player))


async def _get_player_by_name(client: CommandClient, params: JSONObject) -> ToolCallResult:
    name = params["name"]
    player: Player | None = await client.execute_command("players/get_by_name", {"name": name})
    if not player:
        return text_result(f'No player found with name "{name}"')
    return text_result(f"## Found Player\n\n{format_player(player)}")


async def _get_all_queues(client: CommandClient, params: JSONObject) -> ToolCallResult:
    queues: list[PlayerQueue] | None = await client.execute_command("player_queues/all")
    if not queues:
        return text_result("No queues found.")
    formatted = "\n".join(format_queue(queue) for queue in queues)
    return text_result(f"## Player Queues\n\n{formatted}")


async def _group_players(client: CommandClient, params: JSONObject) -> ToolCallResult:
    player_id = params["player_id"]
    target = params["target_player"]
    await client.execute_command("players/cmd/group", {
        "player_id": player_id,
        "target_player": target,
    })
    return text_result(f"Added {player_id} to group with {target}")


async def _ungroup_player(client: CommandClient, params: JSONObject) -> ToolCallResult:
    player_id = params["player_id"]
    await client.execute_command("players/cmd/ungroup", {"player_id": player_id})
    return text_result(f"Ungrouped {player_id}")


async def _create_player_group(client: CommandClient, params: JSONObject) -> ToolCallResult:
    target = params["target_player"]
    members = [str(member) for member in cast(list[JSONValue], params["member_player_ids"])]
    await client.execute_command("players/cmd/group_many", {
        "target_player": target,
        "child_player_ids": members,
    })
    return text_result(
        f"Created group with {target} as leader and members: {', '.join(members)}"
    )


async def _get_now_playing(client: CommandClient, params: JSONObject) -> ToolCallResult:
    player: Player | None = await client.execute_command(
        "players/get", {"player_id": params["player_id"]}
    )
    if not player:
        return text_result("Player not found.")
    if not player.get("current_media"):
        return text_result(f"Nothing is currently playing on {player.get('name', 'Unknown')}")
    return text_result(format_now_playing(player))


_TOOL_HANDLERS: dict[str, Callable[[CommandClient, JSONObject], Awaitable[ToolCallResult]]] = {
    "get_players": _get_players,
    "get_player": _get_player,
    "get_player_by_name": _get_player_by_name,
    "get_all_queues": _get_all_queues,
    "group_players": _group_players,
    "ungroup_player": _ungroup_player,
    "create_player_group": _create_player_group,
    "get_now_playing": _get_now_playing,
}


async def handle_player_tool(
    client: CommandClient,
    name: str,
    arguments: JSONObject | None,
) -> ToolCallResult:
    """Execute a player management tool call."""
    handler = _TOOL_HANDLERS.get(name)
    if handler is None:
        return unknown_tool("player", name)

    checked = check_arguments(name, arguments, PLAYER_TOOLS)
    if isinstance(checked, ToolCallResult):
        return checked

    logger.debug("Player tool %s params=%s", name, checked.resolved_params)
    return await handler(client, checked.resolved_params)
