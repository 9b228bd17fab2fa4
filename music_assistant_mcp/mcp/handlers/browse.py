"""Library browsing tool handlers.

``get_item_children`` is the only tool that issues two commands: a lookup of
the parent (for its display name) followed by the children listing.
"""
from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from music_assistant_mcp.contracts.json_types import JSONObject, jint
from music_assistant_mcp.contracts.music_types import MediaItem, RecommendationFolder
from music_assistant_mcp.mcp.handlers.base import CommandClient, check_arguments, unknown_tool
from music_assistant_mcp.mcp.handlers.formatting import (
    format_item_details,
    format_media_items,
    parse_uri,
)
from music_assistant_mcp.mcp.results import ToolCallResult, error_result, text_result
from music_assistant_mcp.mcp.tools.browse import BROWSE_TOOLS

logger = logging.getLogger(__name__)

LIBRARY_ENDPOINTS: dict[str, str] = {
    "artist": "music/artists/library_items",
    "album": "music/albums/library_items",
    "track": "music/tracks/library_items",
    "playlist": "music/playlists/library_items",
    "radio": "music/radios/library_items",
}

_VALID_CHILD_COMBINATIONS = "album->tracks, playlist->tracks, artist->albums, artist->tracks"


class _ChildLookup:
    """How to list one kind of child for one kind of parent."""

    def __init__(
        self,
        parent_command: str,
        children_command: str,
        title: str,
        fallback_name: str,
        empty_text: str,
        paged: bool = False,
    ) -> None:
        self.parent_command = parent_command
        self.children_command = children_command
        self.title = title
        self.fallback_name = fallback_name
        self.empty_text = empty_text
        self.paged = paged


# (parent media type, child type) → lookup; nothing else is supported
CHILD_LOOKUPS: dict[tuple[str, str], _ChildLookup] = {
    ("album", "tracks"): _ChildLookup(
        "music/albums/get", "music/albums/tracks",
        title="Tracks from", fallback_name="Album", empty_text="No tracks found.",
    ),
    ("playlist", "tracks"): _ChildLookup(
        "music/playlists/get", "music/playlists/tracks",
        title="Tracks from", fallback_name="Playlist", empty_text="No tracks found.",
        paged=True,
    ),
    ("artist", "albums"): _ChildLookup(
        "music/artists/get", "music/artists/albums",
        title="Albums by", fallback_name="Artist", empty_text="No albums found.",
    ),
    ("artist", "tracks"): _ChildLookup(
        "music/artists/get", "music/artists/tracks",
        title="Top Tracks by", fallback_name="Artist", empty_text="No tracks found.",
    ),
}


async def _browse_library(client: CommandClient, params: JSONObject) -> ToolCallResult:
    results: list[MediaItem] | None = await client.execute_command(
        "music/browse", {"path": params.get("path")}
    )
    if not results:
        return text_result("No items found.")
    return text_result(format_media_items(results))


async def _get_library_items(client: CommandClient, params: JSONObject) -> ToolCallResult:
    media_type = str(params["media_type"])
    endpoint = LIBRARY_ENDPOINTS.get(media_type)
    if endpoint is None:
        return error_result(f"Invalid media_type: {media_type}")

    results: list[MediaItem] | None = await client.execute_command(endpoint, {
        "limit": jint(params.get("limit")) or 50,
        "offset": jint(params.get("offset")),
        "search": params.get("search"),
        "favorite": params.get("favorites_only"),
        "order_by": params.get("order_by") or "sort_name",
    })
    if not results:
        return text_result(f"No {media_type}s found.")

    title = media_type.capitalize() + "s"
    return text_result(f"## Library {title}\n{format_media_items(results)}")


async def _get_item_children(client: CommandClient, params: JSONObject) -> ToolCallResult:
    child_type = str(params["child_type"])
    parsed = parse_uri(str(params["uri"]))
    if parsed is None:
        return error_result("Invalid URI format")

    lookup = CHILD_LOOKUPS.get((parsed.media_type, child_type))
    if lookup is None:
        return error_result(
            f"Cannot get {child_type} from {parsed.media_type}. "
            f"Valid combinations: {_VALID_CHILD_COMBINATIONS}"
        )

    item_args: JSONObject = {
        "item_id": parsed.item_id,
        "provider_instance_id_or_domain": parsed.provider,
    }
    parent: MediaItem | None = await client.execute_command(lookup.parent_command, item_args)

    children_args = dict(item_args)
    if lookup.paged:
        children_args["limit"] = jint(params.get("limit")) or 100
        children_args["offset"] = jint(params.get("offset"))
    results: list[MediaItem] | None = await client.execute_command(
        lookup.children_command, children_args
    )
    if not results:
        return text_result(lookup.empty_text)

    parent_name = (parent or {}).get("name") or lookup.fallback_name
    return text_result(f'## {lookup.title} "{parent_name}"\n{format_media_items(results)}')


async def _get_recommendations(client: CommandClient, params: JSONObject) -> ToolCallResult:
    results: list[RecommendationFolder] | None = await client.execute_command(
        "music/recommendations"
    )
    if not results:
        return text_result("No recommendations available.")

    sections = "\n\n".join(
        f"## {folder.get('name', 'Recommendations')}\n{format_media_items(folder.get('items') or [])}"
        for folder in results
    )
    return text_result(sections)


async def _get_recently_played(client: CommandClient, params: JSONObject) -> ToolCallResult:
    results: list[MediaItem] | None = await client.execute_command(
        "music/recently_played_items",
        {
            "limit": jint(params.get("limit")) or 25,
            "media_types": params.get("media_types"),
        },
    )
    if not results:
        return text_result("No recently played items.")
    return text_result(f"## Recently Played\n{format_media_items(results)}")


async def _get_item_details(client: CommandClient, params: JSONObject) -> ToolCallResult:
    result: MediaItem | None = await client.execute_command(
        "music/item_by_uri", {"uri": params["uri"]}
    )
    if not result:
        return text_result("Item not found.")
    return text_result(format_item_details(result))


_TOOL_HANDLERS: dict[str, Callable[[CommandClient, JSONObject], Awaitable[ToolCallResult]]] = {
    "browse_library": _browse_library,
    "get_library_items": _get_library_items,
    "get_item_children": _get_item_children,
    "get_recommendations": _get_recommendations,
    "get_recently_played": _get_recently_played,
    "get_item_details": _get_item_details,
}


async def handle_browse_tool(
    client: CommandClient,
    name: str,
    arguments: JSONObject | None,
) -> ToolCallResult:
    """Execute a library browsing tool call."""
    handler = _TOOL_HANDLERS.get(name)
    if handler is None:
        return unknown_tool("browse", name)

    checked = check_arguments(name, arguments, BROWSE_TOOLS)
    if isinstance(checked, ToolCallResult):
        return checked

    logger.debug("Browse tool %s params=%s", name, checked.resolved_params)
    return await handler(client, checked.resolved_params)
