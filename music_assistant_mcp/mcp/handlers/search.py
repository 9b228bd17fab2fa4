"""Search tool handler."""
from __future__ import annotations

import logging

from music_assistant_mcp.contracts.json_types import JSONObject, jint
from music_assistant_mcp.contracts.music_types import SEARCHABLE_MEDIA_TYPES, SearchResults
from music_assistant_mcp.mcp.handlers.base import CommandClient, check_arguments, unknown_tool
from music_assistant_mcp.mcp.handlers.formatting import format_search_results
from music_assistant_mcp.mcp.results import ToolCallResult, text_result
from music_assistant_mcp.mcp.tools.search import SEARCH_TOOLS

logger = logging.getLogger(__name__)

SINGLE_TYPE_LIMIT = 25
PER_TYPE_LIMIT = 10


async def _search(client: CommandClient, params: JSONObject) -> ToolCallResult:
    media_type = params.get("media_type")
    media_types = [str(media_type)] if media_type else list(SEARCHABLE_MEDIA_TYPES)
    limit = jint(params.get("limit")) or (SINGLE_TYPE_LIMIT if media_type else PER_TYPE_LIMIT)
    logger.debug("Searching %d media types for %r (limit %d)", len(media_types), params["query"], limit)

    results: SearchResults = await client.execute_command("music/search", {
        "search_query": params["query"],
        "media_types": media_types,
        "limit": limit,
        "library_only": bool(params.get("library_only")),
    })
    return text_result(format_search_results(results))


async def handle_search_tool(
    client: CommandClient,
    name: str,
    arguments: JSONObject | None,
) -> ToolCallResult:
    """Execute a search tool call."""
    if name != "search":
        return unknown_tool("search", name)

    checked = check_arguments(name, arguments, SEARCH_TOOLS)
    if isinstance(checked, ToolCallResult):
        return checked
    return await _search(client, checked.resolved_params)
