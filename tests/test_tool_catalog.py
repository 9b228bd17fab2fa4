"""Tests for the MCP tool catalog (music_assistant_mcp/mcp/tools)."""
from __future__ import annotations

import pytest

from music_assistant_mcp.mcp.tools import (
    BROWSE_TOOLS,
    PLAYBACK_TOOLS,
    PLAYER_TOOLS,
    SEARCH_TOOLS,
)
from music_assistant_mcp.mcp.tools.registry import (
    MCP_TOOLS,
    TOOL_CATEGORIES,
    TOOL_SETS,
    CatalogError,
    assert_unique_tool_names,
    find_tool_set,
)


def _names(tools) -> list[str]:
    return [t["name"] for t in tools]


class TestCatalogContents:

    def test_category_sizes(self) -> None:
        assert len(SEARCH_TOOLS) == 1
        assert len(BROWSE_TOOLS) == 6
        assert len(PLAYBACK_TOOLS) == 21
        assert len(PLAYER_TOOLS) == 8
        assert len(MCP_TOOLS) == 36

    def test_playback_order(self) -> None:
        assert _names(PLAYBACK_TOOLS) == [
            "play_media", "play", "pause", "play_pause", "stop", "next_track",
            "previous_track", "seek", "set_volume", "volume_up", "volume_down",
            "mute", "set_shuffle", "set_repeat", "clear_queue", "get_queue",
            "play_queue_index", "remove_queue_item", "move_queue_item",
            "transfer_queue", "power",
        ]

    def test_names_unique(self) -> None:
        names = _names(MCP_TOOLS)
        assert len(names) == len(set(names))

    def test_required_fields_are_declared(self) -> None:
        for tool in MCP_TOOLS:
            schema = tool["inputSchema"]
            for field in schema.get("required", []):
                assert field in schema["properties"], (tool["name"], field)

    def test_every_tool_has_description(self) -> None:
        assert all(t["description"] for t in MCP_TOOLS)

    def test_search_media_type_enum(self) -> None:
        media_type = SEARCH_TOOLS[0]["inputSchema"]["properties"]["media_type"]
        assert media_type["enum"] == [
            "artist", "album", "track", "playlist", "radio", "audiobook", "podcast",
        ]

    def test_child_type_enum(self) -> None:
        children = next(t for t in BROWSE_TOOLS if t["name"] == "get_item_children")
        assert children["inputSchema"]["properties"]["child_type"]["enum"] == ["tracks", "albums"]

    def test_limits_have_no_minimum(self) -> None:
        for tool in MCP_TOOLS:
            limit = tool["inputSchema"]["properties"].get("limit")
            if limit is not None:
                assert "minimum" not in limit, tool["name"]


class TestRegistry:

    def test_tool_set_order(self) -> None:
        assert [s.category for s in TOOL_SETS] == ["search", "browse", "playback", "player"]

    def test_flattened_catalog_follows_set_order(self) -> None:
        expected = _names(SEARCH_TOOLS + BROWSE_TOOLS + PLAYBACK_TOOLS + PLAYER_TOOLS)
        assert _names(MCP_TOOLS) == expected

    def test_categories(self) -> None:
        assert TOOL_CATEGORIES["search"] == "search"
        assert TOOL_CATEGORIES["get_item_children"] == "browse"
        assert TOOL_CATEGORIES["set_volume"] == "playback"
        assert TOOL_CATEGORIES["get_now_playing"] == "player"

    def test_find_tool_set(self) -> None:
        tool_set = find_tool_set("get_queue")
        assert tool_set is not None
        assert tool_set.category == "playback"
        assert "get_queue" in tool_set

    def test_find_tool_set_unknown(self) -> None:
        assert find_tool_set("nonexistent_tool") is None


class TestCatalogCheck:

    def _tool(self, name: str) -> dict:
        return {
            "name": name,
            "description": "A tool",
            "inputSchema": {"type": "object", "properties": {}, "required": []},
        }

    def test_duplicate_name_rejected(self) -> None:
        with pytest.raises(CatalogError, match="Duplicate tool name: dup"):
            assert_unique_tool_names([self._tool("dup"), self._tool("dup")])

    def test_undeclared_required_rejected(self) -> None:
        tool = self._tool("broken")
        tool["inputSchema"]["required"] = ["ghost"]
        with pytest.raises(CatalogError, match="ghost"):
            assert_unique_tool_names([tool])

    def test_unknown_schema_key_rejected(self) -> None:
        tool = self._tool("odd")
        tool["inputSchema"]["properties"]["x"] = {"type": "string", "pattern": ".*"}
        with pytest.raises(CatalogError, match="Invalid tool definition 'odd'"):
            assert_unique_tool_names([tool])

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(CatalogError):
            assert_unique_tool_names([self._tool("")])

    def test_real_catalog_passes(self) -> None:
        assert_unique_tool_names(MCP_TOOLS)
