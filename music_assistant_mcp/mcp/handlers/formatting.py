"""Text rendering of Music Assistant payloads for agent consumption.

Every formatter accepts partially populated payloads: a missing optional
field is omitted from the output or replaced by a placeholder ("Unknown",
"N/A"), never allowed to raise.  Media items may be full records or
lightweight ``ItemMapping`` references, so formatters probe for fields with
``.get()`` rather than trusting ``media_type``.
"""
from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from typing import Any, NamedTuple

from music_assistant_mcp.contracts.music_types import (
    Player,
    PlayerQueue,
    QueueItem,
    SearchResults,
)

MediaRecord = Mapping[str, Any]
"""A media item or ItemMapping; fields are probed, never assumed."""

_URI_RE = re.compile(r"^([^:]+)://([^/]+)/(.+)$")


class ParsedUri(NamedTuple):
    provider: str
    media_type: str
    item_id: str


def parse_uri(uri: str) -> ParsedUri | None:
    """Split ``provider://media_type/item_id``; ``None`` when malformed."""
    match = _URI_RE.match(uri)
    if match is None:
        return None
    return ParsedUri(*match.groups())


def format_duration(seconds: float) -> str:
    """Render seconds as ``M:SS`` (whole seconds, zero-padded)."""
    total = int(seconds)
    return f"{total // 60}:{total % 60:02d}"


def format_number(value: object) -> str:
    """Render a number the way the host sent it: ``150`` not ``150.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def item_uri(item: Mapping[str, object], fallback_type: str = "unknown") -> str:
    """The item's own URI, or one synthesised from provider, type and id."""
    uri = item.get("uri")
    if uri:
        return str(uri)
    media_type = item.get("media_type") or fallback_type
    return f"{item.get('provider', 'unknown')}://{media_type}/{item.get('item_id', '')}"


def join_names(items: Iterable[Mapping[str, object]] | None, placeholder: str = "Unknown Artist") -> str:
    names = [str(i["name"]) for i in items or [] if i.get("name")]
    return ", ".join(names) or placeholder


def _name(item: Mapping[str, object]) -> str:
    return str(item.get("name") or "Unknown")


# ---------------------------------------------------------------------------
# Media items
# ---------------------------------------------------------------------------


def format_track(item: MediaRecord, uri: str) -> str:
    artists = join_names(item.get("artists"))
    album = item.get("album")
    album_part = f" ({album['name']})" if isinstance(album, dict) and album.get("name") else ""
    duration = item.get("duration")
    duration_part = f" [{format_duration(duration)}]" if duration else ""
    return f"- **{_name(item)}** by {artists}{album_part}{duration_part}\n  URI: {uri}"


def format_album(item: MediaRecord, uri: str) -> str:
    artists = join_names(item.get("artists"))
    year = item.get("year")
    year_part = f" ({year})" if year else ""
    return f"- **{_name(item)}** by {artists}{year_part}\n  URI: {uri}"


def format_playlist(item: MediaRecord, uri: str) -> str:
    owner = item.get("owner")
    owner_part = f" (by {owner})" if owner else ""
    return f"- **{_name(item)}**{owner_part}\n  URI: {uri}"


def format_podcast(item: MediaRecord, uri: str) -> str:
    publisher = item.get("publisher")
    publisher_part = f" ({publisher})" if publisher else ""
    return f"- **{_name(item)}**{publisher_part}\n  URI: {uri}"


def format_audiobook(item: MediaRecord, uri: str) -> str:
    authors = item.get("authors")
    authors_part = f" by {', '.join(authors)}" if authors else ""
    return f"- **{_name(item)}**{authors_part}\n  URI: {uri}"


def format_folder(item: MediaRecord, uri: str) -> str:
    return f"- 📁 **{_name(item)}**\n  Path: {item.get('path') or uri}"


def format_plain(item: MediaRecord, uri: str) -> str:
    return f"- **{_name(item)}**\n  URI: {uri}"


_ItemFormatter = Callable[[MediaRecord, str], str]

_FORMATTERS: dict[str, _ItemFormatter] = {
    "track": format_track,
    "album": format_album,
    "artist": format_plain,
    "playlist": format_playlist,
    "folder": format_folder,
}


def format_media_item(item: MediaRecord) -> str:
    """Render one browse/library item as a bulleted Markdown entry."""
    media_type = str(item.get("media_type") or "unknown")
    formatter = _FORMATTERS.get(media_type, format_plain)
    return formatter(item, item_uri(item, media_type))


def format_media_items(items: Iterable[MediaRecord]) -> str:
    return "\n".join(format_media_item(item) for item in items)


# (result key, section title, fallback media type, formatter) in display order
_SEARCH_SECTIONS: list[tuple[str, str, str, _ItemFormatter]] = [
    ("tracks", "Tracks", "track", format_track),
    ("albums", "Albums", "album", format_album),
    ("artists", "Artists", "artist", format_plain),
    ("playlists", "Playlists", "playlist", format_playlist),
    ("radio", "Radio Stations", "radio", format_plain),
    ("podcasts", "Podcasts", "podcast", format_podcast),
    ("audiobooks", "Audiobooks", "audiobook", format_audiobook),
]


def format_search_results(results: SearchResults | None) -> str:
    """Render ``music/search`` results grouped by category."""
    sections: list[str] = []
    for key, title, fallback_type, formatter in _SEARCH_SECTIONS:
        items = (results or {}).get(key) or []
        if not items:
            continue
        lines = [formatter(item, item_uri(item, fallback_type)) for item in items]
        sections.append(f"## {title}\n" + "\n".join(lines))

    if not sections:
        return "No results found."
    return "\n\n".join(sections)


def format_item_details(item: MediaRecord) -> str:
    """Render ``music/item_by_uri`` as a detail card."""
    details = f"## {_name(item)}\n\n"
    details += f"**Type:** {item.get('media_type', 'unknown')}\n"
    details += f"**Provider:** {item.get('provider', 'unknown')}\n"

    if item.get("uri"):
        details += f"**URI:** {item['uri']}\n"

    artists = item.get("artists")
    if artists:
        details += f"**Artists:** {join_names(artists)}\n"

    album = item.get("album")
    if isinstance(album, dict) and album.get("name"):
        details += f"**Album:** {album['name']}\n"

    if item.get("year"):
        details += f"**Year:** {item['year']}\n"

    duration = item.get("duration")
    if duration:
        details += f"**Duration:** {format_duration(duration)}\n"

    if "favorite" in item:
        details += f"**Favorite:** {'Yes' if item.get('favorite') else 'No'}\n"

    metadata = item.get("metadata") or {}
    if metadata.get("description"):
        details += f"\n**Description:**\n{metadata['description']}\n"
    if metadata.get("genres"):
        details += f"**Genres:** {', '.join(metadata['genres'])}\n"

    return details


# ---------------------------------------------------------------------------
# Players
# ---------------------------------------------------------------------------


def _volume(player: Player) -> str | None:
    level = player.get("volume_level")
    if level is None:
        return None
    return f"{format_number(level)}%"


def _on_off(value: object) -> str:
    return "On" if value else "Off"


def format_player(player: Player) -> str:
    """Render a player as a compact multi-line summary."""
    status = "✓" if player.get("available") else "✗"
    state = player.get("playback_state") or "unknown"
    volume = _volume(player) or "N/A"
    powered = player.get("powered")
    power = _on_off(powered) if powered is not None else "N/A"

    output = f"{status} **{_name(player)}** (ID: `{player.get('player_id', '')}`)\n"
    output += f"   Type: {player.get('type', 'unknown')} | Provider: {player.get('provider', 'unknown')}\n"
    output += f"   State: {state} | Volume: {volume} | Power: {power}\n"

    media = player.get("current_media")
    if media:
        output += f"   Now Playing: {media.get('title') or 'Unknown'}"
        if media.get("artist"):
            output += f" by {media['artist']}"
        if media.get("album"):
            output += f" ({media['album']})"
        output += "\n"

    if player.get("group_members"):
        output += f"   Group Members: {', '.join(player['group_members'])}\n"

    if player.get("synced_to"):
        output += f"   Synced to: {player['synced_to']}\n"

    return output


def format_player_details(player: Player) -> str:
    """Render a single player with media, group and source details."""
    output = f"## Player: {_name(player)}\n\n"
    output += f"**ID:** `{player.get('player_id', '')}`\n"
    output += f"**Type:** {player.get('type', 'unknown')}\n"
    output += f"**Provider:** {player.get('provider', 'unknown')}\n"
    output += f"**Available:** {'Yes' if player.get('available') else 'No'}\n"
    output += f"**Playback State:** {player.get('playback_state') or 'unknown'}\n"

    volume = _volume(player)
    if volume is not None:
        output += f"**Volume:** {volume}"
        if player.get("volume_muted"):
            output += " (Muted)"
        output += "\n"

    if player.get("powered") is not None:
        output += f"**Power:** {_on_off(player['powered'])}\n"

    if player.get("elapsed_time") is not None:
        output += f"**Elapsed Time:** {format_duration(player['elapsed_time'])}\n"

    media = player.get("current_media")
    if media:
        output += "\n### Now Playing\n"
        output += f"**Title:** {media.get('title') or 'Unknown'}\n"
        if media.get("artist"):
            output += f"**Artist:** {media['artist']}\n"
        if media.get("album"):
            output += f"**Album:** {media['album']}\n"
        if media.get("duration"):
            output += f"**Duration:** {format_duration(media['duration'])}\n"
        if media.get("image_url"):
            output += f"**Image:** {media['image_url']}\n"

    if player.get("group_members"):
        output += f"\n**Group Members:** {', '.join(player['group_members'])}\n"

    if player.get("synced_to"):
        output += f"**Synced To:** {player['synced_to']}\n"

    sources = player.get("source_list") or []
    if sources:
        output += "\n### Available Sources\n"
        for source in sources:
            active = " ← Active" if source.get("id") == player.get("active_source") else ""
            output += f"- {source.get('name', 'Unknown')} (ID: {source.get('id', '')}){active}\n"

    return output


def format_now_playing(player: Player) -> str:
    """Render what *player* is playing; the caller handles "nothing playing"."""
    media = player.get("current_media") or {}
    output = f"## Now Playing on {_name(player)}\n\n"
    output += f"**Title:** {media.get('title') or 'Unknown'}\n"
    if media.get("artist"):
        output += f"**Artist:** {media['artist']}\n"
    if media.get("album"):
        output += f"**Album:** {media['album']}\n"
    output += f"**State:** {player.get('playback_state') or 'unknown'}\n"

    elapsed = player.get("elapsed_time")
    duration = media.get("duration")
    if elapsed is not None and duration:
        output += f"**Progress:** {format_duration(elapsed)} / {format_duration(duration)}\n"
    elif duration:
        output += f"**Duration:** {format_duration(duration)}\n"

    volume = _volume(player)
    if volume is not None:
        output += f"**Volume:** {volume}"
        if player.get("volume_muted"):
            output += " (Muted)"
        output += "\n"

    if media.get("image_url"):
        output += f"**Image:** {media['image_url']}\n"

    return output


# ---------------------------------------------------------------------------
# Queues
# ---------------------------------------------------------------------------


def _progress(queue: PlayerQueue, current: QueueItem) -> str | None:
    elapsed = queue.get("elapsed_time")
    duration = current.get("duration")
    if elapsed is None or not duration:
        return None
    return f"{format_duration(elapsed)} / {format_duration(duration)}"


def format_queue(queue: PlayerQueue) -> str:
    """Render a queue as a compact multi-line summary."""
    output = f"**{queue.get('display_name', 'Unknown')}** (ID: `{queue.get('queue_id', '')}`)\n"
    output += f"   State: {queue.get('state') or 'unknown'} | Items: {queue.get('items', 0)}\n"
    output += (
        f"   Shuffle: {_on_off(queue.get('shuffle_enabled'))} | "
        f"Repeat: {queue.get('repeat_mode') or 'off'}\n"
    )

    current = queue.get("current_item")
    if current:
        output += f"   Current: {_name(current)}"
        progress = _progress(queue, current)
        if progress:
            output += f" ({progress})"
        output += "\n"

    next_item = queue.get("next_item")
    if next_item:
        output += f"   Next: {_name(next_item)}\n"

    return output


def format_queue_item(item: QueueItem, index: int) -> str:
    """Render one queue entry; *index* is 0-based, displayed 1-based."""
    duration = item.get("duration")
    duration_part = f" [{format_duration(duration)}]" if duration else ""
    return f"{index + 1}. **{_name(item)}**{duration_part} (ID: {item.get('queue_item_id', '')})"


def format_queue_details(queue: PlayerQueue, items: list[QueueItem] | None, offset: int) -> str:
    """Render a queue header followed by one page of its items."""
    output = f"## Queue: {queue.get('display_name', 'Unknown')}\n\n"
    output += f"**State:** {queue.get('state') or 'unknown'}\n"
    output += f"**Total Items:** {queue.get('items', 0)}\n"
    output += f"**Shuffle:** {_on_off(queue.get('shuffle_enabled'))}\n"
    output += f"**Repeat:** {queue.get('repeat_mode') or 'off'}\n\n"

    current = queue.get("current_item")
    if current:
        output += f"**Now Playing:** {_name(current)}\n"
        progress = _progress(queue, current)
        if progress:
            output += f"**Position:** {progress}\n"
        output += "\n"

    if items:
        output += "### Queue Items:\n"
        output += "\n".join(
            format_queue_item(item, offset + idx) for idx, item in enumerate(items)
        )
    else:
        output += "Queue is empty."

    return output
