"""Shapes of the Music Assistant payloads this server reads.

Every TypedDict is ``total=False``: the backend is trusted, not validated, and
formatters must degrade gracefully when an optional field is absent.

Media items arrive either as a full record (``Track``, ``Album``, ...) or as a
lightweight ``ItemMapping`` reference.  The two are not distinguished by a tag;
formatters probe for the fields they need (``"artists" in item``) instead of
relying on the ``media_type`` discriminator alone.
"""
from __future__ import annotations

from typing import Literal, Union

from typing_extensions import TypedDict

MediaType = Literal[
    "artist",
    "album",
    "track",
    "playlist",
    "radio",
    "audiobook",
    "podcast",
    "podcast_episode",
    "genre",
    "folder",
]

SEARCHABLE_MEDIA_TYPES: tuple[str, ...] = (
    "artist",
    "album",
    "track",
    "playlist",
    "radio",
    "audiobook",
    "podcast",
)
"""Media types queried in one ``music/search`` call when no filter is given."""

LIBRARY_MEDIA_TYPES: tuple[str, ...] = ("artist", "album", "track", "playlist", "radio")

QUEUE_OPTIONS: tuple[str, ...] = ("play", "replace", "next", "replace_next", "add")

REPEAT_MODES: tuple[str, ...] = ("off", "one", "all")


# ── Media items ───────────────────────────────────────────────────────────────


class MediaItemImage(TypedDict, total=False):
    type: str
    path: str
    provider: str
    remotely_accessible: bool


class MediaItemMetadata(TypedDict, total=False):
    description: str | None
    images: list[MediaItemImage] | None
    genres: list[str] | None
    release_date: str | None
    popularity: int | None


class ItemMapping(TypedDict, total=False):
    """Lightweight reference to a media item (no type-specific fields)."""

    item_id: str
    provider: str
    name: str
    version: str
    uri: str
    media_type: MediaType
    image: MediaItemImage | None


class Artist(ItemMapping, total=False):
    favorite: bool
    metadata: MediaItemMetadata


class Album(ItemMapping, total=False):
    year: int | None
    artists: list[Union[Artist, ItemMapping]]
    album_type: str
    favorite: bool
    metadata: MediaItemMetadata


class Track(ItemMapping, total=False):
    duration: float
    artists: list[Union[Artist, ItemMapping]]
    album: Union[Album, ItemMapping, None]
    favorite: bool
    metadata: MediaItemMetadata


class Playlist(ItemMapping, total=False):
    owner: str
    is_editable: bool
    favorite: bool
    metadata: MediaItemMetadata


class Radio(ItemMapping, total=False):
    favorite: bool
    metadata: MediaItemMetadata


class Audiobook(ItemMapping, total=False):
    authors: list[str]
    narrators: list[str]
    duration: float
    favorite: bool
    metadata: MediaItemMetadata


class Podcast(ItemMapping, total=False):
    publisher: str | None
    total_episodes: int | None
    favorite: bool
    metadata: MediaItemMetadata


class BrowseFolder(ItemMapping, total=False):
    path: str


MediaItem = Union[Artist, Album, Track, Playlist, Radio, Audiobook, Podcast, BrowseFolder, ItemMapping]
"""Any item the formatters accept; discriminated structurally at format time."""


class SearchResults(TypedDict, total=False):
    """Response of ``music/search``, one list per media type."""

    artists: list[Union[Artist, ItemMapping]]
    albums: list[Union[Album, ItemMapping]]
    tracks: list[Union[Track, ItemMapping]]
    playlists: list[Union[Playlist, ItemMapping]]
    radio: list[Union[Radio, ItemMapping]]
    audiobooks: list[Union[Audiobook, ItemMapping]]
    podcasts: list[Union[Podcast, ItemMapping]]


class RecommendationFolder(TypedDict, total=False):
    """One section of ``music/recommendations``."""

    name: str
    items: list[MediaItem]


# ── Players and queues ────────────────────────────────────────────────────────


class PlayerSource(TypedDict, total=False):
    id: str
    name: str
    passive: bool


class PlayerMedia(TypedDict, total=False):
    uri: str
    media_type: MediaType
    title: str | None
    artist: str | None
    album: str | None
    image_url: str | None
    duration: float | None


class Player(TypedDict, total=False):
    player_id: str
    provider: str
    type: str  # "player" | "stereo_pair" | "group" | "unknown"
    name: str
    available: bool
    playback_state: str | None
    elapsed_time: float | None
    powered: bool | None
    volume_level: int | None
    volume_muted: bool | None
    current_media: PlayerMedia | None
    group_members: list[str]
    synced_to: str | None
    active_source: str | None
    source_list: list[PlayerSource]


class QueueItem(TypedDict, total=False):
    queue_id: str
    queue_item_id: str
    name: str
    duration: float | None
    media_item: Track | None
    index: int


class PlayerQueue(TypedDict, total=False):
    queue_id: str
    active: bool
    display_name: str
    available: bool
    items: int
    shuffle_enabled: bool
    repeat_mode: str
    current_index: int | None
    elapsed_time: float
    state: str
    current_item: QueueItem | None
    next_item: QueueItem | None
