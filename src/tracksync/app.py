"""Application orchestration entry points."""

from __future__ import annotations

from contextlib import ExitStack
from logging import getLogger
from typing import TYPE_CHECKING

from tracksync.adapters.itunes import ITunesClient
from tracksync.adapters.spotify import SpotifyClient
from tracksync.domain.playlist_sync import SyncPlaylistResult, sync_playlist
from tracksync.domain.resolution import TrackResolver

if TYPE_CHECKING:
    from pathlib import Path

    from tracksync.config import AppConfig
    from tracksync.domain.ports import PlaylistLibrary, TrackMetadataLookup, TrackSearch

log = getLogger(__name__)


class ReferenceFileNotFoundError(FileNotFoundError):
    """Raised when the reference list does not exist."""


def load_reference_lines(path: Path) -> list[str]:
    """Read the reference list, one URL or track URI per line."""

    if not path.is_file():
        raise ReferenceFileNotFoundError(f"File not found: {path}")
    # utf-8-sig drops the BOM some editors write before the first line
    return path.read_text(encoding="utf-8-sig").splitlines()


def sync_playlist_from_file(
    *,
    config: AppConfig,
    tracks_path: Path | None = None,
    library: PlaylistLibrary | None = None,
    metadata_lookup: TrackMetadataLookup | None = None,
    search: TrackSearch | None = None,
) -> SyncPlaylistResult:
    """Synchronise the configured playlist with the reference list using the configured adapters."""

    effective_path = tracks_path or config.sync.resolve_tracks_path()
    log.info("Reading references from %s", effective_path)
    lines = load_reference_lines(effective_path)

    if library is None or search is None:
        spotify = SpotifyClient(config=config.spotify)
        library = library or spotify
        search = search or spotify

    with ExitStack() as stack:
        if metadata_lookup is None:
            metadata_lookup = stack.enter_context(ITunesClient(config=config.itunes))
        resolver = TrackResolver(metadata_lookup=metadata_lookup, search=search)
        return sync_playlist(
            lines=lines,
            playlist_id=config.sync.playlist_id,
            resolver=resolver,
            library=library,
        )
