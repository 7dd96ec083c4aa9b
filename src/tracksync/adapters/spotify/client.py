"""Spotipy-based client wrapper for the Spotify Web API."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

import requests
from pydantic import ValidationError
from spotipy.exceptions import SpotifyException

from tracksync.domain.ports.library import PlaylistUpdateError
from tracksync.domain.ports.lookup import TrackSearchError

from .auth import build_spotipy_client
from .schema import PlaylistItemsPage, SavedTracksPage, SpotifyTrack, TrackSearchResponse

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence, Set

    import spotipy

    from tracksync.config.spotify import SpotifyConfig
    from tracksync.domain.types import CanonicalTrackId

log = getLogger(__name__)

SAVED_TRACKS_PAGE_SIZE = 50
PLAYLIST_ITEMS_PAGE_SIZE = 100
PLAYLIST_ADD_CHUNK_SIZE = 100
PLAYLIST_ITEM_FIELDS = "items(track(uri,type,is_local)),next"

_SPOTIFY_ERRORS = (SpotifyException, requests.RequestException, ValidationError)


class SpotifyClient:
    """Small wrapper around spotipy.Spotify for paging, search and playlist updates."""

    def __init__(self, *, config: SpotifyConfig, client: spotipy.Spotify | None = None) -> None:
        self._client = client if client is not None else build_spotipy_client(config)

    def iter_saved_tracks(
        self,
        *,
        batch_size: int = SAVED_TRACKS_PAGE_SIZE,
    ) -> Iterable[SpotifyTrack]:
        offset = 0
        while True:
            raw_payload = self._client.current_user_saved_tracks(limit=batch_size, offset=offset)  # pyright: ignore[reportUnknownMemberType]
            payload = SavedTracksPage.model_validate(raw_payload)
            items = payload.items
            if not items:
                return
            for item in items:
                yield item.track
            if payload.next is None:
                return
            offset += len(items)

    def iter_playlist_items(
        self,
        playlist_id: str,
        *,
        batch_size: int = PLAYLIST_ITEMS_PAGE_SIZE,
    ) -> Iterable[SpotifyTrack]:
        offset = 0
        while True:
            raw_payload = self._client.playlist_items(  # pyright: ignore[reportUnknownMemberType]
                playlist_id,
                fields=PLAYLIST_ITEM_FIELDS,
                limit=batch_size,
                offset=offset,
                additional_types=("track",),
            )
            payload = PlaylistItemsPage.model_validate(raw_payload)
            items = payload.items
            if not items:
                return
            for item in items:
                if item.track is not None:
                    yield item.track
            if payload.next is None:
                return
            offset += len(items)

    def list_favorite_track_ids(self) -> set[CanonicalTrackId]:
        return {track.uri for track in self.iter_saved_tracks() if track.is_catalog_track}

    def list_playlist_track_ids(self, playlist_id: str) -> set[CanonicalTrackId]:
        return {
            track.uri for track in self.iter_playlist_items(playlist_id) if track.is_catalog_track
        }

    def add_tracks(self, playlist_id: str, track_ids: Set[CanonicalTrackId]) -> None:
        uris = sorted(track_ids)
        log.info("Adding %s tracks to playlist %s", len(uris), playlist_id)
        for start in range(0, len(uris), PLAYLIST_ADD_CHUNK_SIZE):
            chunk = uris[start : start + PLAYLIST_ADD_CHUNK_SIZE]
            try:
                self._client.playlist_add_items(playlist_id, chunk)  # pyright: ignore[reportUnknownMemberType]
            except (SpotifyException, requests.RequestException) as exc:
                raise PlaylistUpdateError(
                    f"Adding tracks to playlist {playlist_id} failed after {start} of "
                    f"{len(uris)} tracks: {exc}"
                ) from exc

    def search_by_isrc(self, isrc: str) -> CanonicalTrackId | None:
        tracks = self._search_tracks(f"isrc:{isrc}", limit=1)
        return tracks[0].uri if tracks else None

    def search_by_title_artist(
        self,
        title: str,
        artist: str,
        *,
        limit: int = 1,
    ) -> Sequence[CanonicalTrackId]:
        tracks = self._search_tracks(f"track:{title} artist:{artist}", limit=limit)
        return [track.uri for track in tracks]

    def _search_tracks(self, query: str, *, limit: int) -> list[SpotifyTrack]:
        log.debug("Spotify search: %s", query)
        try:
            raw_payload = self._client.search(q=query, type="track", limit=limit)  # pyright: ignore[reportUnknownMemberType]
            payload = TrackSearchResponse.model_validate(raw_payload)
        except _SPOTIFY_ERRORS as exc:
            raise TrackSearchError(f"Spotify search {query!r} failed: {exc}") from exc
        return [track for track in payload.tracks.items if track.is_catalog_track]
