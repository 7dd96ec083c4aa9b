"""Translate iTunes lookup payloads into track metadata."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tracksync.domain.types import TrackMetadata

if TYPE_CHECKING:
    from .schema import ITunesLookupResponse, ITunesResult


def select_track(response: ITunesLookupResponse, catalog_id: str) -> ITunesResult | None:
    """Pick the looked-up track, falling back to the leading result."""

    for result in response.results:
        if result.is_track and str(result.track_id) == catalog_id:
            return result
    if response.results and response.results[0].is_track:
        return response.results[0]
    return None


def translate_track(result: ITunesResult, *, catalog_id: str) -> TrackMetadata | None:
    title = (result.track_name or "").strip()
    artist = (result.artist_name or "").strip()
    if not title or not artist:
        return None
    isrc = (result.isrc or "").strip().upper() or None
    return TrackMetadata(
        catalog_id=catalog_id,
        title=title,
        artist=artist,
        isrc=isrc,
        album=result.collection_name,
    )
