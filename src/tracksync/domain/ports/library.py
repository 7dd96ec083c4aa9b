"""Ports for reading and mutating the user's library on the target service."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Set

    from tracksync.domain.types import CanonicalTrackId


class PlaylistUpdateError(RuntimeError):
    """Raised when appending tracks to the target playlist fails."""


@runtime_checkable
class PlaylistLibrary(Protocol):
    """Saved tracks and playlist contents of the authenticated user."""

    def list_favorite_track_ids(self) -> set[CanonicalTrackId]: ...

    def list_playlist_track_ids(self, playlist_id: str) -> set[CanonicalTrackId]: ...

    def add_tracks(self, playlist_id: str, track_ids: Set[CanonicalTrackId]) -> None:
        """Append ``track_ids`` to the playlist as one logical operation."""
        ...


__all__ = ["PlaylistLibrary", "PlaylistUpdateError"]
