"""Ports for resolving references against external catalogs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tracksync.domain.types import CanonicalTrackId, TrackMetadata


class TrackSearchError(RuntimeError):
    """Raised by search adapters when the upstream service fails."""


@runtime_checkable
class TrackMetadataLookup(Protocol):
    """Read-only lookup of descriptive metadata in the secondary catalog.

    Implementations return ``None`` for every kind of failure (transport
    errors, non-success responses, malformed payloads) instead of raising.
    """

    def lookup_metadata(self, catalog_id: str) -> TrackMetadata | None: ...


@runtime_checkable
class TrackSearch(Protocol):
    """Search capabilities of the target streaming service."""

    def search_by_isrc(self, isrc: str) -> CanonicalTrackId | None: ...

    def search_by_title_artist(
        self,
        title: str,
        artist: str,
        *,
        limit: int = 1,
    ) -> Sequence[CanonicalTrackId]: ...


__all__ = ["TrackMetadataLookup", "TrackSearch", "TrackSearchError"]
