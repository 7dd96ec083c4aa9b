"""Domain port definitions for adapters."""

from __future__ import annotations

from .library import PlaylistLibrary, PlaylistUpdateError
from .lookup import TrackMetadataLookup, TrackSearch, TrackSearchError

__all__ = [
    "PlaylistLibrary",
    "PlaylistUpdateError",
    "TrackMetadataLookup",
    "TrackSearch",
    "TrackSearchError",
]
