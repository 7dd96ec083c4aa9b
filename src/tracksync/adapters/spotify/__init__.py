"""Spotify adapter package."""

from __future__ import annotations

from .auth import build_spotipy_client
from .client import SpotifyClient
from .schema import (
    PlaylistItem,
    PlaylistItemsPage,
    SavedTrackItem,
    SavedTracksPage,
    SpotifyTrack,
    TrackSearchResponse,
)

__all__ = [
    "PlaylistItem",
    "PlaylistItemsPage",
    "SavedTrackItem",
    "SavedTracksPage",
    "SpotifyClient",
    "SpotifyTrack",
    "TrackSearchResponse",
    "build_spotipy_client",
]
