"""Track reference resolution and playlist reconciliation."""

from __future__ import annotations

from .playlist_sync import SyncPlaylistResult, sync_playlist
from .reconciliation import reconcile
from .references import iter_references, parse_reference, to_track_uri
from .resolution import ResolutionReport, TrackResolver
from .types import (
    CanonicalTrackId,
    FailureReason,
    MatchTier,
    Reference,
    ReferenceKind,
    ResolutionOutcome,
    Resolved,
    TrackMetadata,
    Unresolved,
)

__all__ = [
    "CanonicalTrackId",
    "FailureReason",
    "MatchTier",
    "Reference",
    "ReferenceKind",
    "ResolutionOutcome",
    "ResolutionReport",
    "Resolved",
    "SyncPlaylistResult",
    "TrackMetadata",
    "TrackResolver",
    "Unresolved",
    "iter_references",
    "parse_reference",
    "reconcile",
    "sync_playlist",
    "to_track_uri",
]
