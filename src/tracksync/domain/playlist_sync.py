"""Application service synchronising a playlist with a reference list."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from .reconciliation import reconcile
from .references import iter_references

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .ports.library import PlaylistLibrary
    from .resolution import TrackResolver
    from .types import CanonicalTrackId, Unresolved

log = getLogger(__name__)


@dataclass(slots=True)
class SyncPlaylistResult:
    """Outcome of a playlist sync run."""

    detected: int
    resolved: int
    new: int
    added: int
    failures: list[Unresolved] = field(default_factory=list["Unresolved"])
    added_track_ids: frozenset[CanonicalTrackId] = frozenset()


def sync_playlist(
    *,
    lines: Iterable[str],
    playlist_id: str,
    resolver: TrackResolver,
    library: PlaylistLibrary,
) -> SyncPlaylistResult:
    """Resolve ``lines`` and append the tracks missing from favorites and the playlist.

    Reference-level failures are collected in the result. Errors while reading
    the library or appending to the playlist propagate to the caller.
    """

    report = resolver.resolve_all(iter_references(lines))
    file_ids = report.track_ids
    log.info("Detected %s references, resolved %s tracks", report.detected, len(file_ids))

    if not file_ids:
        log.info("No tracks to add")
        return _summarise(
            SyncPlaylistResult(
                detected=report.detected,
                resolved=0,
                new=0,
                added=0,
                failures=report.failures,
            )
        )

    favorite_ids = library.list_favorite_track_ids()
    log.info("Fetched %s saved tracks", len(favorite_ids))
    playlist_ids = library.list_playlist_track_ids(playlist_id)
    log.info("Fetched %s playlist tracks", len(playlist_ids))

    new_ids = reconcile(file_ids, favorite_ids, playlist_ids)
    log.info("Found %s new tracks", len(new_ids))

    if new_ids:
        library.add_tracks(playlist_id, new_ids)

    return _summarise(
        SyncPlaylistResult(
            detected=report.detected,
            resolved=len(file_ids),
            new=len(new_ids),
            added=len(new_ids),
            failures=report.failures,
            added_track_ids=new_ids,
        )
    )


def _summarise(result: SyncPlaylistResult) -> SyncPlaylistResult:
    log.info(
        "Finished playlist sync: detected=%s, resolved=%s, new=%s, added=%s, failed=%s",
        result.detected,
        result.resolved,
        result.new,
        result.added,
        len(result.failures),
    )
    return result
