"""Set reconciliation between the reference list and the user's library."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Set

    from .types import CanonicalTrackId


def reconcile(
    file_ids: Set[CanonicalTrackId],
    favorite_ids: Set[CanonicalTrackId],
    playlist_ids: Set[CanonicalTrackId],
) -> frozenset[CanonicalTrackId]:
    """Return the ids from the reference list that are neither saved nor in the playlist."""

    return frozenset(file_ids) - favorite_ids - playlist_ids
