from __future__ import annotations

import pytest

from tests.support.fakes import FakeMetadataLookup, FakePlaylistLibrary, FakeTrackSearch
from tests.support.tracks import (
    ISRC_APPLE_URL,
    ISRC_MATCH_URI,
    NATIVE_URI,
    NATIVE_URL,
    SEARCH_APPLE_URL,
    SEARCH_MATCH_URI,
    UNKNOWN_APPLE_URL,
)
from tracksync.domain.playlist_sync import sync_playlist
from tracksync.domain.ports import PlaylistUpdateError
from tracksync.domain.resolution import TrackResolver
from tracksync.domain.types import FailureReason

PLAYLIST_ID = "37i9dQZF1DXcBWIGoYBM5M"


@pytest.fixture
def resolver(
    metadata_lookup: FakeMetadataLookup,
    track_search: FakeTrackSearch,
) -> TrackResolver:
    return TrackResolver(metadata_lookup=metadata_lookup, search=track_search)


def test_sync_adds_only_tracks_missing_from_favorites_and_playlist(
    resolver: TrackResolver,
) -> None:
    library = FakePlaylistLibrary(favorites={ISRC_MATCH_URI})

    result = sync_playlist(
        lines=[NATIVE_URL, ISRC_APPLE_URL, ""],
        playlist_id=PLAYLIST_ID,
        resolver=resolver,
        library=library,
    )

    assert library.add_calls == [(PLAYLIST_ID, frozenset({NATIVE_URI}))]
    assert result.detected == 2
    assert result.resolved == 2
    assert result.new == 1
    assert result.added == 1
    assert result.added_track_ids == frozenset({NATIVE_URI})
    assert result.failures == []


def test_sync_deduplicates_repeated_references(resolver: TrackResolver) -> None:
    library = FakePlaylistLibrary()

    result = sync_playlist(
        lines=[NATIVE_URL, NATIVE_URI, NATIVE_URL],
        playlist_id=PLAYLIST_ID,
        resolver=resolver,
        library=library,
    )

    assert result.detected == 3
    assert result.resolved == 1
    assert library.add_calls == [(PLAYLIST_ID, frozenset({NATIVE_URI}))]


def test_sync_skips_tracks_already_in_playlist(resolver: TrackResolver) -> None:
    library = FakePlaylistLibrary(playlist={NATIVE_URI, SEARCH_MATCH_URI})

    result = sync_playlist(
        lines=[NATIVE_URL, SEARCH_APPLE_URL],
        playlist_id=PLAYLIST_ID,
        resolver=resolver,
        library=library,
    )

    assert result.new == 0
    assert result.added == 0
    assert library.add_calls == []
    assert library.read_calls == 2


def test_sync_second_run_is_a_no_op(resolver: TrackResolver) -> None:
    library = FakePlaylistLibrary()
    lines = [NATIVE_URL, ISRC_APPLE_URL, SEARCH_APPLE_URL]

    first = sync_playlist(lines=lines, playlist_id=PLAYLIST_ID, resolver=resolver, library=library)
    second = sync_playlist(
        lines=lines, playlist_id=PLAYLIST_ID, resolver=resolver, library=library
    )

    assert first.added == 3
    assert second.added == 0
    assert len(library.add_calls) == 1


def test_sync_without_resolved_tracks_leaves_library_untouched(
    resolver: TrackResolver,
) -> None:
    library = FakePlaylistLibrary()

    result = sync_playlist(
        lines=["not a link", UNKNOWN_APPLE_URL, "   "],
        playlist_id=PLAYLIST_ID,
        resolver=resolver,
        library=library,
    )

    assert library.read_calls == 0
    assert library.add_calls == []
    assert result.detected == 2
    assert result.resolved == 0
    assert [failure.reason for failure in result.failures] == [
        FailureReason.UNPARSEABLE,
        FailureReason.METADATA_UNAVAILABLE,
    ]


def test_sync_propagates_playlist_update_errors(resolver: TrackResolver) -> None:
    library = FakePlaylistLibrary(fail_on_add=True)

    with pytest.raises(PlaylistUpdateError):
        sync_playlist(
            lines=[NATIVE_URL],
            playlist_id=PLAYLIST_ID,
            resolver=resolver,
            library=library,
        )

    assert library.add_calls == [(PLAYLIST_ID, frozenset({NATIVE_URI}))]
