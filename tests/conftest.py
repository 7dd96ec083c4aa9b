from __future__ import annotations

from pathlib import Path

import pytest

from tests.support.fakes import FakeMetadataLookup, FakePlaylistLibrary, FakeTrackSearch
from tests.support.tracks import (
    FUZZY_DECOY_URI,
    ISRC_CATALOG_ID,
    ISRC_CODE,
    ISRC_MATCH_URI,
    SEARCH_CATALOG_ID,
    SEARCH_MATCH_URI,
)
from tracksync.domain.types import TrackMetadata

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def isrc_metadata() -> TrackMetadata:
    return TrackMetadata(
        catalog_id=ISRC_CATALOG_ID,
        title="Plastic Love",
        artist="Mariya Takeuchi",
        isrc=ISRC_CODE,
    )


@pytest.fixture
def plain_metadata() -> TrackMetadata:
    return TrackMetadata(
        catalog_id=SEARCH_CATALOG_ID,
        title="Mayonaka no Door",
        artist="Miki Matsubara",
    )


@pytest.fixture
def metadata_lookup(
    isrc_metadata: TrackMetadata, plain_metadata: TrackMetadata
) -> FakeMetadataLookup:
    return FakeMetadataLookup(
        {
            isrc_metadata.catalog_id: isrc_metadata,
            plain_metadata.catalog_id: plain_metadata,
        }
    )


@pytest.fixture
def track_search(
    isrc_metadata: TrackMetadata, plain_metadata: TrackMetadata
) -> FakeTrackSearch:
    return FakeTrackSearch(
        by_isrc={ISRC_CODE: ISRC_MATCH_URI},
        by_title_artist={
            (isrc_metadata.title, isrc_metadata.artist): [FUZZY_DECOY_URI],
            (plain_metadata.title, plain_metadata.artist): [SEARCH_MATCH_URI],
        },
    )


@pytest.fixture
def playlist_library() -> FakePlaylistLibrary:
    return FakePlaylistLibrary()
