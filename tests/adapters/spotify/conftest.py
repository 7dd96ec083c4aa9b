"""Shared fixtures for Spotify adapter tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, cast

import pytest

from tests.support.spotify_api import FakeSpotipyClient, SpotifyPayload
from tracksync.adapters.spotify import SpotifyClient
from tracksync.config.spotify import SpotifyConfig

if TYPE_CHECKING:
    from collections.abc import Callable

    import spotipy

FIXTURES = Path(__file__).resolve().parents[2] / "data" / "spotify"


def _load_fixture(name: str) -> SpotifyPayload:
    return json.loads((FIXTURES / name).read_text(encoding="utf-8"))


@pytest.fixture
def saved_pages() -> dict[int, SpotifyPayload]:
    return {
        0: _load_fixture("saved_tracks_page1.json"),
        2: _load_fixture("saved_tracks_page2.json"),
    }


@pytest.fixture
def playlist_page() -> SpotifyPayload:
    return _load_fixture("playlist_items.json")


@pytest.fixture
def search_payload() -> SpotifyPayload:
    return _load_fixture("search_tracks.json")


@pytest.fixture
def fake_spotipy(
    saved_pages: dict[int, SpotifyPayload],
    playlist_page: SpotifyPayload,
    search_payload: SpotifyPayload,
) -> FakeSpotipyClient:
    return FakeSpotipyClient(
        saved_pages=saved_pages,
        playlist_pages={0: playlist_page},
        search_payload=search_payload,
    )


@pytest.fixture
def spotify_config() -> SpotifyConfig:
    return SpotifyConfig(
        client_id="x",
        client_secret="y",  # noqa: S106
        refresh_token="z",  # noqa: S106
        redirect_uri="http://localhost",
    )


type SpotifyClientFactory = Callable[[FakeSpotipyClient], SpotifyClient]


@pytest.fixture
def spotify_client_factory(spotify_config: SpotifyConfig) -> SpotifyClientFactory:
    def factory(fake: FakeSpotipyClient) -> SpotifyClient:
        return SpotifyClient(config=spotify_config, client=cast("spotipy.Spotify", fake))

    return factory


@pytest.fixture
def spotify_client(
    spotify_client_factory: SpotifyClientFactory, fake_spotipy: FakeSpotipyClient
) -> SpotifyClient:
    return spotify_client_factory(fake_spotipy)
