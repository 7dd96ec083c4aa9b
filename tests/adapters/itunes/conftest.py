"""Shared fixtures for iTunes adapter tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tracksync.adapters.itunes import ITunesLookupResponse
from tracksync.config.itunes import ITunesConfig, default_itunes_resilience

ITunesPayload = dict[str, object]
FIXTURES = Path(__file__).resolve().parents[2] / "data" / "itunes"


def _load_fixture(name: str) -> ITunesPayload:
    return json.loads((FIXTURES / name).read_text(encoding="utf-8"))


@pytest.fixture
def song_payload() -> ITunesPayload:
    return _load_fixture("lookup_song.json")


@pytest.fixture
def album_payload() -> ITunesPayload:
    return _load_fixture("lookup_album_with_songs.json")


@pytest.fixture
def empty_payload() -> ITunesPayload:
    return _load_fixture("lookup_empty.json")


@pytest.fixture
def song_response(song_payload: ITunesPayload) -> ITunesLookupResponse:
    return ITunesLookupResponse.model_validate(song_payload)


@pytest.fixture
def album_response(album_payload: ITunesPayload) -> ITunesLookupResponse:
    return ITunesLookupResponse.model_validate(album_payload)


@pytest.fixture
def itunes_config() -> ITunesConfig:
    return ITunesConfig(country="JP", resilience=default_itunes_resilience())
