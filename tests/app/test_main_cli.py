from __future__ import annotations

import logging

import pytest

from tracksync import main as main_module
from tracksync.config import AppConfig, MissingConfigurationError, SpotifyConfig, SyncConfig
from tracksync.config.itunes import ITunesConfig, default_itunes_resilience

APP_CONFIG = AppConfig(
    spotify=SpotifyConfig(client_id="x", client_secret="y", refresh_token="z"),  # noqa: S106
    sync=SyncConfig(playlist_id="playlist-id"),
    itunes=ITunesConfig(country="JP", resilience=default_itunes_resilience()),
)


def test_main_runs_sync_with_loaded_config(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_sync(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr(main_module, "get_app_config", lambda: APP_CONFIG)
    monkeypatch.setattr(main_module, "sync_playlist_from_file", fake_sync)

    main_module.main([])

    assert captured == {"config": APP_CONFIG}


def test_main_exits_with_configuration_error(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    def missing_config() -> AppConfig:
        raise MissingConfigurationError("Missing configuration for: SPOTIFY_PLAYLIST_ID")

    def fake_sync(**_: object) -> None:
        pytest.fail("sync must not run without configuration")

    monkeypatch.setattr(main_module, "get_app_config", missing_config)
    monkeypatch.setattr(main_module, "sync_playlist_from_file", fake_sync)

    with caplog.at_level(logging.ERROR), pytest.raises(SystemExit) as excinfo:
        main_module.main([])

    assert excinfo.value.code == main_module.EXIT_CONFIGURATION_ERROR
    assert "SPOTIFY_PLAYLIST_ID" in caplog.text


def test_main_exits_non_zero_on_fatal_error(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    def failing_sync(**_: object) -> None:
        raise FileNotFoundError("File not found: tracks.txt")

    monkeypatch.setattr(main_module, "get_app_config", lambda: APP_CONFIG)
    monkeypatch.setattr(main_module, "sync_playlist_from_file", failing_sync)

    with caplog.at_level(logging.ERROR), pytest.raises(SystemExit) as excinfo:
        main_module.main([])

    assert excinfo.value.code == main_module.EXIT_FAILURE
    assert "Fatal error during playlist sync" in caplog.text


def test_main_reports_missing_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SPOTIFY_CLIENT_ID", "SPOTIFY_CLIENT_SECRET", "SPOTIFY_REFRESH_TOKEN"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SPOTIFY_PLAYLIST_ID", "playlist-id")

    with pytest.raises(SystemExit) as excinfo:
        main_module.main([])

    assert excinfo.value.code == main_module.EXIT_CONFIGURATION_ERROR
