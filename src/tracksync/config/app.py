"""Aggregate configuration for a playlist sync run."""

from __future__ import annotations

from dataclasses import dataclass

from .env import require_env_vars
from .itunes import ITunesConfig, get_itunes_config
from .spotify import SPOTIFY_REQUIRED_ENV_VARS, SpotifyConfig, spotify_config_from_values
from .sync import SyncConfig, sync_config_from_values

REQUIRED_ENV_VARS = (*SPOTIFY_REQUIRED_ENV_VARS, "SPOTIFY_PLAYLIST_ID")


@dataclass(frozen=True, slots=True)
class AppConfig:
    spotify: SpotifyConfig
    sync: SyncConfig
    itunes: ITunesConfig


def get_app_config() -> AppConfig:
    """Load every setting at once so all missing variables are reported together."""

    values = require_env_vars(REQUIRED_ENV_VARS)
    return AppConfig(
        spotify=spotify_config_from_values(values),
        sync=sync_config_from_values(values),
        itunes=get_itunes_config(),
    )
