"""Application configuration helpers."""

from __future__ import annotations

from .app import REQUIRED_ENV_VARS, AppConfig, get_app_config
from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import NO_RETRY, CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .itunes import ITunesConfig, get_itunes_config
from .logging import configure_logging
from .spotify import DEFAULT_SPOTIFY_SCOPES, SpotifyConfig
from .sync import SyncConfig

__all__ = [
    "DEFAULT_SPOTIFY_SCOPES",
    "NO_RETRY",
    "REQUIRED_ENV_VARS",
    "AppConfig",
    "CacheConfig",
    "ConfigurationError",
    "ITunesConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "SpotifyConfig",
    "SyncConfig",
    "configure_logging",
    "get_app_config",
    "get_itunes_config",
    "optional_env_var",
    "require_env_vars",
]
