"""Spotify configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from .env import optional_env_var

DEFAULT_SPOTIFY_REDIRECT_URI = "http://127.0.0.1:8888/callback"

DEFAULT_SPOTIFY_SCOPES = (
    "user-library-read",
    "playlist-read-private",
    "playlist-modify-private",
    "playlist-modify-public",
)

SPOTIFY_REQUIRED_ENV_VARS = (
    "SPOTIFY_CLIENT_ID",
    "SPOTIFY_CLIENT_SECRET",
    "SPOTIFY_REFRESH_TOKEN",
)


@dataclass(frozen=True)
class SpotifyConfig:
    client_id: str
    client_secret: str
    refresh_token: str
    redirect_uri: str = DEFAULT_SPOTIFY_REDIRECT_URI
    scope: tuple[str, ...] = field(default_factory=lambda: DEFAULT_SPOTIFY_SCOPES)
    requests_timeout: float = 10.0


def spotify_config_from_values(values: dict[str, str]) -> SpotifyConfig:
    return SpotifyConfig(
        client_id=values["SPOTIFY_CLIENT_ID"],
        client_secret=values["SPOTIFY_CLIENT_SECRET"],
        refresh_token=values["SPOTIFY_REFRESH_TOKEN"],
        redirect_uri=optional_env_var("SPOTIFY_REDIRECT_URI", DEFAULT_SPOTIFY_REDIRECT_URI),
    )
