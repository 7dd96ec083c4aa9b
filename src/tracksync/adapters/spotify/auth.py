"""Headless Spotify authentication from a stored refresh token."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

import spotipy
from spotipy.cache_handler import MemoryCacheHandler
from spotipy.oauth2 import SpotifyOAuth

if TYPE_CHECKING:
    from tracksync.config.spotify import SpotifyConfig

log = getLogger(__name__)


def build_spotipy_client(config: SpotifyConfig) -> spotipy.Spotify:
    """Exchange the refresh token for an access token and return a ready client.

    The token only lives in memory; spotipy refreshes it again through the
    cached refresh token if the run outlasts the access token.
    """

    auth_manager = SpotifyOAuth(
        client_id=config.client_id,
        client_secret=config.client_secret,
        redirect_uri=config.redirect_uri,
        scope=" ".join(config.scope),
        cache_handler=MemoryCacheHandler(),
        open_browser=False,
    )
    auth_manager.refresh_access_token(config.refresh_token)
    log.debug("Obtained Spotify access token from refresh token")
    return spotipy.Spotify(auth_manager=auth_manager, requests_timeout=config.requests_timeout)
