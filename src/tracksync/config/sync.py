"""Playlist synchronisation settings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .env import optional_env_var

DEFAULT_TRACKS_FILENAME = "tracks.txt"


@dataclass(frozen=True, slots=True)
class SyncConfig:
    playlist_id: str
    tracks_path: Path = Path(DEFAULT_TRACKS_FILENAME)

    def resolve_tracks_path(self, cwd: Path | None = None) -> Path:
        base = cwd or Path.cwd()
        return (base / self.tracks_path.expanduser()).resolve()


def sync_config_from_values(values: dict[str, str]) -> SyncConfig:
    return SyncConfig(
        playlist_id=values["SPOTIFY_PLAYLIST_ID"],
        tracks_path=Path(optional_env_var("TRACKSYNC_TRACKS_FILE", DEFAULT_TRACKS_FILENAME)),
    )
