"""Minimal Pydantic models for the Spotify Web API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SpotifyBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class SpotifyTrack(SpotifyBaseModel):
    uri: str
    type: str = "track"
    is_local: bool = False

    @property
    def is_catalog_track(self) -> bool:
        return self.type == "track" and not self.is_local and self.uri.startswith("spotify:track:")


class SavedTrackItem(SpotifyBaseModel):
    track: SpotifyTrack


class PlaylistItem(SpotifyBaseModel):
    # null for tracks removed from the catalog
    track: SpotifyTrack | None = None


class SpotifyPage(SpotifyBaseModel):
    next: str | None = None


class SavedTracksPage(SpotifyPage):
    items: list[SavedTrackItem] = Field(default_factory=list["SavedTrackItem"])


class PlaylistItemsPage(SpotifyPage):
    items: list[PlaylistItem] = Field(default_factory=list["PlaylistItem"])


class TrackSearchPage(SpotifyPage):
    items: list[SpotifyTrack] = Field(default_factory=list["SpotifyTrack"])


class TrackSearchResponse(SpotifyBaseModel):
    tracks: TrackSearchPage = Field(default_factory=TrackSearchPage)
