"""Pydantic models for the iTunes lookup API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ITunesBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ITunesResult(ITunesBaseModel):
    wrapper_type: str | None = Field(default=None, alias="wrapperType")
    track_id: int | None = Field(default=None, alias="trackId")
    track_name: str | None = Field(default=None, alias="trackName")
    artist_name: str | None = Field(default=None, alias="artistName")
    collection_name: str | None = Field(default=None, alias="collectionName")
    isrc: str | None = None

    @property
    def is_track(self) -> bool:
        return self.wrapper_type in (None, "track")


class ITunesLookupResponse(ITunesBaseModel):
    result_count: int = Field(alias="resultCount")
    results: list[ITunesResult] = Field(default_factory=list["ITunesResult"])
