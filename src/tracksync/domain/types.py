"""Core value types for track reference resolution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

type CanonicalTrackId = str  # spotify:track:<22-char base62 id>


class ReferenceKind(StrEnum):
    NATIVE = "native"
    SECONDARY = "secondary"
    UNRECOGNIZED = "unrecognized"


class FailureReason(StrEnum):
    UNPARSEABLE = "unparseable reference"
    METADATA_UNAVAILABLE = "metadata unavailable"
    NO_MATCH = "no match"


class MatchTier(StrEnum):
    NATIVE = "native"
    ISRC = "isrc"
    SEARCH = "search"


@dataclass(frozen=True, slots=True)
class Reference:
    """A single parsed line of the reference list.

    ``catalog_id`` is the Spotify track id for native references and the
    Apple Music track id for secondary ones. Unrecognized references never
    carry one.
    """

    kind: ReferenceKind
    original_text: str
    catalog_id: str | None = None

    def __post_init__(self) -> None:
        if self.kind is ReferenceKind.UNRECOGNIZED:
            if self.catalog_id is not None:
                raise ValueError(
                    f"Unrecognized reference cannot carry a catalog id: {self.original_text!r}"
                )
        elif not self.catalog_id:
            raise ValueError(
                f"{self.kind} reference requires a catalog id: {self.original_text!r}"
            )

    @classmethod
    def native(cls, original_text: str, track_id: str) -> Reference:
        return cls(ReferenceKind.NATIVE, original_text, track_id)

    @classmethod
    def secondary(cls, original_text: str, catalog_id: str) -> Reference:
        return cls(ReferenceKind.SECONDARY, original_text, catalog_id)

    @classmethod
    def unrecognized(cls, original_text: str) -> Reference:
        return cls(ReferenceKind.UNRECOGNIZED, original_text)


@dataclass(frozen=True, slots=True)
class TrackMetadata:
    """Descriptive data fetched for a secondary reference."""

    catalog_id: str
    title: str
    artist: str
    isrc: str | None = None
    album: str | None = None

    def describe(self) -> str:
        return f"{self.title} - {self.artist}"


@dataclass(frozen=True, slots=True)
class Resolved:
    reference: Reference
    track_id: CanonicalTrackId
    tier: MatchTier


@dataclass(frozen=True, slots=True)
class Unresolved:
    reference: Reference
    reason: FailureReason


type ResolutionOutcome = Resolved | Unresolved
