"""Resolve parsed references to Spotify track URIs."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from .ports.lookup import TrackSearchError
from .references import to_track_uri
from .types import (
    FailureReason,
    MatchTier,
    Reference,
    ReferenceKind,
    Resolved,
    Unresolved,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .ports.lookup import TrackMetadataLookup, TrackSearch
    from .types import CanonicalTrackId, ResolutionOutcome, TrackMetadata

log = getLogger(__name__)

DEFAULT_SEARCH_LIMIT = 1


@dataclass(slots=True)
class ResolutionReport:
    """Outcomes of resolving a whole reference list, in input order."""

    outcomes: list[ResolutionOutcome] = field(default_factory=list["ResolutionOutcome"])

    @property
    def detected(self) -> int:
        return len(self.outcomes)

    @property
    def resolved(self) -> list[Resolved]:
        return [outcome for outcome in self.outcomes if isinstance(outcome, Resolved)]

    @property
    def failures(self) -> list[Unresolved]:
        return [outcome for outcome in self.outcomes if isinstance(outcome, Unresolved)]

    @property
    def track_ids(self) -> frozenset[CanonicalTrackId]:
        return frozenset(outcome.track_id for outcome in self.resolved)


class TrackResolver:
    """Tiered resolution: native passthrough, ISRC exact match, title/artist search."""

    def __init__(
        self,
        *,
        metadata_lookup: TrackMetadataLookup,
        search: TrackSearch,
        search_limit: int = DEFAULT_SEARCH_LIMIT,
    ) -> None:
        self._metadata_lookup = metadata_lookup
        self._search = search
        self._search_limit = search_limit

    def resolve(self, reference: Reference) -> ResolutionOutcome:
        match reference.kind:
            case ReferenceKind.NATIVE:
                return Resolved(reference, _native_track_uri(reference), MatchTier.NATIVE)
            case ReferenceKind.SECONDARY:
                return self._resolve_secondary(reference)
            case ReferenceKind.UNRECOGNIZED:
                return Unresolved(reference, FailureReason.UNPARSEABLE)

    def resolve_all(self, references: Iterable[Reference]) -> ResolutionReport:
        """Resolve references one at a time; a failed reference never stops the batch."""

        report = ResolutionReport()
        for reference in references:
            outcome = self.resolve(reference)
            _log_outcome(outcome)
            report.outcomes.append(outcome)
        return report

    def _resolve_secondary(self, reference: Reference) -> ResolutionOutcome:
        catalog_id = reference.catalog_id
        if catalog_id is None:
            return Unresolved(reference, FailureReason.UNPARSEABLE)

        try:
            metadata = self._metadata_lookup.lookup_metadata(catalog_id)
        except Exception:  # noqa: BLE001
            log.warning("Metadata lookup for %s raised", catalog_id, exc_info=True)
            return Unresolved(reference, FailureReason.METADATA_UNAVAILABLE)

        if metadata is None:
            return Unresolved(reference, FailureReason.METADATA_UNAVAILABLE)

        try:
            match = self._match(metadata)
        except TrackSearchError as exc:
            log.warning("Spotify search failed for %s: %s", metadata.describe(), exc)
            return Unresolved(reference, FailureReason.NO_MATCH)

        if match is None:
            return Unresolved(reference, FailureReason.NO_MATCH)
        track_id, tier = match
        return Resolved(reference, track_id, tier)

    def _match(self, metadata: TrackMetadata) -> tuple[CanonicalTrackId, MatchTier] | None:
        if metadata.isrc:
            log.debug("Searching by ISRC %s", metadata.isrc)
            track_id = self._search.search_by_isrc(metadata.isrc)
            if track_id is not None:
                return track_id, MatchTier.ISRC
            log.info("No ISRC match for %s, falling back to search", metadata.describe())

        candidates = self._search.search_by_title_artist(
            metadata.title,
            metadata.artist,
            limit=self._search_limit,
        )
        # First result wins; no similarity check against title/artist.
        if candidates:
            return candidates[0], MatchTier.SEARCH
        return None


def _native_track_uri(reference: Reference) -> CanonicalTrackId:
    return to_track_uri(reference.catalog_id or "")


def _log_outcome(outcome: ResolutionOutcome) -> None:
    if isinstance(outcome, Resolved):
        log.info(
            "Resolved %s -> %s (%s)",
            outcome.reference.original_text,
            outcome.track_id,
            outcome.tier,
        )
    else:
        log.warning(
            "Skipping %s: %s",
            outcome.reference.original_text,
            outcome.reason,
        )
