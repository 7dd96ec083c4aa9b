"""Classify raw reference-list lines into typed references."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final
from urllib.parse import parse_qs, urlsplit

from .types import CanonicalTrackId, Reference

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

SPOTIFY_WEB_HOST: Final[str] = "open.spotify.com"
SPOTIFY_TRACK_URI_PREFIX: Final[str] = "spotify:track:"
SPOTIFY_TRACK_ID_LENGTH: Final[int] = 22

APPLE_MUSIC_HOST: Final[str] = "music.apple.com"
APPLE_MUSIC_TRACK_PARAM: Final[str] = "i"
# /<country>/album/<slug>/<id>
APPLE_MUSIC_MIN_TRACK_SEGMENTS: Final[int] = 4


def to_track_uri(track_id: str) -> CanonicalTrackId:
    return f"{SPOTIFY_TRACK_URI_PREFIX}{track_id}"


def parse_reference(line: str) -> Reference:
    """Parse one line of the reference list. Never raises."""

    text = line.strip()
    if not text:
        return Reference.unrecognized(line)

    if text.startswith(SPOTIFY_TRACK_URI_PREFIX):
        track_id = text.removeprefix(SPOTIFY_TRACK_URI_PREFIX)
        if not track_id:
            return Reference.unrecognized(text)
        return Reference.native(text, track_id)

    try:
        parts = urlsplit(text)
    except ValueError:
        return Reference.unrecognized(text)
    if not parts.scheme or not parts.hostname:
        return Reference.unrecognized(text)

    segments = [segment for segment in parts.path.split("/") if segment]

    if parts.hostname == SPOTIFY_WEB_HOST:
        return _parse_spotify_url(text, segments)
    if parts.hostname == APPLE_MUSIC_HOST:
        return _parse_apple_music_url(text, segments, parts.query)
    return Reference.unrecognized(text)


def iter_references(lines: Iterable[str]) -> Iterator[Reference]:
    """Parse every non-blank line, preserving input order."""

    for line in lines:
        if not line.strip():
            continue
        yield parse_reference(line)


def _parse_spotify_url(text: str, segments: list[str]) -> Reference:
    if len(segments) != 2 or segments[0] != "track":
        return Reference.unrecognized(text)
    track_id = segments[1]
    if len(track_id) != SPOTIFY_TRACK_ID_LENGTH:
        return Reference.unrecognized(text)
    return Reference.native(text, track_id)


def _parse_apple_music_url(text: str, segments: list[str], query: str) -> Reference:
    # ``?i=`` names the track inside an album page and wins over the path.
    track_ids = parse_qs(query).get(APPLE_MUSIC_TRACK_PARAM)
    if track_ids and track_ids[0]:
        return Reference.secondary(text, track_ids[0])

    if len(segments) >= APPLE_MUSIC_MIN_TRACK_SEGMENTS:
        last_segment = segments[-1]
        if last_segment.isascii() and last_segment.isdigit():
            return Reference.secondary(text, last_segment)

    return Reference.unrecognized(text)
