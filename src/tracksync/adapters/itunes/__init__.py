"""Apple Music metadata adapter backed by the iTunes lookup API."""

from __future__ import annotations

from .client import ITunesClient
from .schema import ITunesLookupResponse, ITunesResult
from .translator import select_track, translate_track

__all__ = [
    "ITunesClient",
    "ITunesLookupResponse",
    "ITunesResult",
    "select_track",
    "translate_track",
]
