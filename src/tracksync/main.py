#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from tracksync.app import sync_playlist_from_file
from tracksync.config import ConfigurationError, configure_logging, get_app_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_CONFIGURATION_ERROR = 2


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Add the tracks listed in tracks.txt (Spotify and Apple Music links) to a "
            "Spotify playlist, skipping saved tracks and tracks already in the playlist. "
            "Configured through SPOTIFY_CLIENT_ID, SPOTIFY_CLIENT_SECRET, "
            "SPOTIFY_REFRESH_TOKEN and SPOTIFY_PLAYLIST_ID."
        )
    )
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    _parse_args(argv if argv is not None else sys.argv[1:])

    try:
        config = get_app_config()
    except ConfigurationError as exc:
        log.error("Configuration error: %s", exc)  # noqa: TRY400
        sys.exit(EXIT_CONFIGURATION_ERROR)

    try:
        sync_playlist_from_file(config=config)
    except Exception:
        log.exception("Fatal error during playlist sync")
        sys.exit(EXIT_FAILURE)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
