"""iTunes lookup API client."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING, Self

import httpx
from pydantic import ValidationError

from tracksync.adapters.http_resilience import ResilientClient

from .schema import ITunesLookupResponse
from .translator import select_track, translate_track

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from tracksync.config.http_resilience import ResilienceConfig
    from tracksync.config.itunes import ITunesConfig
    from tracksync.domain.types import TrackMetadata

log = getLogger(__name__)

LOOKUP_PATH = "/lookup"


class ITunesClient:
    """Fetch Apple Music track metadata through the public iTunes lookup endpoint.

    Used as a context manager, a single event loop and HTTP client serve every
    lookup, so the rate limiter and response cache span the whole run. Outside
    a ``with`` block each lookup opens and closes its own client.
    """

    def __init__(
        self,
        *,
        config: ITunesConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resilience
        self._client_factory = client_factory or ResilientClient
        self._runner: asyncio.Runner | None = None
        self._client: ResilientClient | None = None

    def __enter__(self) -> Self:
        self._runner = asyncio.Runner()
        self._client = self._runner.run(self._open_client())
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        runner, client = self._runner, self._client
        self._runner = None
        self._client = None
        if runner is None:
            return
        try:
            if client is not None:
                runner.run(client.aclose())
        finally:
            runner.close()

    def lookup_metadata(self, catalog_id: str) -> TrackMetadata | None:
        if self._runner is not None and self._client is not None:
            return self._runner.run(self._lookup(self._client, catalog_id))
        return asyncio.run(self._lookup_once(catalog_id))

    async def _open_client(self) -> ResilientClient:
        return self._client_factory(self._resilience)

    async def _lookup_once(self, catalog_id: str) -> TrackMetadata | None:
        async with self._client_factory(self._resilience) as client:
            return await self._lookup(client, catalog_id)

    async def _lookup(self, client: ResilientClient, catalog_id: str) -> TrackMetadata | None:
        params = {
            "id": catalog_id,
            "country": self._config.country,
            "entity": "song",
        }
        try:
            response = await client.get(LOOKUP_PATH, params=params)
        except httpx.HTTPError as exc:
            log.warning("iTunes lookup failed for %s: %s", catalog_id, exc)
            return None

        if not response.is_success:
            log.warning("iTunes lookup for %s returned HTTP %s", catalog_id, response.status_code)
            return None

        try:
            payload = ITunesLookupResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            log.warning("Unexpected iTunes payload for %s: %s", catalog_id, exc)
            return None

        result = select_track(payload, catalog_id)
        metadata = translate_track(result, catalog_id=catalog_id) if result else None
        if metadata is None:
            log.warning("No metadata found for Apple Music track %s", catalog_id)
            return None

        log.info("Fetched metadata for %s: %s", catalog_id, metadata.describe())
        return metadata
