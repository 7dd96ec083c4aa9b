"""Rate-limited, cached httpx client for unauthenticated JSON lookups."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING, Any

import httpx
from aiolimiter import AsyncLimiter
from hishel import AsyncSqliteStorage, FilterPolicy
from hishel import Response as HishelCacheResponse
from hishel._policies import BaseFilter
from hishel.httpx import AsyncCacheClient
from httpx_retries import Retry, RetryTransport

from tracksync.config.http_resilience import (
    CacheConfig,
    RateLimit,
    ResilienceConfig,
    RetryPolicy,
    ShouldCacheHook,
)

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

__all__ = [
    "CacheConfig",
    "RateLimit",
    "ResilienceConfig",
    "ResilientClient",
    "RetryPolicy",
    "build_retry",
]

log = getLogger(__name__)


def build_retry(policy: RetryPolicy) -> Retry:
    return Retry(
        total=policy.total,
        backoff_factor=policy.backoff_factor,
        max_backoff_wait=policy.max_backoff_wait,
        respect_retry_after_header=policy.respect_retry_after_header,
        allowed_methods=tuple(policy.allowed_methods),
        status_forcelist=tuple(policy.status_forcelist),
        retry_on_exceptions=policy.retry_on_exceptions,
        backoff_jitter=policy.backoff_jitter,
    )


class ResilientClient:
    """Async GET client that waits on a shared rate limit and consults a response cache.

    One instance owns one connection pool, one limiter and one cache; keep it
    open for the whole run so the limit and cache span every request.
    """

    def __init__(self, config: ResilienceConfig) -> None:
        self.config = config
        self._limiter = _build_limiter(config.ratelimit)
        self._client = _build_client(config)

    async def __aenter__(self) -> ResilientClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(
        self,
        url: str,
        *,
        params: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        if self._limiter is None:
            return await self._client.get(url, params=params)
        async with self._limiter:
            return await self._client.get(url, params=params)


def _build_limiter(ratelimit: RateLimit | None) -> AsyncLimiter | None:
    if ratelimit is None:
        return None
    return AsyncLimiter(ratelimit.max_calls, ratelimit.per_seconds)


def _build_client(config: ResilienceConfig) -> httpx.AsyncClient:
    options: dict[str, Any] = {"timeout": config.timeout_seconds}
    if config.base_url is not None:
        options["base_url"] = config.base_url
    if config.default_headers:
        options["headers"] = dict(config.default_headers)
    # total=0 leaves the default transport in place
    if config.retry.total > 0:
        options["transport"] = RetryTransport(retry=build_retry(config.retry))

    storage = _build_cache_storage(config.cache)
    if storage is None:
        return httpx.AsyncClient(**options)

    log.debug("HTTP cache enabled for %s", config.name)
    return AsyncCacheClient(**options, storage=storage, policy=_build_cache_policy(config.cache))


def _build_cache_storage(cache: CacheConfig | None) -> AsyncSqliteStorage | None:
    if cache is None or not cache.enabled:
        return None

    match cache.backend:
        case "memory":
            database_path = ":memory:"
        case "sqlite":
            if not cache.sqlite_path:
                raise ValueError("sqlite cache backend requires sqlite_path")
            database_path = cache.sqlite_path

    return AsyncSqliteStorage(
        database_path=database_path,
        default_ttl=cache.default_ttl_seconds,
        refresh_ttl_on_access=cache.refresh_ttl_on_access,
    )


def _build_cache_policy(cache: CacheConfig | None) -> FilterPolicy | None:
    if cache is None or cache.should_cache is None:
        return None
    return FilterPolicy(response_filters=[_JsonPayloadFilter(cache.should_cache)])


class _JsonPayloadFilter(BaseFilter[HishelCacheResponse]):
    """Admit a response to the cache only if its decoded JSON body passes ``predicate``."""

    def __init__(self, predicate: ShouldCacheHook) -> None:
        self._predicate = predicate

    def needs_body(self) -> bool:
        return True

    def apply(self, item: HishelCacheResponse, body: bytes | None) -> bool:  # noqa: ARG002
        if not body:
            return False
        try:
            payload = json.loads(body)
        except ValueError:
            return False
        return bool(self._predicate(payload))
