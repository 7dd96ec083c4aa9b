"""iTunes lookup API configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var
from .http_resilience import NO_RETRY, CacheConfig, RateLimit, ResilienceConfig

ITUNES_BASE_URL = "https://itunes.apple.com"
ITUNES_TIMEOUT_SECONDS = 10.0
DEFAULT_ITUNES_COUNTRY = "JP"


@dataclass(frozen=True, slots=True)
class ITunesConfig:
    """Settings for the unauthenticated iTunes lookup endpoint."""

    country: str
    resilience: ResilienceConfig


def _has_results(payload: object) -> bool:
    return isinstance(payload, dict) and bool(payload.get("resultCount"))


def default_itunes_resilience() -> ResilienceConfig:
    # The public endpoint allows roughly 20 calls per minute.
    return ResilienceConfig(
        name="itunes",
        base_url=ITUNES_BASE_URL,
        timeout_seconds=ITUNES_TIMEOUT_SECONDS,
        retry=NO_RETRY,
        ratelimit=RateLimit(max_calls=20, per_seconds=60.0),
        cache=CacheConfig(backend="memory", should_cache=_has_results),
        default_headers={"Accept": "application/json"},
    )


def get_itunes_config(*, resilience: ResilienceConfig | None = None) -> ITunesConfig:
    return ITunesConfig(
        country=optional_env_var("ITUNES_COUNTRY", DEFAULT_ITUNES_COUNTRY).upper(),
        resilience=resilience or default_itunes_resilience(),
    )
