"""HTTP readiness polling."""

from __future__ import annotations

import logging
import time
from typing import Callable

import httpx
from pydantic import BaseModel, ConfigDict, Field

from wpci.errors import ServerNotReadyError

log = logging.getLogger(__name__)


class RetryPolicy(BaseModel):
    """Fixed-interval polling bounded by an overall deadline (seconds)."""

    model_config = ConfigDict(frozen=True)

    timeout: float = Field(ge=0)
    interval: float = Field(default=0.5, gt=0)

    @classmethod
    def from_millis(cls, timeout_ms: int, interval_ms: int = 500) -> RetryPolicy:
        return cls(timeout=timeout_ms / 1000, interval=interval_ms / 1000)


def probe(client: httpx.Client, url: str) -> int | None:
    """Return the HTTP status of ``url`` or None if nothing answered."""
    try:
        return client.get(url).status_code
    except httpx.TransportError as exc:
        log.debug("probe %s: %s", url, exc)
        return None


def wait_for_http_server(
    url: str,
    policy: RetryPolicy,
    *,
    client: httpx.Client | None = None,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Poll ``url`` until any HTTP status comes back; return that status.

    Raises ServerNotReadyError once ``policy.timeout`` has elapsed since the
    first attempt.
    """
    own_client = client is None
    if client is None:
        client = httpx.Client(timeout=max(policy.interval, 1.0), follow_redirects=False)
    start = clock()
    attempts = 0
    try:
        while True:
            attempts += 1
            status = probe(client, url)
            if status is not None:
                log.info("Server at %s answered with HTTP %d after %d attempt(s)", url, status, attempts)
                return status
            if clock() - start >= policy.timeout:
                raise ServerNotReadyError(
                    f"Timeout waiting for server at {url} after {attempts} attempt(s)"
                )
            sleep(policy.interval)
    finally:
        if own_client:
            client.close()
