"""Retry and rate-limit handling for GitHub API requests."""

from __future__ import annotations

import asyncio
import logging
import random
import time
from collections.abc import Mapping

import httpx

_LOG = logging.getLogger(__name__)

_SERVER_ERRORS = frozenset({502, 503, 504})
_MAX_BACKOFF = 4.0
_DEFAULT_RATE_LIMIT_WAIT = 1.0


def rate_limit_wait(headers: Mapping[str, str]) -> float:
    """Seconds to wait before retrying, from ``Retry-After`` or ``X-RateLimit-Reset``."""
    retry_after = headers.get("Retry-After")
    reset = headers.get("X-RateLimit-Reset")
    try:
        if retry_after is not None:
            return max(0.0, float(retry_after))
        if reset is not None:
            return max(0.0, float(reset) - time.time())
    except ValueError:
        pass
    return _DEFAULT_RATE_LIMIT_WAIT


def backoff_delay(attempt: int) -> float:
    return min(_MAX_BACKOFF, float(2**attempt)) + random.uniform(0.0, 0.25)


def is_rate_limited(response: httpx.Response) -> bool:
    """429, or a 403 carrying GitHub's secondary rate limit headers."""
    if response.status_code == 429:
        return True
    if response.status_code == 403:
        return "Retry-After" in response.headers or response.headers.get("X-RateLimit-Remaining") == "0"
    return False


class RateLimitGate:
    """Holds back every request sharing a transport until a rate-limit pause ends."""

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._open = asyncio.Event()
        self._open.set()
        self._resume_at = 0.0

    @property
    def is_open(self) -> bool:
        return self._open.is_set()

    @property
    def resume_at(self) -> float:
        return self._resume_at

    async def wait(self) -> None:
        await self._open.wait()

    async def pause(self, seconds: float) -> None:
        resume_at = time.monotonic() + max(0.0, seconds)
        async with self._lock:
            # An overlapping, longer pause already covers this one.
            if resume_at <= self._resume_at:
                return
            self._resume_at = resume_at
            self._open.clear()

        _LOG.warning("GitHub rate limit reached, pausing requests for %.0f second(s)", seconds)
        await asyncio.sleep(max(0.0, self._resume_at - time.monotonic()))

        async with self._lock:
            if time.monotonic() >= self._resume_at:
                self._open.set()


class RetryingTransport(httpx.AsyncBaseTransport):
    """httpx transport that retries transient GitHub failures.

    Connection errors and 502/503/504 responses are retried with exponential
    backoff. Rate-limited responses (429, secondary-limit 403) pause the shared
    :class:`RateLimitGate` for the advertised time. Once *max_retries* is spent
    the last response is returned, or the last transport error raised.
    GraphQL errors come back as HTTP 200 and pass straight through.
    """

    def __init__(
        self,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        max_retries: int = 3,
    ) -> None:
        self._transport = transport or httpx.AsyncHTTPTransport()
        self._max_retries = max_retries
        self.gate = RateLimitGate()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        attempt = 0
        while True:
            await self.gate.wait()
            retries_left = attempt < self._max_retries

            try:
                response = await self._transport.handle_async_request(request)
            except httpx.TransportError as exc:
                if not retries_left:
                    raise
                _LOG.debug("%s %s failed: %s", request.method, request.url, exc)
                await self._sleep_backoff(attempt)
                attempt += 1
                continue

            if retries_left and is_rate_limited(response):
                wait = rate_limit_wait(response.headers)
                await response.aclose()
                await self._pause_for_rate_limit(wait)
            elif retries_left and response.status_code in _SERVER_ERRORS:
                _LOG.debug("%s %s returned HTTP %d", request.method, request.url, response.status_code)
                await response.aclose()
                await self._sleep_backoff(attempt)
            else:
                return response
            attempt += 1

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def _pause_for_rate_limit(self, seconds: float) -> None:
        await self.gate.pause(seconds)

    @staticmethod
    async def _sleep_backoff(attempt: int) -> None:
        _LOG.warning("Retrying GitHub request (retry %d)", attempt + 1)
        await asyncio.sleep(backoff_delay(attempt))
