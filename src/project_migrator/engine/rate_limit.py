"""Background logging of the remaining API budget."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from types import TracebackType

from project_migrator.contracts.exceptions import ProviderError
from project_migrator.contracts.provider import ProjectProvider
from project_migrator.contracts.remote import RateLimit

_LOG = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 30.0


def log_rate_limit(rate_limit: RateLimit) -> None:
    level = logging.WARNING if rate_limit.remaining < rate_limit.limit * 0.1 else logging.INFO
    _LOG.log(
        level,
        "GitHub API rate limit: %d/%d requests remaining (%d used, resets at %s)",
        rate_limit.remaining,
        rate_limit.limit,
        rate_limit.used,
        rate_limit.reset_at or "unknown",
    )


class RateLimitMonitor:
    """Polls the provider's rate limit on a fixed interval while the migration runs.

    Purely informational: it never touches migration state and a failed poll
    only gets logged. Use as an async context manager::

        async with RateLimitMonitor(provider):
            await orchestrator.run(snapshot, mappings)
    """

    def __init__(self, provider: ProjectProvider, *, interval: float = DEFAULT_POLL_INTERVAL) -> None:
        self._provider = provider
        self._interval = interval
        self._task: asyncio.Task[None] | None = None

    async def __aenter__(self) -> RateLimitMonitor:
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.stop()

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Log the budget once and keep polling only if the deployment enforces a limit."""
        try:
            rate_limit = await self._provider.get_rate_limit()
        except ProviderError as exc:
            _LOG.debug("Could not fetch rate limit information: %s", exc)
        else:
            if rate_limit is None:
                _LOG.info("GitHub API rate limiting is disabled on this deployment")
                return
            log_rate_limit(rate_limit)
        self._task = asyncio.create_task(self._poll(), name="rate-limit-monitor")

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None

    async def _poll(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                rate_limit = await self._provider.get_rate_limit()
            except ProviderError as exc:
                _LOG.debug("Could not fetch rate limit information: %s", exc)
                continue
            if rate_limit is not None:
                log_rate_limit(rate_limit)
