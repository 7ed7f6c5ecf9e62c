"""Background task advancing the uptime counter.

Runs on the host's event loop next to request handling.  ``sleep`` is
injectable so tests can drive the loop without waiting real seconds.
"""

import asyncio
import contextlib
from collections.abc import Awaitable, Callable
from typing import Optional

from promgate.core.logging import logger
from promgate.core.protocols.uptime_metrics import UptimeMetrics

DEFAULT_INTERVAL: float = 1.0


class UptimeTicker:
    """Increments the uptime counter once per ``interval`` seconds."""

    def __init__(
        self,
        metrics: UptimeMetrics,
        interval: float = DEFAULT_INTERVAL,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._metrics = metrics
        self._interval = interval
        self._sleep = sleep
        self._task: Optional[asyncio.Task[None]] = None
        self._logger = logger.with_context(operation="uptime_ticker", interval=interval)

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Spawn the ticking task.  Calling it twice keeps the first task."""
        if self._task is not None:
            return
        self._task = asyncio.create_task(self._run(), name="uptime-ticker")
        self._logger.info("Uptime ticker started")

    async def stop(self) -> None:
        """Cancel the ticking task.  Safe to call when not started."""
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        self._logger.info("Uptime ticker stopped")

    def tick(self) -> None:
        self._metrics.inc_uptime()

    async def _run(self) -> None:
        while True:
            await self._sleep(self._interval)
            try:
                self.tick()
            except Exception as e:
                self._logger.warning(f"Failed to record uptime tick: {e}")
