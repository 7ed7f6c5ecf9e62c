"""Fake metrics service for testing."""

from __future__ import annotations

from typing import Any, Optional


class FakeMetricsService:
    """In-memory MetricsService stand-in for testing.

    Structurally satisfies the ``MetricsService`` protocol and records
    lifecycle calls instead of spawning background tasks.
    """

    def __init__(self, http: Any, uptime: Any, renderer: Any) -> None:
        self.http = http
        self.uptime = uptime
        self.renderer = renderer
        self.start_calls: list[dict[str, Any]] = []
        self.stop_calls: int = 0

    async def start(
        self,
        *,
        host: str = "0.0.0.0",
        port: Optional[int] = None,
        uptime_interval: float = 1.0,
    ) -> None:
        self.start_calls.append({"host": host, "port": port, "uptime_interval": uptime_interval})

    async def stop(self) -> None:
        self.stop_calls += 1
