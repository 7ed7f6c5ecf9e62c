"""Prometheus-backed MetricsService implementation.

Composes the metrics adapters, the uptime ticker and the optional sidecar
HTTP server behind a single lifecycle API so callers (main.py, tests) only
deal with one object instead of three adapters + two background services.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from promgate.adapters.http_metrics import PrometheusHttpMetrics
from promgate.adapters.metrics_renderer import PrometheusMetricsRenderer
from promgate.adapters.uptime_metrics import PrometheusUptimeMetrics
from promgate.core.config import Settings
from promgate.core.logging import logger
from promgate.core.metrics_registry import MetricRegistry
from promgate.core.protocols.http_metrics import HttpMetrics
from promgate.core.protocols.metrics_renderer import MetricsRenderer
from promgate.core.protocols.uptime_metrics import UptimeMetrics
from promgate.core.uptime_ticker import DEFAULT_INTERVAL, UptimeTicker

if TYPE_CHECKING:
    from promgate.api.metrics import MetricsServer


class PrometheusMetricsService:
    """Prometheus-backed facade that owns all metrics adapters and background services.

    Satisfies the ``MetricsService`` protocol structurally.
    """

    http: HttpMetrics
    uptime: UptimeMetrics
    renderer: MetricsRenderer

    def __init__(
        self,
        http: HttpMetrics,
        uptime: UptimeMetrics,
        renderer: MetricsRenderer,
    ) -> None:
        self.http = http
        self.uptime = uptime
        self.renderer = renderer
        self._server: Optional[MetricsServer] = None
        self._ticker: Optional[UptimeTicker] = None
        self._logger = logger.with_context(operation="metrics_service")

    async def start(
        self,
        *,
        host: str = "0.0.0.0",
        port: Optional[int] = None,
        uptime_interval: float = DEFAULT_INTERVAL,
    ) -> None:
        """Start the uptime ticker, then the sidecar server when ``port`` is set."""
        self._ticker = UptimeTicker(self.uptime, interval=uptime_interval)
        await self._ticker.start()
        if port is not None:
            from promgate.api.metrics import MetricsServer

            self._server = MetricsServer(self.renderer, port, host)
            await self._server.start()
        self._logger.info("Metrics service started")

    async def stop(self) -> None:
        """Stop sidecar then ticker (reverse start order)."""
        try:
            if self._server:
                await self._server.stop()
                self._server = None
        finally:
            if self._ticker:
                await self._ticker.stop()
                self._ticker = None
        self._logger.info("Metrics service stopped")


def build_metrics_service(settings: Settings) -> PrometheusMetricsService:
    """Wire a metrics service on a fresh registry.

    Raises:
        MetricDeclarationError: If two series collide on the registry.
    """
    registry = MetricRegistry(namespace=settings.METRICS_NAMESPACE)
    return PrometheusMetricsService(
        http=PrometheusHttpMetrics(registry),
        uptime=PrometheusUptimeMetrics(registry),
        renderer=PrometheusMetricsRenderer(registry),
    )
