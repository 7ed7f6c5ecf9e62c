"""MetricsService protocol for the metrics facade.

Abstracts the facade so the app factory depends on a protocol rather than
the concrete Prometheus-backed class.  Production uses
``PrometheusMetricsService``; tests inject a standalone fake.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from promgate.core.protocols.http_metrics import HttpMetrics
from promgate.core.protocols.metrics_renderer import MetricsRenderer
from promgate.core.protocols.uptime_metrics import UptimeMetrics


@runtime_checkable
class MetricsService(Protocol):
    """Protocol for the metrics facade.

    ``http`` and ``uptime`` are the collection sides, ``renderer`` serves
    the exposition endpoint.
    """

    http: HttpMetrics
    uptime: UptimeMetrics
    renderer: MetricsRenderer

    async def start(
        self,
        *,
        host: str = "0.0.0.0",
        port: Optional[int] = None,
        uptime_interval: float = 1.0,
    ) -> None:
        """Start the uptime ticker and, when ``port`` is set, the sidecar server."""
        ...

    async def stop(self) -> None:
        """Stop all background services."""
        ...
