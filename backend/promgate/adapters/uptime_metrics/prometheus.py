"""Prometheus implementation of the UptimeMetrics protocol."""

from typing import Optional

from promgate.core.metrics_registry import MetricKind, MetricRegistry
from promgate.core.protocols.uptime_metrics import UptimeMetrics


class PrometheusUptimeMetrics(UptimeMetrics):
    """Single no-label counter advanced once per ticker interval."""

    def __init__(self, registry: Optional[MetricRegistry] = None) -> None:
        self._registry = registry or MetricRegistry()
        self._uptime = self._registry.declare(
            "uptime",
            MetricKind.COUNTER,
            documentation="HTTP service uptime",
        )

    # -- UptimeMetrics protocol method --

    def inc_uptime(self) -> None:
        self._registry.increment(self._uptime)
