"""Prometheus implementation of the MetricsRenderer protocol.

Wraps a MetricRegistry so the exposition endpoints serve exactly the
registry's own snapshot (HTTP request metrics, uptime, or any future family)
in Prometheus text exposition format.
"""

from promgate.core.metrics_registry import MetricRegistry
from promgate.core.protocols.metrics_renderer import MetricsRenderer


class PrometheusMetricsRenderer(MetricsRenderer):
    """Render all series of a shared MetricRegistry."""

    def __init__(self, registry: MetricRegistry) -> None:
        self._registry = registry

    @property
    def content_type(self) -> str:
        return self._registry.content_type

    def generate(self) -> bytes:
        return self._registry.snapshot().encode("utf-8")
