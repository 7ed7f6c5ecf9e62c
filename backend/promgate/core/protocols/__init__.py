"""Core protocols for dependency injection."""

from promgate.core.protocols.endpoint_mapper import EndpointMapper
from promgate.core.protocols.http_metrics import HttpMetrics
from promgate.core.protocols.metrics_renderer import MetricsRenderer
from promgate.core.protocols.metrics_service import MetricsService
from promgate.core.protocols.uptime_metrics import UptimeMetrics

__all__ = [
    "EndpointMapper",
    "HttpMetrics",
    "MetricsRenderer",
    "MetricsService",
    "UptimeMetrics",
]
