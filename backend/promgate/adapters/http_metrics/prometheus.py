"""Prometheus implementation of the HttpMetrics protocol.

Declares the four per-request series on a caller-supplied MetricRegistry
so they are served alongside the uptime counter on the same ``/metrics``
endpoint.
"""

from typing import Optional

from promgate.core.metrics_registry import MetricKind, MetricRegistry
from promgate.core.protocols.http_metrics import HttpMetrics
from promgate.core.types import REQUEST_LABEL_NAMES, RequestLabels


class PrometheusHttpMetrics(HttpMetrics):
    """Prometheus-backed HTTP request metrics collection."""

    def __init__(self, registry: Optional[MetricRegistry] = None) -> None:
        self._registry = registry or MetricRegistry()

        self._request_count = self._registry.declare(
            "http_request_count_total",
            MetricKind.COUNTER,
            REQUEST_LABEL_NAMES,
            documentation="Total number of http requests made.",
        )

        self._request_duration = self._registry.declare(
            "http_request_duration_seconds",
            MetricKind.HISTOGRAM,
            REQUEST_LABEL_NAMES,
            documentation="HTTP request latencies in seconds",
        )

        self._request_size = self._registry.declare(
            "http_request_size_bytes",
            MetricKind.SUMMARY,
            REQUEST_LABEL_NAMES,
            documentation="HTTP request size in bytes",
        )

        self._response_size = self._registry.declare(
            "http_response_size_bytes",
            MetricKind.SUMMARY,
            REQUEST_LABEL_NAMES,
            documentation="HTTP response size in bytes",
        )

    # -- HttpMetrics protocol method --

    def observe_request(
        self,
        labels: RequestLabels,
        *,
        duration: float,
        request_size: int,
        response_size: int,
    ) -> None:
        self._registry.increment(self._request_count, labels)
        self._registry.observe(self._request_duration, labels, duration)
        self._registry.observe(self._request_size, labels, request_size)
        self._registry.observe(self._response_size, labels, max(response_size, 0))
