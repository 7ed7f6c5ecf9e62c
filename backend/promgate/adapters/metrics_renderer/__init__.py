"""Metrics renderer adapters."""

from promgate.adapters.metrics_renderer.fake import FakeMetricsRenderer
from promgate.adapters.metrics_renderer.prometheus import PrometheusMetricsRenderer

__all__ = ["PrometheusMetricsRenderer", "FakeMetricsRenderer"]
