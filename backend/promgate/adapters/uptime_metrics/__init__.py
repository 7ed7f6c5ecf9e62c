"""Uptime metrics adapters."""

from promgate.adapters.uptime_metrics.fake import FakeUptimeMetrics
from promgate.adapters.uptime_metrics.prometheus import PrometheusUptimeMetrics

__all__ = ["PrometheusUptimeMetrics", "FakeUptimeMetrics"]
