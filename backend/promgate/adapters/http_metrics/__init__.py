"""HTTP metrics adapters."""

from promgate.adapters.http_metrics.fake import FakeHttpMetrics
from promgate.adapters.http_metrics.prometheus import PrometheusHttpMetrics

__all__ = ["PrometheusHttpMetrics", "FakeHttpMetrics"]
