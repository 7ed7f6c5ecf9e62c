"""Fake MetricsRenderer for testing.

Returns a fixed payload and counts scrapes, so exposition endpoints can be
tested without a populated registry.
"""

from promgate.core.protocols.metrics_renderer import MetricsRenderer

FAKE_PAYLOAD = b"# fake metrics\n"


class FakeMetricsRenderer(MetricsRenderer):
    """Scrape-counting stand-in for PrometheusMetricsRenderer."""

    def __init__(self) -> None:
        self.generate_calls: int = 0

    @property
    def content_type(self) -> str:
        return "text/plain"

    def generate(self) -> bytes:
        self.generate_calls += 1
        return FAKE_PAYLOAD

    # -- test helpers --

    def clear(self) -> None:
        self.generate_calls = 0
