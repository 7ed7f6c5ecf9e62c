"""Fake HttpMetrics for testing.

Records all calls in memory so tests can assert on metrics behaviour
without reaching into prometheus-client internals.
"""

from dataclasses import dataclass

from promgate.core.types import RequestLabels


@dataclass
class RequestRecord:
    """Single observed exchange."""

    labels: RequestLabels
    duration: float
    request_size: int
    response_size: int


class FakeHttpMetrics:
    """In-memory spy implementing the HttpMetrics protocol.

    Usage:
        fake = FakeHttpMetrics()
        # … inject into middleware …
        assert len(fake.requests) == 1
        assert fake.requests[0].labels.status == "200"
    """

    def __init__(self) -> None:
        self.requests: list[RequestRecord] = []

    def observe_request(
        self,
        labels: RequestLabels,
        *,
        duration: float,
        request_size: int,
        response_size: int,
    ) -> None:
        self.requests.append(RequestRecord(labels, duration, request_size, response_size))

    # -- test helpers --

    def count(self, labels: RequestLabels) -> int:
        """Number of recorded exchanges carrying exactly ``labels``."""
        return sum(1 for r in self.requests if r.labels == labels)

    def clear(self) -> None:
        """Reset all recorded state."""
        self.requests.clear()
