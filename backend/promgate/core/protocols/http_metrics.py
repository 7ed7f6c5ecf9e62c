"""HttpMetrics protocol for HTTP request/response instrumentation.

Abstracts metric collection so the middleware depends on a protocol rather
than a concrete library.  Production uses Prometheus; tests inject a fake
that records calls in memory.
"""

from typing import Protocol, runtime_checkable

from promgate.core.types import RequestLabels


@runtime_checkable
class HttpMetrics(Protocol):
    """Protocol for per-request metrics collection."""

    def observe_request(
        self,
        labels: RequestLabels,
        *,
        duration: float,
        request_size: int,
        response_size: int,
    ) -> None:
        """Record one completed exchange.

        Increments the request count and observes latency, request size and
        response size, all under the same label values.

        Args:
            labels: Status, endpoint and method of the exchange.
            duration: Wall-clock time spent downstream, in seconds.
            request_size: Estimated request size in bytes.
            response_size: Response body size in bytes, never negative.
        """
        ...
