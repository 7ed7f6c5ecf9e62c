"""MetricsRenderer protocol for the exposition side of the registry.

Collection (HttpMetrics, UptimeMetrics) only ever writes; rendering only
ever reads.  Keeping the two apart lets the in-app route and the sidecar
server share one renderer without knowing which series exist.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsRenderer(Protocol):
    """Serializes the current registry state for a scrape."""

    @property
    def content_type(self) -> str:
        """Value of the ``Content-Type`` header sent with the payload."""
        ...

    def generate(self) -> bytes:
        """Return every series in text exposition format."""
        ...
