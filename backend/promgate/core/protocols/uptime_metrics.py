"""UptimeMetrics protocol for the process uptime counter."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class UptimeMetrics(Protocol):
    """Protocol for the no-label uptime counter."""

    def inc_uptime(self) -> None:
        """Add one interval to the uptime counter."""
        ...
