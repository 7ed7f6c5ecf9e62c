"""Fake UptimeMetrics for testing."""


class FakeUptimeMetrics:
    """In-memory spy implementing the UptimeMetrics protocol."""

    def __init__(self) -> None:
        self.ticks: int = 0

    def inc_uptime(self) -> None:
        self.ticks += 1

    # -- test helpers --

    def clear(self) -> None:
        self.ticks = 0
