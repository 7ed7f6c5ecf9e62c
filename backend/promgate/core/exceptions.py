"""Exceptions raised by the metrics core."""


class MetricDeclarationError(ValueError):
    """A series was declared twice with a different kind or label set.

    Raised at startup; the process must not serve traffic with an
    inconsistent registry.
    """

    def __init__(self, name: str, reason: str):
        self.name = name
        super().__init__(f"Cannot declare metric '{name}': {reason}")


class UndeclaredSeriesError(LookupError):
    """A handle was used on a registry that never declared it."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Metric '{name}' is not declared on this registry")
