"""Shared value types for HTTP request metrics."""

from typing import NamedTuple

# Order matters: label values are passed positionally to every labelled series.
REQUEST_LABEL_NAMES: tuple[str, ...] = ("status", "endpoint", "method")


class RequestLabels(NamedTuple):
    """Label values selecting one sub-series of the per-request metrics."""

    status: str
    endpoint: str
    method: str
