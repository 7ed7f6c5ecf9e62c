"""Explicitly constructed registry of measurement series.

Wraps a dedicated ``CollectorRegistry`` so instances are isolated from the
prometheus-client default global registry and from each other.  Series are
declared once at startup and mutated through ``increment`` / ``observe``;
prometheus-client guards each child metric with its own lock, so updates
from request tasks, worker threads and the uptime ticker never lose counts.
"""

import enum
import threading
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional, Union

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    Summary,
    generate_latest,
)

from promgate.core.exceptions import MetricDeclarationError, UndeclaredSeriesError

_Metric = Union[Counter, Histogram, Summary]


class MetricKind(str, enum.Enum):
    """Supported series kinds."""

    COUNTER = "counter"
    HISTOGRAM = "histogram"
    SUMMARY = "summary"


@dataclass(frozen=True)
class SeriesHandle:
    """Identity of a declared series: name, kind and ordered label names."""

    name: str
    kind: MetricKind
    label_names: tuple[str, ...]


class MetricRegistry:
    """Process-wide collection of named, typed, labelled series."""

    def __init__(self, namespace: str = "", registry: Optional[CollectorRegistry] = None) -> None:
        self._namespace = namespace
        self._registry = registry or CollectorRegistry()
        self._series: dict[str, tuple[SeriesHandle, _Metric]] = {}
        self._lock = threading.Lock()

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def collector_registry(self) -> CollectorRegistry:
        return self._registry

    @property
    def content_type(self) -> str:
        return CONTENT_TYPE_LATEST

    def declare(
        self,
        name: str,
        kind: MetricKind,
        label_names: Sequence[str] = (),
        *,
        documentation: str = "",
        buckets: Optional[Sequence[float]] = None,
    ) -> SeriesHandle:
        """Declare a series, or return the existing handle for an identical one.

        Raises:
            MetricDeclarationError: ``name`` is already declared with another
                kind or label set, or collides with a collector registered
                directly on the underlying ``CollectorRegistry``.
        """
        handle = SeriesHandle(name=name, kind=MetricKind(kind), label_names=tuple(label_names))
        with self._lock:
            existing = self._series.get(name)
            if existing is not None:
                if existing[0] != handle:
                    raise MetricDeclarationError(
                        name,
                        f"already declared as {existing[0].kind.value} "
                        f"with labels {list(existing[0].label_names)}",
                    )
                return existing[0]

            try:
                metric = self._build(handle, documentation or name, buckets)
            except ValueError as e:
                raise MetricDeclarationError(name, str(e)) from e
            self._series[name] = (handle, metric)
        return handle

    def _build(
        self,
        handle: SeriesHandle,
        documentation: str,
        buckets: Optional[Sequence[float]],
    ) -> _Metric:
        common = {
            "name": handle.name,
            "documentation": documentation,
            "labelnames": handle.label_names,
            "namespace": self._namespace,
            "registry": self._registry,
        }
        if handle.kind is MetricKind.COUNTER:
            return Counter(**common)
        if handle.kind is MetricKind.HISTOGRAM:
            if buckets is not None:
                return Histogram(buckets=tuple(buckets), **common)
            return Histogram(**common)
        return Summary(**common)

    def _resolve(self, handle: SeriesHandle, label_values: Sequence[str]) -> _Metric:
        entry = self._series.get(handle.name)
        if entry is None or entry[0] != handle:
            raise UndeclaredSeriesError(handle.name)
        metric = entry[1]
        if not handle.label_names:
            if label_values:
                raise ValueError(f"Metric '{handle.name}' takes no label values")
            return metric
        if len(label_values) != len(handle.label_names):
            raise ValueError(
                f"Metric '{handle.name}' expects {len(handle.label_names)} label values, "
                f"got {len(label_values)}"
            )
        return metric.labels(*label_values)

    def increment(
        self, handle: SeriesHandle, label_values: Sequence[str] = (), amount: float = 1
    ) -> None:
        """Increment a counter series selected by ``label_values``."""
        if handle.kind is not MetricKind.COUNTER:
            raise ValueError(f"Metric '{handle.name}' is a {handle.kind.value}, not a counter")
        self._resolve(handle, label_values).inc(amount)

    def observe(self, handle: SeriesHandle, label_values: Sequence[str], value: float) -> None:
        """Record one observation on a histogram or summary series."""
        if handle.kind is MetricKind.COUNTER:
            raise ValueError(f"Metric '{handle.name}' is a counter; use increment()")
        self._resolve(handle, label_values).observe(value)

    def snapshot(self) -> str:
        """Serialize every declared series in the text exposition format."""
        return generate_latest(self._registry).decode("utf-8")
