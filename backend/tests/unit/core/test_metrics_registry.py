"""Unit tests for the MetricRegistry."""

import threading

import pytest
from prometheus_client import REGISTRY, CollectorRegistry, Counter

from promgate.core.exceptions import MetricDeclarationError, UndeclaredSeriesError
from promgate.core.metrics_registry import MetricKind, MetricRegistry, SeriesHandle

LABELS = ("status", "endpoint", "method")


class TestDeclare:
    """Series declaration and identity rules."""

    def test_registry_is_separate_from_default(self):
        registry = MetricRegistry()
        assert registry.collector_registry is not REGISTRY

    def test_declare_returns_handle(self):
        registry = MetricRegistry(namespace="service")
        handle = registry.declare("requests_total", MetricKind.COUNTER, LABELS)

        assert handle == SeriesHandle("requests_total", MetricKind.COUNTER, LABELS)

    def test_identical_redeclaration_is_idempotent(self):
        registry = MetricRegistry()
        first = registry.declare("latency_seconds", MetricKind.HISTOGRAM, LABELS)
        second = registry.declare("latency_seconds", MetricKind.HISTOGRAM, list(LABELS))

        assert first == second

    def test_conflicting_kind_is_rejected(self):
        registry = MetricRegistry()
        registry.declare("size_bytes", MetricKind.SUMMARY, LABELS)

        with pytest.raises(MetricDeclarationError, match="size_bytes"):
            registry.declare("size_bytes", MetricKind.HISTOGRAM, LABELS)

    def test_conflicting_labels_are_rejected(self):
        registry = MetricRegistry()
        registry.declare("size_bytes", MetricKind.SUMMARY, LABELS)

        with pytest.raises(MetricDeclarationError):
            registry.declare("size_bytes", MetricKind.SUMMARY, ("status",))

    def test_collision_with_foreign_collector_is_rejected(self):
        """A name already taken on the underlying registry is a declaration error."""
        collectors = CollectorRegistry()
        Counter("service_uptime", "taken", registry=collectors)
        registry = MetricRegistry(namespace="service", registry=collectors)

        with pytest.raises(MetricDeclarationError):
            registry.declare("uptime", MetricKind.COUNTER)


class TestUpdates:
    """increment / observe semantics."""

    def test_increment_labelled_counter(self):
        registry = MetricRegistry(namespace="service")
        handle = registry.declare("hits_total", MetricKind.COUNTER, LABELS)

        registry.increment(handle, ("200", "/index", "GET"))
        registry.increment(handle, ("200", "/index", "GET"))

        value = registry.collector_registry.get_sample_value(
            "service_hits_total", {"status": "200", "endpoint": "/index", "method": "GET"}
        )
        assert value == 2.0

    def test_increment_unlabelled_counter(self):
        registry = MetricRegistry(namespace="service")
        handle = registry.declare("uptime", MetricKind.COUNTER)

        registry.increment(handle)

        assert registry.collector_registry.get_sample_value("service_uptime_total") == 1.0

    def test_observe_summary(self):
        registry = MetricRegistry()
        handle = registry.declare("size_bytes", MetricKind.SUMMARY, LABELS)

        registry.observe(handle, ("200", "/", "GET"), 100)
        registry.observe(handle, ("200", "/", "GET"), 50)

        labels = {"status": "200", "endpoint": "/", "method": "GET"}
        assert registry.collector_registry.get_sample_value("size_bytes_count", labels) == 2.0
        assert registry.collector_registry.get_sample_value("size_bytes_sum", labels) == 150.0

    def test_observe_histogram_with_custom_buckets(self):
        registry = MetricRegistry()
        handle = registry.declare(
            "latency_seconds", MetricKind.HISTOGRAM, ("method",), buckets=(0.1, 1.0)
        )

        registry.observe(handle, ("GET",), 0.5)

        value = registry.collector_registry.get_sample_value(
            "latency_seconds_bucket", {"method": "GET", "le": "1.0"}
        )
        assert value == 1.0

    def test_handle_from_other_registry_is_rejected(self):
        foreign = MetricRegistry().declare("hits_total", MetricKind.COUNTER, LABELS)
        registry = MetricRegistry()

        with pytest.raises(UndeclaredSeriesError):
            registry.increment(foreign, ("200", "/", "GET"))

    def test_wrong_label_arity_is_rejected(self):
        registry = MetricRegistry()
        handle = registry.declare("hits_total", MetricKind.COUNTER, LABELS)

        with pytest.raises(ValueError, match="expects 3 label values"):
            registry.increment(handle, ("200",))

    def test_observe_on_counter_is_rejected(self):
        registry = MetricRegistry()
        handle = registry.declare("hits_total", MetricKind.COUNTER)

        with pytest.raises(ValueError):
            registry.observe(handle, (), 1.0)

    def test_concurrent_increments_are_not_lost(self):
        registry = MetricRegistry()
        handle = registry.declare("hits_total", MetricKind.COUNTER, LABELS)

        def worker():
            for _ in range(1000):
                registry.increment(handle, ("200", "/", "GET"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        value = registry.collector_registry.get_sample_value(
            "hits_total", {"status": "200", "endpoint": "/", "method": "GET"}
        )
        assert value == 8000.0


class TestSnapshot:
    def test_snapshot_renders_help_and_type(self):
        registry = MetricRegistry(namespace="service")
        registry.declare("uptime", MetricKind.COUNTER, documentation="HTTP service uptime")

        text = registry.snapshot()

        assert "# HELP service_uptime_total HTTP service uptime" in text
        assert "# TYPE service_uptime_total counter" in text
        assert "service_uptime_total 0.0" in text

    def test_content_type_is_prometheus_format(self):
        assert MetricRegistry().content_type.startswith("text/plain; version=")
