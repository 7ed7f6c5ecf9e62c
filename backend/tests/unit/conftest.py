"""Shared fixtures for unit tests."""

from typing import Any, Optional

import pytest
from prometheus_client.parser import text_string_to_metric_families
from starlette.requests import Request


@pytest.fixture
def make_request():
    """Factory for real Starlette requests built from a bare ASGI scope."""

    def factory(
        path: str = "/index",
        method: str = "GET",
        headers: Optional[list[tuple[str, str]]] = None,
        route: Any = None,
        http_version: str = "1.1",
    ) -> Request:
        if headers is None:
            headers = [("host", "testserver")]
        scope = {
            "type": "http",
            "http_version": http_version,
            "method": method,
            "scheme": "http",
            "server": ("testserver", 80),
            "path": path,
            "raw_path": path.encode(),
            "root_path": "",
            "query_string": b"",
            "headers": [(k.lower().encode("latin-1"), v.encode("latin-1")) for k, v in headers],
        }
        if route is not None:
            scope["route"] = route
        return Request(scope)

    return factory


@pytest.fixture
def sample_value():
    """Look up one sample in Prometheus text exposition output.

    Returns ``None`` when no sample with that name and exact label set exists.
    """

    def lookup(exposition: str, name: str, labels: Optional[dict[str, str]] = None):
        wanted = labels or {}
        for family in text_string_to_metric_families(exposition):
            for sample in family.samples:
                if sample.name == name and sample.labels == wanted:
                    return sample.value
        return None

    return lookup
