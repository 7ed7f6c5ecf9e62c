"""Label derivation and suppression for completed exchanges.

Each label dimension has an optional exclusion regex.  A request is
recorded only when none of its label values match.  Patterns are compiled
once when the options are built; a pattern that fails to compile is
logged and then ignored, so a configuration typo can never switch
instrumentation off.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from starlette.requests import Request

from promgate.adapters.endpoint_mappers import RawPathEndpointMapper, RouteTemplateEndpointMapper
from promgate.core.config import Settings
from promgate.core.logging import logger
from promgate.core.protocols.endpoint_mapper import EndpointMapper
from promgate.core.types import RequestLabels


class ExclusionPattern:
    """Compiled exclusion regex for one label dimension."""

    def __init__(self, pattern: Optional[str], *, dimension: str) -> None:
        self.pattern = pattern or ""
        self.dimension = dimension
        self._regex: Optional[re.Pattern[str]] = None
        if self.pattern:
            try:
                self._regex = re.compile(self.pattern)
            except re.error as e:
                logger.with_context(dimension=dimension, pattern=self.pattern).warning(
                    f"Ignoring invalid exclusion regex for '{dimension}' label: {e}"
                )

    @property
    def active(self) -> bool:
        """Whether this pattern can suppress anything at all."""
        return self._regex is not None

    def allows(self, value: str) -> bool:
        """Return ``True`` when ``value`` should be recorded.

        Unanchored search: any match anywhere in ``value`` suppresses it.
        """
        if self._regex is None:
            return True
        return self._regex.search(value) is None


@dataclass(frozen=True)
class HttpMetricsOptions:
    """Immutable middleware configuration shared by all requests."""

    exclude_status: str = ""
    exclude_endpoint: str = ""
    exclude_method: str = ""
    endpoint_mapper: EndpointMapper = field(default_factory=RawPathEndpointMapper)
    include_url_in_request_size: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "HttpMetricsOptions":
        mapper: EndpointMapper
        if settings.ENDPOINT_LABEL_MODE == "route":
            mapper = RouteTemplateEndpointMapper()
        else:
            mapper = RawPathEndpointMapper()
        return cls(
            exclude_status=settings.EXCLUDE_REGEX_STATUS,
            exclude_endpoint=settings.EXCLUDE_REGEX_ENDPOINT,
            exclude_method=settings.EXCLUDE_REGEX_METHOD,
            endpoint_mapper=mapper,
            include_url_in_request_size=settings.REQUEST_SIZE_INCLUDE_URL,
        )


class LabelExtractor:
    """Derives ``(status, endpoint, method)`` and decides whether to record."""

    def __init__(self, options: Optional[HttpMetricsOptions] = None) -> None:
        self._options = options or HttpMetricsOptions()
        self._mapper = self._options.endpoint_mapper or RawPathEndpointMapper()
        self._status = ExclusionPattern(self._options.exclude_status, dimension="status")
        self._endpoint = ExclusionPattern(self._options.exclude_endpoint, dimension="endpoint")
        self._method = ExclusionPattern(self._options.exclude_method, dimension="method")

    @property
    def options(self) -> HttpMetricsOptions:
        return self._options

    def should_record(self, labels: RequestLabels) -> bool:
        return (
            self._status.allows(labels.status)
            and self._endpoint.allows(labels.endpoint)
            and self._method.allows(labels.method)
        )

    def extract(self, request: Request, status_code: int) -> tuple[RequestLabels, bool]:
        """Build the label tuple for a completed exchange.

        Args:
            request: The inbound request, after downstream handling.
            status_code: Final response status code.

        Returns:
            The label values and whether the exchange should be recorded.
        """
        labels = RequestLabels(
            status=str(status_code),
            endpoint=self._mapper.map_endpoint(request),
            method=request.method,
        )
        return labels, self.should_record(labels)
