"""HTTP metrics middleware.

Wraps the rest of the pipeline (``call_next``) exactly once and records the
exchange only after downstream handling completed.  Nothing is held across
the downstream await, and the registry update is the only shared state
touched.
"""

import time
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any, Optional, Union

from starlette.requests import Request
from starlette.responses import Response

from promgate.core.label_extraction import HttpMetricsOptions, LabelExtractor
from promgate.core.logging import logger
from promgate.core.protocols.http_metrics import HttpMetrics
from promgate.core.request_size import (
    UNKNOWN_CONTENT_LENGTH,
    RequestParts,
    estimate_request_size,
)
from promgate.core.types import RequestLabels

CallNext = Callable[[Request], Awaitable[Response]]


def _content_length(raw: Optional[str]) -> int:
    if raw is None:
        return UNKNOWN_CONTENT_LENGTH
    try:
        return int(raw)
    except ValueError:
        return UNKNOWN_CONTENT_LENGTH


def request_parts(request: Request) -> RequestParts:
    """Extract the size-relevant fields of a Starlette request.

    Header values are grouped by name; ``Host`` is reported separately.
    """
    headers: dict[str, list[str]] = {}
    for name, value in request.headers.items():
        if name == "host":
            continue
        headers.setdefault(name, []).append(value)

    http_version = request.scope.get("http_version", "1.1")
    return RequestParts(
        method=request.method,
        protocol=f"HTTP/{http_version}",
        host=request.headers.get("host", ""),
        headers=headers,
        content_length=_content_length(request.headers.get("content-length")),
        url=str(request.url),
    )


def _chunk_size(chunk: Union[str, bytes, memoryview], charset: str) -> int:
    if isinstance(chunk, str):
        return len(chunk.encode(charset))
    return len(chunk)


class HttpMetricsMiddleware:
    """``call_next`` dispatch callable recording per-request metrics.

    Register with ``app.middleware("http")(HttpMetricsMiddleware(metrics))``.
    If the downstream stage raises, the exchange is not recorded and the
    exception propagates unchanged.  A failure inside the recording step is
    logged and the downstream response is returned as is.

    Responses declaring ``Content-Length`` are recorded as soon as
    ``call_next`` returns.  Streamed responses without one are recorded when
    their body iterator is exhausted, with the bytes actually sent and the
    duration up to the last chunk.
    """

    def __init__(
        self,
        metrics: HttpMetrics,
        options: Optional[HttpMetricsOptions] = None,
    ) -> None:
        self._metrics = metrics
        self._extractor = LabelExtractor(options)
        self._include_url = self._extractor.options.include_url_in_request_size
        self._logger = logger.with_context(operation="http_metrics_middleware")

    async def __call__(self, request: Request, call_next: CallNext) -> Response:
        start = time.perf_counter()
        response = await call_next(request)

        try:
            labels, should_record = self._extractor.extract(request, response.status_code)
        except Exception as e:
            self._warn(request, e)
            return response
        if not should_record:
            return response

        response_size = _content_length(response.headers.get("content-length"))
        body_iterator = getattr(response, "body_iterator", None)
        if response_size == UNKNOWN_CONTENT_LENGTH and body_iterator is not None:
            response.body_iterator = self._counting(
                body_iterator, response.charset, request, labels, start
            )
            return response

        self._record(request, labels, time.perf_counter() - start, response_size)
        return response

    async def _counting(
        self,
        body_iterator: AsyncIterator[Any],
        charset: str,
        request: Request,
        labels: RequestLabels,
        start: float,
    ) -> AsyncIterator[Any]:
        sent = 0
        async for chunk in body_iterator:
            sent += _chunk_size(chunk, charset)
            yield chunk
        self._record(request, labels, time.perf_counter() - start, sent)

    def _record(
        self, request: Request, labels: RequestLabels, duration: float, response_size: int
    ) -> None:
        try:
            self._metrics.observe_request(
                labels,
                duration=duration,
                request_size=estimate_request_size(
                    request_parts(request), include_url=self._include_url
                ),
                # unknown size reports -1
                response_size=max(response_size, 0),
            )
        except Exception as e:
            self._warn(request, e)

    def _warn(self, request: Request, error: Exception) -> None:
        self._logger.with_context(path=request.url.path, method=request.method).warning(
            f"Failed to record request metrics: {error}"
        )
