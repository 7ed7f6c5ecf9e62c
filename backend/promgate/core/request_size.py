"""Approximate byte size of an inbound request.

Computed from the request line and headers only; the body is never read so
the estimate cannot consume the stream a handler still needs.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Optional

# Declared content length when the client did not send one.
UNKNOWN_CONTENT_LENGTH = -1


@dataclass(frozen=True)
class RequestParts:
    """Structural fields of a request used for size estimation.

    ``headers`` maps each distinct header name to all of its values and
    excludes ``Host``, which is carried separately in ``host``.
    """

    method: str
    protocol: str
    host: str = ""
    headers: Mapping[str, Sequence[str]] = field(default_factory=dict)
    content_length: int = UNKNOWN_CONTENT_LENGTH
    url: Optional[str] = None


def estimate_request_size(parts: RequestParts, *, include_url: bool = False) -> int:
    """Return the approximate size of a request in bytes.

    Sums the method, protocol, every header name and value, the host and the
    declared content length.  A present URL is only counted when
    ``include_url`` is set: the reference behaviour sizes the URL solely in
    the branch where it is missing, so by default a URL never contributes.
    """
    size = 0
    if include_url and parts.url is not None:
        size += len(parts.url)

    size += len(parts.method)
    size += len(parts.protocol)

    for name, values in parts.headers.items():
        size += len(name)
        for value in values:
            size += len(value)

    size += len(parts.host)

    # Form data is assumed to be part of the URL or the body length.
    if parts.content_length > 0:
        size += parts.content_length
    return size
