"""EndpointMapper protocol deciding the ``endpoint`` label of a request.

The raw request path is unbounded (IDs, slugs, bot scans), so operators
that care about label cardinality plug in a mapper that collapses paths,
for example onto the matched route template.
"""

from typing import Protocol, runtime_checkable

from starlette.requests import Request


@runtime_checkable
class EndpointMapper(Protocol):
    """Maps a completed request onto its endpoint label value."""

    def map_endpoint(self, request: Request) -> str:
        """Return the endpoint label for ``request``.

        Called after the downstream handler finished, so routing information
        in ``request.scope`` is available.
        """
        ...
