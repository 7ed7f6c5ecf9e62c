"""Starlette implementations of the EndpointMapper protocol."""

from starlette.requests import Request

from promgate.core.protocols.endpoint_mapper import EndpointMapper

UNMATCHED_ENDPOINT = "unmatched"


class RawPathEndpointMapper(EndpointMapper):
    """Use the request path verbatim.

    Default mapper.  Every distinct path becomes its own series, so this is
    only safe when the set of reachable paths is small.
    """

    def map_endpoint(self, request: Request) -> str:
        return request.url.path


class RouteTemplateEndpointMapper(EndpointMapper):
    """Use the template of the matched route, e.g. ``/items/{item_id}``.

    Requests that matched no route (404s, bot scans) collapse onto
    ``fallback`` so they cannot inflate label cardinality.
    """

    def __init__(self, fallback: str = UNMATCHED_ENDPOINT) -> None:
        self._fallback = fallback

    def map_endpoint(self, request: Request) -> str:
        route = request.scope.get("route")
        path = getattr(route, "path", None)
        if isinstance(path, str) and path:
            return path
        return self._fallback
