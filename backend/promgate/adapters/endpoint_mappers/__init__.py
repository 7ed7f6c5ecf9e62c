"""Endpoint label mappers."""

from promgate.adapters.endpoint_mappers.starlette import (
    UNMATCHED_ENDPOINT,
    RawPathEndpointMapper,
    RouteTemplateEndpointMapper,
)

__all__ = ["RawPathEndpointMapper", "RouteTemplateEndpointMapper", "UNMATCHED_ENDPOINT"]
