"""In-app exposition endpoint."""

from fastapi import Request, Response


async def metrics(request: Request) -> Response:
    """Serve every declared series in the Prometheus text format.

    Reads the renderer from ``app.state.metrics`` and never mutates it.
    """
    renderer = request.app.state.metrics.renderer
    return Response(content=renderer.generate(), media_type=renderer.content_type)
