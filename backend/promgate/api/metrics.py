"""Sidecar HTTP server exposing ``/metrics`` on a dedicated port.

Lets the scrape port differ from the public API port so metrics are not
reachable through the public ingress.
"""

from typing import Optional

from aiohttp import web

from promgate.core.logging import logger
from promgate.core.protocols.metrics_renderer import MetricsRenderer


class MetricsServer:
    """aiohttp server that renders a MetricsRenderer on every scrape."""

    def __init__(self, renderer: MetricsRenderer, port: int, host: str = "0.0.0.0") -> None:
        """Initialize the metrics server.

        Args:
            renderer: Serializes the registry on each request.
            port: The port to listen on, ``0`` for an OS-assigned one.
            host: The host to listen on.
        """
        self._renderer = renderer
        self._port = port
        self._host = host
        self._app = web.Application()
        self._app.add_routes([web.get("/metrics", self._handle_metrics)])
        self._runner: Optional[web.AppRunner] = None
        self._logger = logger.with_context(operation="metrics_server", port=port)

    async def _handle_metrics(self, request: web.Request) -> web.Response:
        # passed as a header: aiohttp rejects a content_type argument carrying a charset
        return web.Response(
            body=self._renderer.generate(),
            status=200,
            headers={"Content-Type": self._renderer.content_type},
        )

    async def start(self) -> None:
        """Start serving in the background of the current event loop."""
        self._runner = web.AppRunner(self._app)
        await self._runner.setup()
        site = web.TCPSite(self._runner, host=self._host, port=self._port)
        await site.start()
        self._logger.info(f"Metrics server listening on http://{self._host}:{self._port}/metrics")

    async def stop(self) -> None:
        """Stops the server gracefully.  No-op when never started."""
        if self._runner:
            await self._runner.cleanup()
            self._runner = None
            self._logger.info("Metrics server stopped")
