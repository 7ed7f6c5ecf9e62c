"""Application factory and server entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from promgate.api import demo
from promgate.api.endpoints.metrics import metrics as metrics_endpoint
from promgate.api.middleware import HttpMetricsMiddleware
from promgate.core.config import Settings
from promgate.core.config import settings as default_settings
from promgate.core.label_extraction import HttpMetricsOptions
from promgate.core.logging import logger
from promgate.core.metrics_service import build_metrics_service
from promgate.core.protocols.metrics_service import MetricsService


def create_app(
    settings: Optional[Settings] = None,
    metrics: Optional[MetricsService] = None,
    options: Optional[HttpMetricsOptions] = None,
) -> FastAPI:
    """Build the instrumented demo application.

    Args:
        settings: Runtime configuration, the environment-derived one by default.
        metrics: Metrics facade; a fresh Prometheus-backed one by default.
        options: Middleware options; derived from ``settings`` by default.

    Returns:
        FastAPI: The app, with metrics started and stopped by its lifespan.
    """
    if settings is None:
        settings = default_settings
    if metrics is None:
        metrics = build_metrics_service(settings)
    if options is None:
        options = HttpMetricsOptions.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await metrics.start(
            host=settings.METRICS_SIDECAR_HOST,
            port=settings.METRICS_SIDECAR_PORT,
            uptime_interval=settings.UPTIME_INTERVAL,
        )
        try:
            yield
        finally:
            await metrics.stop()

    app = FastAPI(title="promgate", lifespan=lifespan)
    app.state.settings = settings
    app.state.metrics = metrics

    app.middleware("http")(HttpMetricsMiddleware(metrics.http, options))
    app.add_api_route(settings.METRICS_PATH, metrics_endpoint, methods=["GET"])
    app.include_router(demo.router)
    return app


def run() -> None:
    """Serve the demo application with uvicorn."""
    settings = default_settings
    logger.with_context(host=settings.HOST, port=settings.PORT).info("Starting promgate")
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
