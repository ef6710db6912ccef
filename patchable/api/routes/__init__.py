"""API route registration."""

from fastapi import FastAPI

from patchable.config.settings import Settings
from patchable.observability.logging import get_logger

logger = get_logger(__name__)


def register_routes(app: FastAPI, settings: Settings) -> None:
    """Register all routes with the FastAPI application.

    Args:
        app: FastAPI application instance
        settings: Settings deciding which optional routes are exposed
    """
    from patchable.api.routes.demo_models import router as demo_models_router
    from patchable.api.routes.health import metrics
    from patchable.api.routes.health import router as health_router

    app.include_router(demo_models_router, tags=["Demo models"])
    app.include_router(health_router, tags=["Health"])

    if settings.observability.metrics.enabled:
        app.add_api_route(
            settings.observability.metrics.path,
            metrics,
            methods=["GET"],
            tags=["Health"],
            include_in_schema=False,
        )

    logger.info("routes_registered", metrics=settings.observability.metrics.enabled)
