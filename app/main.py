"""
FastAPI application setup with dependency injection.

``create_app`` builds the application and the objects it owns (metrics
registry, database, image resolver) and stores them on ``app.state``.
"""

from fastapi import FastAPI
import logging
from contextlib import asynccontextmanager
from typing import Optional

from app.config.settings import Settings, get_settings
from app.core.db import Database
from app.core.error_handlers import setup_error_handlers
from app.core.logging import configure_logging
from app.core.metrics import MetricsRegistry
from app.core.monitoring import PerformanceMiddleware
from app.middleware import RequestContextMiddleware
from app.services.image_service import ImageUrlResolver

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management.
    Creates the schema on startup and releases database connections on shutdown.
    """
    settings: Settings = app.state.settings
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    try:
        app.state.database.create_all()
        logger.info("Application startup complete")

        yield

    except Exception as e:
        logger.error(f"Application startup failed: {e}", exc_info=True)
        raise

    finally:
        logger.info("Shutting down application")
        app.state.database.dispose()
        logger.info("Application shutdown complete")


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    metrics: Optional[MetricsRegistry] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level.value, settings.log_format)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.metrics = metrics or MetricsRegistry()
    app.state.database = database or Database(settings.database_url, echo=settings.database_echo)
    app.state.image_resolver = ImageUrlResolver.from_settings(settings.s3)

    # Last added runs first: request id is assigned before metrics are recorded
    app.add_middleware(
        PerformanceMiddleware,
        slow_request_threshold_ms=settings.monitoring.slow_request_threshold_ms,
    )
    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)

    from app.api.health_endpoints import router as health_router
    from app.api.metrics_endpoints import router as metrics_router
    from app.api.products_endpoints import router as products_router
    from app.api.tracking_endpoints import router as tracking_router
    app.include_router(health_router)
    app.include_router(metrics_router)
    app.include_router(products_router)
    app.include_router(tracking_router)

    @app.get("/")
    async def root():
        """Root endpoint for basic liveness."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "status": "running"
        }

    return app


# Create application instance
app = create_app()
