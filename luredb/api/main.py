"""
FastAPI application factory.

Creates and configures the main application instance.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from luredb.api.middleware import ErrorHandlerMiddleware, LoggingMiddleware
from luredb.api.middleware.error_handler import setup_exception_handlers
from luredb.api.routes import (
    catalog_router,
    colors_router,
    health_router,
    lures_router,
)
from luredb.application.services import get_catalog_services
from luredb.config import configure_logging, get_logger, get_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan handler.

    Loads the catalog before the first request. A broken catalog does
    not stop startup; the indexes stay empty and health reports it.
    """
    configure_logging()
    settings = get_settings()

    logger.info(
        "application_starting",
        host=settings.api.host,
        port=settings.api.port,
        catalog=str(settings.catalog.data_path),
    )

    services = get_catalog_services()
    if services.loader.last_error is not None:
        logger.warning("catalog_unavailable", error=services.loader.last_error.message)
    else:
        logger.info(
            "catalog_ready",
            colors=services.colors.count,
            lures=services.lures.count,
        )

    yield

    logger.info("application_stopped")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title="LureDB API",
        description="Search historical lure colors and models",
        version=settings.app_version,
        docs_url="/docs" if settings.api.debug else None,
        redoc_url="/redoc" if settings.api.debug else None,
        lifespan=lifespan,
    )

    app.add_middleware(LoggingMiddleware)
    app.add_middleware(ErrorHandlerMiddleware)

    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    setup_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(colors_router)
    app.include_router(lures_router)
    app.include_router(catalog_router)

    # Root health endpoint (for container health checks)
    @app.get("/health")
    async def root_health() -> dict[str, str]:
        """Simple liveness check at root level."""
        return {"status": "healthy", "version": settings.app_version}

    return app


# Create app instance
app = create_app()
