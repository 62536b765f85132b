"""
Health check endpoints.
"""

import time

from fastapi import APIRouter, Depends

from luredb.api.dependencies import get_app_settings, get_services
from luredb.application.dto.responses import HealthResponse
from luredb.application.services import CatalogServices
from luredb.config import Settings

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check(
    services: CatalogServices = Depends(get_services),
    settings: Settings = Depends(get_app_settings),
) -> HealthResponse:
    """
    Catalog health check.

    Degraded when the catalog failed to load and the indexes are empty.
    """
    loaded = services.colors.is_loaded and services.lures.is_loaded
    error = services.loader.last_error

    return HealthResponse(
        status="healthy" if loaded else "degraded",
        version=settings.app_version,
        uptime_seconds=time.time() - _start_time,
        catalog_loaded=loaded,
        colors=services.colors.count,
        lures=services.lures.count,
        catalog_error=error.message if error else None,
    )
