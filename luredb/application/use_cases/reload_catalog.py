"""
Reload Catalog Use Case.
"""

from luredb.application.dto.responses import ReloadResponse
from luredb.application.services import CatalogServices, get_catalog_services


class ReloadCatalogUseCase:
    """Re-read the catalog document and rebuild both indexes."""

    def __init__(self, services: CatalogServices | None = None):
        self._services = services

    async def execute(self) -> ReloadResponse:
        services = self._services or get_catalog_services()
        loaded = services.reload()
        error = services.loader.last_error
        return ReloadResponse(
            loaded=loaded,
            colors=services.colors.count,
            lures=services.lures.count,
            error=error.message if error else None,
        )
