"""
Catalog administration endpoints.
"""

from fastapi import APIRouter, Depends

from luredb.api.dependencies import get_reload_catalog_use_case
from luredb.application.dto.responses import ReloadResponse
from luredb.application.use_cases import ReloadCatalogUseCase
from luredb.config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/catalog", tags=["catalog"])


@router.post("/reload", response_model=ReloadResponse)
async def reload_catalog(
    use_case: ReloadCatalogUseCase = Depends(get_reload_catalog_use_case),
) -> ReloadResponse:
    """
    Re-read the catalog document and rebuild both indexes.

    A broken document is not an error here: the indexes become empty
    and `loaded` is false.
    """
    result = await use_case.execute()
    if not result.loaded:
        logger.warning("catalog_reload_degraded", error=result.error)
    return result
