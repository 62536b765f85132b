"""
Color endpoints.
"""

from fastapi import APIRouter, Depends, Query, Response

from luredb.api.dependencies import get_search_colors_use_case, get_services
from luredb.api.middleware import MATCH_TYPE_HEADER
from luredb.application.dto.requests import CatalogSearchRequest
from luredb.application.dto.responses import ColorResponse, ColorSearchResponse
from luredb.application.services import CatalogServices
from luredb.application.use_cases import SearchColorsUseCase
from luredb.core.exceptions import ColorNotFoundError

router = APIRouter(prefix="/api/colors", tags=["colors"])


@router.get("/search", response_model=ColorSearchResponse)
async def search_colors(
    response: Response,
    q: str = Query(default="", max_length=200, description="Search query"),
    limit: int | None = Query(default=None, ge=1, le=500),
    use_case: SearchColorsUseCase = Depends(get_search_colors_use_case),
) -> ColorSearchResponse:
    """
    Search colors.

    Exact color ids and exact company codes short-circuit; anything else
    is a ranked substring search over names, ids, codes and manufacturers.
    """
    result = await use_case.execute(CatalogSearchRequest(query=q, limit=limit))
    response.headers[MATCH_TYPE_HEADER] = result.match_type
    return use_case.to_response(result)


@router.get("/company/{company_id}", response_model=list[ColorResponse])
async def colors_by_company_id(
    company_id: str,
    services: CatalogServices = Depends(get_services),
) -> list[ColorResponse]:
    """All colors, across manufacturers, sharing a company color code."""
    return [ColorResponse.from_entity(c) for c in services.colors.get_by_company_id(company_id)]


@router.get("/{color_id}", response_model=ColorResponse)
async def get_color(
    color_id: str,
    services: CatalogServices = Depends(get_services),
) -> ColorResponse:
    """Get a color by its exact id."""
    color = services.colors.get_by_id(color_id)
    if color is None:
        raise ColorNotFoundError(color_id)
    return ColorResponse.from_entity(color)
