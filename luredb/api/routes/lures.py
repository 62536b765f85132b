"""
Lure endpoints.
"""

from fastapi import APIRouter, Depends, Query, Response

from luredb.api.dependencies import (
    get_describe_lure_use_case,
    get_search_lures_use_case,
    get_services,
)
from luredb.api.middleware import MATCH_TYPE_HEADER
from luredb.application.dto.requests import CatalogSearchRequest
from luredb.application.dto.responses import (
    LureResponse,
    LureSearchResponse,
    LureSheetResponse,
)
from luredb.application.services import CatalogServices
from luredb.application.use_cases import DescribeLureUseCase, SearchLuresUseCase

router = APIRouter(prefix="/api/lures", tags=["lures"])


@router.get("/search", response_model=LureSearchResponse)
async def search_lures(
    response: Response,
    q: str = Query(default="", max_length=200, description="Search query"),
    limit: int | None = Query(default=None, ge=1, le=500),
    use_case: SearchLuresUseCase = Depends(get_search_lures_use_case),
) -> LureSearchResponse:
    """
    Search lures.

    An exact lure number returns every lure with that number; anything
    else is a ranked substring search over names, numbers and
    manufacturers.
    """
    result = await use_case.execute(CatalogSearchRequest(query=q, limit=limit))
    response.headers[MATCH_TYPE_HEADER] = result.match_type
    return use_case.to_response(result)


@router.get("/number/{number}", response_model=list[LureResponse])
async def lures_by_number(
    number: str,
    services: CatalogServices = Depends(get_services),
) -> list[LureResponse]:
    """All lures, across manufacturers, with this number."""
    return [LureResponse.from_entity(lure) for lure in services.lures.get_by_number(number)]


@router.get("/number/{number}/sheet", response_model=list[LureSheetResponse])
async def lure_sheet(
    number: str,
    use_case: DescribeLureUseCase = Depends(get_describe_lure_use_case),
) -> list[LureSheetResponse]:
    """Lures with this number, with every color resolved to name and codes."""
    sheets = await use_case.execute(number)
    return use_case.to_response(sheets)
