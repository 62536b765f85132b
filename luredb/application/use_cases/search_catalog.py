"""
Search Catalog Use Cases.

Color and lure search for the presentation shells.
"""

import time
from dataclasses import dataclass
from typing import Generic, TypeVar

from luredb.application.dto.requests import CatalogSearchRequest
from luredb.application.dto.responses import (
    ColorResponse,
    ColorSearchResponse,
    LureResponse,
    LureSearchResponse,
)
from luredb.application.services import get_color_index, get_lure_index
from luredb.config import get_logger
from luredb.core.entities import Color, Lure
from luredb.core.services import ColorIndex, LureIndex, RecordIndex

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass
class SearchResultDTO(Generic[T]):
    """Search result data transfer object."""

    query: str
    results: list[T]
    match_type: str
    took_ms: float


def _run_search(
    index: RecordIndex[T], request: CatalogSearchRequest
) -> SearchResultDTO[T]:
    start = time.time()
    outcome = index.search_detailed(request.query)
    results = outcome.results
    if request.limit is not None:
        results = results[: request.limit]
    took_ms = (time.time() - start) * 1000

    logger.info(
        "search_complete",
        index=index.profile.name,
        query=request.query[:50],
        match_type=outcome.strategy.value,
        results=len(results),
        took_ms=round(took_ms, 3),
    )

    return SearchResultDTO(
        query=request.query,
        results=results,
        match_type=outcome.strategy.value,
        took_ms=took_ms,
    )


class SearchColorsUseCase:
    """Use case for searching colors by id, name, codes or manufacturer."""

    def __init__(self, color_index: ColorIndex | None = None):
        self._colors = color_index

    def _get_index(self) -> ColorIndex:
        if self._colors is None:
            self._colors = get_color_index()
        return self._colors

    async def execute(self, request: CatalogSearchRequest) -> SearchResultDTO[Color]:
        return _run_search(self._get_index(), request)

    def to_response(self, result: SearchResultDTO[Color]) -> ColorSearchResponse:
        """Convert to API response format."""
        return ColorSearchResponse(
            query=result.query,
            results=[ColorResponse.from_entity(c) for c in result.results],
            total=len(result.results),
            match_type=result.match_type,
            took_ms=result.took_ms,
        )


class SearchLuresUseCase:
    """Use case for searching lures by name, number or manufacturer."""

    def __init__(self, lure_index: LureIndex | None = None):
        self._lures = lure_index

    def _get_index(self) -> LureIndex:
        if self._lures is None:
            self._lures = get_lure_index()
        return self._lures

    async def execute(self, request: CatalogSearchRequest) -> SearchResultDTO[Lure]:
        return _run_search(self._get_index(), request)

    def to_response(self, result: SearchResultDTO[Lure]) -> LureSearchResponse:
        """Convert to API response format."""
        return LureSearchResponse(
            query=result.query,
            results=[LureResponse.from_entity(lure) for lure in result.results],
            total=len(result.results),
            match_type=result.match_type,
            took_ms=result.took_ms,
        )
