"""Data transfer objects for the API boundary."""

from luredb.application.dto.requests import CatalogSearchRequest
from luredb.application.dto.responses import (
    ColorResponse,
    ColorSearchResponse,
    ErrorResponse,
    HealthResponse,
    LureResponse,
    LureSearchResponse,
    LureSheetResponse,
    ReloadResponse,
    ResolvedColorResponse,
)

__all__ = [
    # Requests
    "CatalogSearchRequest",
    # Responses
    "ColorResponse",
    "ColorSearchResponse",
    "LureResponse",
    "LureSearchResponse",
    "LureSheetResponse",
    "ResolvedColorResponse",
    "ReloadResponse",
    "HealthResponse",
    "ErrorResponse",
]
