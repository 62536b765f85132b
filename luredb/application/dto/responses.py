"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from luredb.core.entities import Color, Lure, ResolvedColor


class ColorResponse(BaseModel):
    """A color record."""

    id: str = Field(..., description="Color id, e.g. ccbc-00")
    name: str = Field(..., description="Display name")
    manufacturer_id: str = Field(..., description="Owning manufacturer id")
    manufacturer_name: str = Field(..., description="Owning manufacturer name")
    company_id: str | None = Field(default=None, description="Manufacturer's color code")
    year_introduced: int | None = Field(default=None, description="Year introduced")
    year_last_used: int | None = Field(default=None, description="Year last used")
    pre1925_id: list[str] = Field(default_factory=list, description="Pre-1925 color ids")

    @classmethod
    def from_entity(cls, color: Color) -> "ColorResponse":
        return cls(
            id=color.id,
            name=color.name,
            manufacturer_id=color.manufacturer_id,
            manufacturer_name=color.manufacturer_name,
            company_id=color.company_id,
            year_introduced=color.year_introduced,
            year_last_used=color.year_last_used,
            pre1925_id=list(color.pre1925_id or ()),
        )


class LureResponse(BaseModel):
    """A lure record."""

    name: str = Field(..., description="Lure name")
    number: str = Field(..., description="Lure number as written in the catalog")
    manufacturer_id: str = Field(..., description="Owning manufacturer id")
    manufacturer_name: str = Field(..., description="Owning manufacturer name")
    year_introduced: int | None = Field(default=None, description="Year introduced")
    year_last_mfg: int | None = Field(default=None, description="Year last manufactured")
    length: str | None = Field(default=None, description="Body length")
    weight: str | None = Field(default=None, description="Weight")
    eyes: str | None = Field(default=None, description="Eye style")
    color_count: int = Field(default=0, description="Number of standard colors")
    colors: list[str] = Field(default_factory=list, description="Standard color ids")
    rare_colors: list[str] = Field(default_factory=list, description="Rare color ids")
    notes: str | None = Field(default=None, description="Free-text notes")

    @classmethod
    def from_entity(cls, lure: Lure) -> "LureResponse":
        colors = list(lure.colors or ())
        return cls(
            name=lure.name,
            number=lure.number_label,
            manufacturer_id=lure.manufacturer_id,
            manufacturer_name=lure.manufacturer_name,
            year_introduced=lure.year_introduced,
            year_last_mfg=lure.year_last_mfg,
            length=lure.length,
            weight=lure.weight,
            eyes=lure.eyes,
            color_count=len(colors),
            colors=colors,
            rare_colors=list(lure.rare_colors or ()),
            notes=lure.notes,
        )


class ResolvedColorResponse(BaseModel):
    """One color of a lure, resolved for display."""

    color_id: str
    name: str
    found: bool
    lure_code: int | None = Field(default=None, description="Derived lure code")
    pre1925_code: int | str | None = Field(
        default=None, description="Lure-specific pre-1925 code"
    )
    color_pre1925_ids: list[str] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, resolved: ResolvedColor) -> "ResolvedColorResponse":
        return cls(
            color_id=resolved.color_id,
            name=resolved.name,
            found=resolved.found,
            lure_code=resolved.derived_code,
            pre1925_code=resolved.legacy_code,
            color_pre1925_ids=list(resolved.color_legacy_ids),
        )


class LureSheetResponse(BaseModel):
    """A lure with all of its colors resolved."""

    lure: LureResponse
    colors: list[ResolvedColorResponse] = Field(default_factory=list)
    rare_colors: list[ResolvedColorResponse] = Field(default_factory=list)


class ColorSearchResponse(BaseModel):
    """Color search results."""

    query: str
    results: list[ColorResponse]
    total: int
    match_type: str = Field(..., description="primary_key, company_code, substring or none")
    took_ms: float


class LureSearchResponse(BaseModel):
    """Lure search results."""

    query: str
    results: list[LureResponse]
    total: int
    match_type: str = Field(..., description="primary_key, substring or none")
    took_ms: float


class ReloadResponse(BaseModel):
    """Outcome of a catalog reload."""

    loaded: bool
    colors: int
    lures: int
    error: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="healthy or degraded")
    version: str
    uptime_seconds: float
    catalog_loaded: bool
    colors: int
    lures: int
    catalog_error: str | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. COLOR_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
