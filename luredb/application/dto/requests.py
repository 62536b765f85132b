"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.
"""

from pydantic import BaseModel, Field


class CatalogSearchRequest(BaseModel):
    """Free-text search against the color or lure index.

    Blank queries are allowed and simply return no results.
    """

    query: str = Field(
        default="",
        max_length=200,
        description="Color name, id, company code, pre-1925 id, lure name or number",
        examples=["Frog", "ccbc-00", "12", "Pikie", "700"],
    )
    limit: int | None = Field(
        default=None,
        ge=1,
        le=500,
        description="Truncate the ranked results to this many records",
    )
