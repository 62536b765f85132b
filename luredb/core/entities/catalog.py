"""
Source document entities.

Mirror the JSON catalog document as shipped: a mapping of manufacturer
id to manufacturer record, each owning ordered color and lure lists,
plus an optional block of precomputed lookup tables. Keys are read in
the document's camelCase spelling; the alternate spellings used by
older exports are accepted too.
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _stringify(value: Any) -> Any:
    """Turn numeric scalars into their string form, leave anything else alone."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int | float):
        return str(value)
    return value


class _DocumentModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ColorEntry(_DocumentModel):
    """A color as written in the source document."""

    id: str
    name: str
    year_introduced: int | None = Field(
        default=None, validation_alias=AliasChoices("yearIntroduced", "year_introduced")
    )
    year_last_used: int | None = Field(
        default=None, validation_alias=AliasChoices("yearLastUsed", "year_last_used")
    )
    company_id: str | None = Field(
        default=None, validation_alias=AliasChoices("companyId", "company_id")
    )
    pre1925_id: list[str] | None = Field(
        default=None, validation_alias=AliasChoices("pre1925Id", "pre1925_id")
    )

    @field_validator("company_id", mode="before")
    @classmethod
    def coerce_company_id(cls, v: Any) -> Any:
        return _stringify(v)

    @field_validator("pre1925_id", mode="before")
    @classmethod
    def coerce_pre1925_id(cls, v: Any) -> Any:
        if v is None:
            return None
        if isinstance(v, str | int | float) and not isinstance(v, bool):
            v = [v]
        return [_stringify(item) for item in v]


class LureEntry(_DocumentModel):
    """A lure model as written in the source document."""

    name: str
    number: int | str
    year_introduced: int | None = Field(
        default=None, validation_alias=AliasChoices("yearIntroduced", "year_introduced")
    )
    year_last_mfg: int | None = Field(
        default=None, validation_alias=AliasChoices("yearLastMfg", "year_last_mfg")
    )
    length: str | None = None
    weight: str | None = None
    eyes: str | None = None
    colors: list[str] | None = None
    rare_colors: list[str] | None = Field(
        default=None, validation_alias=AliasChoices("rare_colors", "rareColors")
    )
    pre1925_codes: list[dict[str, int | str]] | None = Field(
        default=None,
        validation_alias=AliasChoices("pre1925codes", "pre1925Codes", "pre1925_codes"),
    )
    notes: str | None = None

    @field_validator("length", "weight", "eyes", mode="before")
    @classmethod
    def coerce_measurements(cls, v: Any) -> Any:
        return _stringify(v)


class ManufacturerEntry(_DocumentModel):
    """A manufacturer and everything it produced."""

    id: str | None = None
    name: str
    colors: list[ColorEntry] | None = None
    lures: list[LureEntry] | None = Field(
        default=None, validation_alias=AliasChoices("lures", "variants")
    )


class CatalogIndexes(_DocumentModel):
    """
    Precomputed lookup tables shipped alongside the catalog.

    Advisory only: they may be stale relative to the manufacturer
    records and are always re-verified before use.
    """

    by_id: dict[str, dict[str, Any]] | None = Field(
        default=None, validation_alias=AliasChoices("byId", "by_id")
    )
    by_company_id: dict[str, list[str]] | None = Field(
        default=None, validation_alias=AliasChoices("byCompanyId", "by_company_id")
    )
    by_year_introduced: dict[str, list[str]] | None = Field(
        default=None,
        validation_alias=AliasChoices("byYearIntroduced", "by_year_introduced"),
    )
    by_manufacturer: dict[str, list[str]] | None = Field(
        default=None, validation_alias=AliasChoices("byManufacturer", "by_manufacturer")
    )


class Catalog(_DocumentModel):
    """The parsed catalog document."""

    manufacturers: dict[str, ManufacturerEntry] = Field(
        validation_alias=AliasChoices("manufacturers", "producers")
    )
    indexes: CatalogIndexes | None = None
