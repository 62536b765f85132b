"""
Lure domain entities.
"""

from pydantic import BaseModel, ConfigDict


class LegacyCode(BaseModel):
    """A pre-1925 catalog code for one lure/color pairing."""

    model_config = ConfigDict(frozen=True)

    color_id: str
    code: int | str


class Lure(BaseModel):
    """
    A lure model produced by one manufacturer.

    `number` is kept as written in the document (int or str). Matching
    always uses its string form; arithmetic coerces it on demand.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    number: int | str
    year_introduced: int | None = None
    year_last_mfg: int | None = None
    length: str | None = None
    weight: str | None = None
    eyes: str | None = None
    colors: tuple[str, ...] | None = None
    rare_colors: tuple[str, ...] | None = None
    pre1925_codes: tuple[LegacyCode, ...] | None = None
    notes: str | None = None
    manufacturer_id: str
    manufacturer_name: str

    @property
    def number_label(self) -> str:
        return str(self.number)

    def legacy_code_for(self, color_id: str) -> int | str | None:
        """Return this lure's pre-1925 code for a color; later entries win."""
        found: int | str | None = None
        for entry in self.pre1925_codes or ():
            if entry.color_id == color_id:
                found = entry.code
        return found
