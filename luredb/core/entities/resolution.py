"""
Cross-reference results between lures and colors.
"""

from pydantic import BaseModel, ConfigDict

from luredb.core.entities.lure import Lure


class ResolvedColor(BaseModel):
    """
    A color reference from a lure, resolved for display.

    `name` falls back to the raw color id when the color is unknown.
    `legacy_code` is the lure-specific pre-1925 code; the color's own
    generic legacy ids are reported separately in `color_legacy_ids`.
    """

    model_config = ConfigDict(frozen=True)

    color_id: str
    name: str
    found: bool = False
    derived_code: int | None = None
    legacy_code: int | str | None = None
    color_legacy_ids: tuple[str, ...] = ()


class LureColorSheet(BaseModel):
    """A lure together with every color it was offered in, resolved."""

    model_config = ConfigDict(frozen=True)

    lure: Lure
    colors: tuple[ResolvedColor, ...] = ()
    rare_colors: tuple[ResolvedColor, ...] = ()
