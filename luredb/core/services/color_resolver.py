"""
Lure/color cross-reference resolution.

Turns the color ids a lure references into display-ready values:
color name, the lure's own pre-1925 code for that color, and the
derived lure code used by the post-cutover numbering scheme
(hundreds of the lure number + numeric color code, e.g. 700 + 12 -> 712).

Pure service -- the color index is injected via constructor.
"""

import math
import re

from luredb.core.entities.color import Color
from luredb.core.entities.lure import Lure
from luredb.core.entities.resolution import LureColorSheet, ResolvedColor
from luredb.core.services.color_index import ColorIndex

_DIGITS = re.compile(r"[0-9]+")
_DECIMAL = re.compile(r"[0-9]+(\.[0-9]+)?")


def coerce_lure_number(number: int | str | float | None) -> float | None:
    """
    Numeric value of a lure number, or None when it is not a number.

    Strings must be plain decimal numbers; "700" -> 700.0, "Pikie" -> None.
    """
    if number is None or isinstance(number, bool):
        return None
    if isinstance(number, int | float):
        return float(number) if math.isfinite(number) else None
    text = str(number).strip()
    if not _DECIMAL.fullmatch(text):
        return None
    return float(text)


def compute_lure_code(number: int | str | float | None, company_id: str | None) -> int | None:
    """
    Derived lure code for a lure number and a color's company code.

    Returns None when the company code is missing or not purely digits,
    or when the lure number is not numeric.
    """
    if not company_id or not _DIGITS.fullmatch(company_id):
        return None
    value = coerce_lure_number(number)
    if value is None:
        return None
    return math.floor(value / 100) * 100 + int(company_id)


class ColorResolver:
    """Resolves a lure's color references against a ColorIndex."""

    def __init__(self, color_index: ColorIndex) -> None:
        self._colors = color_index

    def resolve_color_for_lure(self, lure: Lure, color_id: str) -> ResolvedColor:
        """
        Resolve one color reference of a lure.

        Never raises: an unknown color id resolves to its own id as the
        name with no derived code.
        """
        color: Color | None = self._colors.get_by_id(color_id)
        legacy_code = lure.legacy_code_for(color_id)

        if color is None:
            return ResolvedColor(color_id=color_id, name=color_id, legacy_code=legacy_code)

        return ResolvedColor(
            color_id=color_id,
            name=color.name,
            found=True,
            derived_code=compute_lure_code(lure.number, color.company_id),
            legacy_code=legacy_code,
            color_legacy_ids=color.pre1925_id or (),
        )

    def describe_lure(self, lure: Lure) -> LureColorSheet:
        """Resolve every standard and rare color of a lure, in document order."""
        return LureColorSheet(
            lure=lure,
            colors=tuple(self.resolve_color_for_lure(lure, c) for c in lure.colors or ()),
            rare_colors=tuple(
                self.resolve_color_for_lure(lure, c) for c in lure.rare_colors or ()
            ),
        )
