"""
Describe Lure Use Case.

Builds color sheets (every standard and rare color resolved to a name,
lure code and pre-1925 code) for the lures carrying a given number.
"""

from luredb.application.dto.responses import (
    LureResponse,
    LureSheetResponse,
    ResolvedColorResponse,
)
from luredb.application.services import get_catalog_services
from luredb.config import get_logger
from luredb.core.entities import LureColorSheet
from luredb.core.exceptions import LureNotFoundError
from luredb.core.services import ColorResolver, LureIndex

logger = get_logger(__name__)


class DescribeLureUseCase:
    """Use case for resolving a lure's colors for display."""

    def __init__(
        self,
        lure_index: LureIndex | None = None,
        resolver: ColorResolver | None = None,
    ):
        self._lures = lure_index
        self._resolver = resolver

    def _wire(self) -> tuple[LureIndex, ColorResolver]:
        if self._lures is None or self._resolver is None:
            services = get_catalog_services()
            self._lures = self._lures or services.lures
            self._resolver = self._resolver or services.resolver
        return self._lures, self._resolver

    async def execute(self, number: int | str) -> list[LureColorSheet]:
        """
        Resolve every lure with this number.

        Raises:
            LureNotFoundError: If no lure carries the number.
        """
        lures, resolver = self._wire()
        matches = lures.get_by_number(number)
        if not matches:
            raise LureNotFoundError(number)

        sheets = [resolver.describe_lure(lure) for lure in matches]
        unresolved = sum(
            1 for sheet in sheets for c in (*sheet.colors, *sheet.rare_colors) if not c.found
        )
        if unresolved:
            logger.debug("lure_colors_unresolved", number=str(number), count=unresolved)
        return sheets

    def to_response(self, sheets: list[LureColorSheet]) -> list[LureSheetResponse]:
        """Convert to API response format."""
        return [
            LureSheetResponse(
                lure=LureResponse.from_entity(sheet.lure),
                colors=[ResolvedColorResponse.from_entity(c) for c in sheet.colors],
                rare_colors=[ResolvedColorResponse.from_entity(c) for c in sheet.rare_colors],
            )
            for sheet in sheets
        ]
