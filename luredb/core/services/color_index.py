"""
Color index.

Flattens every manufacturer's colors into one cache searchable by id,
name, company code, pre-1925 ids and manufacturer name.
"""

from collections.abc import Iterable, Mapping, Sequence

from luredb.core.entities.catalog import Catalog
from luredb.core.entities.color import Color
from luredb.core.services.catalog_loader import CatalogLoader
from luredb.core.services.record_index import CatalogGeneration, RecordIndex
from luredb.core.services.record_search import SearchProfile


def _color_fields(color: Color) -> Iterable[str | None]:
    yield color.id
    yield color.name
    yield color.company_id
    yield from color.pre1925_id or ()
    yield color.manufacturer_name


COLOR_PROFILE: SearchProfile[Color] = SearchProfile(
    name="color",
    primary_key=lambda c: c.id,
    display_name=lambda c: c.name,
    fields=_color_fields,
    code=lambda c: c.company_id,
    unique_key=True,
)


class ColorIndex(RecordIndex[Color]):
    """Searchable cache of every color in the catalog."""

    profile = COLOR_PROFILE

    def __init__(
        self,
        loader: CatalogLoader | None = None,
        use_advisory_indexes: bool = True,
        generation: CatalogGeneration | None = None,
    ) -> None:
        super().__init__(loader, generation)
        self._use_advisory_indexes = use_advisory_indexes

    def _flatten(self, catalog: Catalog) -> Sequence[Color]:
        colors: list[Color] = []
        for manufacturer_id, manufacturer in catalog.manufacturers.items():
            if not manufacturer.colors:
                continue
            for entry in manufacturer.colors:
                colors.append(
                    Color(
                        id=entry.id,
                        name=entry.name,
                        year_introduced=entry.year_introduced,
                        year_last_used=entry.year_last_used,
                        company_id=entry.company_id,
                        pre1925_id=tuple(entry.pre1925_id)
                        if entry.pre1925_id is not None
                        else None,
                        manufacturer_id=manufacturer_id,
                        manufacturer_name=manufacturer.name,
                    )
                )
        return colors

    def _code_hints(self, catalog: Catalog) -> Mapping[str, Sequence[str]] | None:
        if not self._use_advisory_indexes or catalog.indexes is None:
            return None
        return catalog.indexes.by_company_id

    def get_by_id(self, color_id: str) -> Color | None:
        """Exact, case-sensitive id lookup."""
        snapshot = self._snapshot
        position = snapshot.by_exact_key.get(color_id)
        return snapshot.records[position] if position is not None else None

    def get_by_company_id(self, company_id: str) -> list[Color]:
        """Every color, across all manufacturers, carrying this company code."""
        snapshot = self._snapshot
        return [snapshot.records[p] for p in snapshot.by_code.get(company_id, ())]

    def get_by_manufacturer(self, manufacturer_id: str) -> list[Color]:
        return [c for c in self._snapshot.records if c.manufacturer_id == manufacturer_id]

    def get_by_year_introduced(self, year: int) -> list[Color]:
        return [c for c in self._snapshot.records if c.year_introduced == year]
