"""
Lure index.

Flattens every manufacturer's lures into one cache searchable by name,
number and manufacturer name. Numbers are matched by their string form,
so 700 and "700" are the same lure number.
"""

from collections.abc import Iterable, Sequence

from luredb.core.entities.catalog import Catalog
from luredb.core.entities.lure import LegacyCode, Lure
from luredb.core.services.record_index import RecordIndex
from luredb.core.services.record_search import SearchProfile


def _lure_fields(lure: Lure) -> Iterable[str | None]:
    return (lure.name, lure.number_label, lure.manufacturer_name)


LURE_PROFILE: SearchProfile[Lure] = SearchProfile(
    name="lure",
    primary_key=lambda lure: lure.number_label,
    display_name=lambda lure: lure.name,
    fields=_lure_fields,
)


class LureIndex(RecordIndex[Lure]):
    """Searchable cache of every lure model in the catalog."""

    profile = LURE_PROFILE

    def _flatten(self, catalog: Catalog) -> Sequence[Lure]:
        lures: list[Lure] = []
        for manufacturer_id, manufacturer in catalog.manufacturers.items():
            if not manufacturer.lures:
                continue
            for entry in manufacturer.lures:
                legacy = None
                if entry.pre1925_codes is not None:
                    legacy = tuple(
                        LegacyCode(color_id=color_id, code=code)
                        for mapping in entry.pre1925_codes
                        for color_id, code in mapping.items()
                    )
                lures.append(
                    Lure(
                        name=entry.name,
                        number=entry.number,
                        year_introduced=entry.year_introduced,
                        year_last_mfg=entry.year_last_mfg,
                        length=entry.length,
                        weight=entry.weight,
                        eyes=entry.eyes,
                        colors=tuple(entry.colors) if entry.colors is not None else None,
                        rare_colors=tuple(entry.rare_colors)
                        if entry.rare_colors is not None
                        else None,
                        pre1925_codes=legacy,
                        notes=entry.notes,
                        manufacturer_id=manufacturer_id,
                        manufacturer_name=manufacturer.name,
                    )
                )
        return lures

    def get_by_number(self, number: int | str) -> list[Lure]:
        """All lures, across manufacturers, whose number has this string form."""
        label = str(number)
        return [lure for lure in self._snapshot.records if lure.number_label == label]

    def get_by_name(self, name: str) -> Lure | None:
        """First lure whose name matches, ignoring case."""
        lowered = name.lower()
        for lure in self._snapshot.records:
            if lure.name.lower() == lowered:
                return lure
        return None

    def get_by_manufacturer(self, manufacturer_id: str) -> list[Lure]:
        return [
            lure for lure in self._snapshot.records if lure.manufacturer_id == manufacturer_id
        ]
