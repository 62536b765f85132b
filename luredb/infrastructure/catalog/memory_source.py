"""
In-memory catalog source, for embedding hosts and tests.
"""

import copy
from typing import Any

from luredb.core.entities.catalog import Catalog
from luredb.core.interfaces.catalog_source import ICatalogSource
from luredb.infrastructure.catalog.parser import parse_catalog


class InMemoryCatalogSource(ICatalogSource):
    """Serves a decoded document; `replace()` swaps it for the next read."""

    def __init__(self, document: Any, name: str = "<memory>") -> None:
        self._document = copy.deepcopy(document)
        self._name = name

    @property
    def location(self) -> str:
        return self._name

    def replace(self, document: Any) -> None:
        self._document = copy.deepcopy(document)

    def read(self) -> Catalog:
        return parse_catalog(self._document, source=self._name)
