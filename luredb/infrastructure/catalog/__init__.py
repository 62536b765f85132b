"""Catalog source implementations."""

from luredb.infrastructure.catalog.json_source import JsonCatalogSource
from luredb.infrastructure.catalog.memory_source import InMemoryCatalogSource
from luredb.infrastructure.catalog.parser import parse_catalog

__all__ = [
    "JsonCatalogSource",
    "InMemoryCatalogSource",
    "parse_catalog",
]
