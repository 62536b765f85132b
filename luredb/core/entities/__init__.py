"""Core domain entities."""

from luredb.core.entities.catalog import (
    Catalog,
    CatalogIndexes,
    ColorEntry,
    LureEntry,
    ManufacturerEntry,
)
from luredb.core.entities.color import Color
from luredb.core.entities.lure import LegacyCode, Lure
from luredb.core.entities.resolution import LureColorSheet, ResolvedColor

__all__ = [
    # Source document
    "Catalog",
    "CatalogIndexes",
    "ManufacturerEntry",
    "ColorEntry",
    "LureEntry",
    # Cached records
    "Color",
    "Lure",
    "LegacyCode",
    # Cross-reference
    "ResolvedColor",
    "LureColorSheet",
]
