"""
Core catalog services.

Layer-pure services that depend only on:
- luredb/core/entities/*
- luredb/core/interfaces/*
- luredb/core/exceptions.py

NO infrastructure imports. Catalog sources are injected via constructor.
"""

from luredb.core.services.catalog_loader import CatalogLoader
from luredb.core.services.color_index import COLOR_PROFILE, ColorIndex
from luredb.core.services.color_resolver import (
    ColorResolver,
    coerce_lure_number,
    compute_lure_code,
)
from luredb.core.services.lure_index import LURE_PROFILE, LureIndex
from luredb.core.services.record_index import CatalogGeneration, RecordIndex
from luredb.core.services.record_search import (
    MatchStrategy,
    RecordSnapshot,
    SearchOutcome,
    SearchProfile,
)

__all__ = [
    # Loading
    "CatalogLoader",
    # Generic search
    "RecordIndex",
    "CatalogGeneration",
    "RecordSnapshot",
    "SearchProfile",
    "SearchOutcome",
    "MatchStrategy",
    # Colors
    "ColorIndex",
    "COLOR_PROFILE",
    # Lures
    "LureIndex",
    "LURE_PROFILE",
    # Cross-reference
    "ColorResolver",
    "compute_lure_code",
    "coerce_lure_number",
]
