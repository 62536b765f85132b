"""Application use cases."""

from luredb.application.use_cases.describe_lure import DescribeLureUseCase
from luredb.application.use_cases.reload_catalog import ReloadCatalogUseCase
from luredb.application.use_cases.search_catalog import (
    SearchColorsUseCase,
    SearchLuresUseCase,
    SearchResultDTO,
)

__all__ = [
    "SearchColorsUseCase",
    "SearchLuresUseCase",
    "SearchResultDTO",
    "DescribeLureUseCase",
    "ReloadCatalogUseCase",
]
