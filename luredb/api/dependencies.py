"""
Dependency injection container for FastAPI.

Provides service instances to route handlers. Tests override
`get_services` to point every route at an in-memory catalog.
"""

from functools import lru_cache

from fastapi import Depends

from luredb.application.services import CatalogServices, get_catalog_services
from luredb.application.use_cases import (
    DescribeLureUseCase,
    ReloadCatalogUseCase,
    SearchColorsUseCase,
    SearchLuresUseCase,
)
from luredb.config import Settings, get_settings


@lru_cache
def get_app_settings() -> Settings:
    """Get cached application settings."""
    return get_settings()


def get_services() -> CatalogServices:
    """Get the shared catalog services."""
    return get_catalog_services()


# Use case dependencies
def get_search_colors_use_case(
    services: CatalogServices = Depends(get_services),
) -> SearchColorsUseCase:
    """Get search colors use case."""
    return SearchColorsUseCase(color_index=services.colors)


def get_search_lures_use_case(
    services: CatalogServices = Depends(get_services),
) -> SearchLuresUseCase:
    """Get search lures use case."""
    return SearchLuresUseCase(lure_index=services.lures)


def get_describe_lure_use_case(
    services: CatalogServices = Depends(get_services),
) -> DescribeLureUseCase:
    """Get describe lure use case."""
    return DescribeLureUseCase(lure_index=services.lures, resolver=services.resolver)


def get_reload_catalog_use_case(
    services: CatalogServices = Depends(get_services),
) -> ReloadCatalogUseCase:
    """Get reload catalog use case."""
    return ReloadCatalogUseCase(services=services)
