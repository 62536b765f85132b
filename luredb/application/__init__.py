"""
Application layer - Use cases, DTOs, and service factories.

This layer orchestrates the core by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services
3. Providing factory functions for dependency injection

Use cases are the only entry point for API handlers.
"""

from luredb.application.services import (
    CatalogServices,
    build_catalog_services,
    get_catalog_services,
    set_catalog_services,
)
from luredb.application.use_cases import (
    DescribeLureUseCase,
    ReloadCatalogUseCase,
    SearchColorsUseCase,
    SearchLuresUseCase,
)

__all__ = [
    # Services
    "CatalogServices",
    "build_catalog_services",
    "get_catalog_services",
    "set_catalog_services",
    # Use cases
    "SearchColorsUseCase",
    "SearchLuresUseCase",
    "DescribeLureUseCase",
    "ReloadCatalogUseCase",
]
