"""
Service factory functions for dependency injection.

Wires the configured catalog source to the core indexes and resolver.
Both indexes share one loader so a reload reads the document once.

Clean Architecture: Application layer orchestrates DI, not core layer.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from luredb.config import get_logger, get_settings
from luredb.core.services import (
    CatalogGeneration,
    CatalogLoader,
    ColorIndex,
    ColorResolver,
    LureIndex,
)

if TYPE_CHECKING:
    from luredb.core.interfaces import ICatalogSource

logger = get_logger(__name__)


@dataclass
class CatalogServices:
    """The loader, both indexes and the resolver built on them.

    Both indexes read from one CatalogGeneration, so a reload publishes
    the new colors and the new lures together.
    """

    loader: CatalogLoader
    colors: ColorIndex
    lures: LureIndex
    resolver: ColorResolver
    generation: CatalogGeneration

    def reload(self) -> bool:
        """
        Read the catalog once and rebuild both indexes from it.

        Returns:
            True if the catalog loaded, False if the indexes are now empty.
        """
        catalog = self.loader.load()
        snapshots = {
            self.colors.profile.name: self.colors.build(catalog),
            self.lures.profile.name: self.lures.build(catalog),
        }
        self.generation.publish(snapshots, loaded=catalog is not None)

        logger.info(
            "catalog_reloaded",
            loaded=catalog is not None,
            colors=self.colors.count,
            lures=self.lures.count,
        )
        return catalog is not None


# Singleton service instance
_catalog_services: CatalogServices | None = None


def build_catalog_services(
    source: "ICatalogSource",
    use_advisory_indexes: bool = True,
) -> CatalogServices:
    """Build and load a fresh set of catalog services over `source`."""
    loader = CatalogLoader(source)
    generation = CatalogGeneration()
    colors = ColorIndex(
        loader, use_advisory_indexes=use_advisory_indexes, generation=generation
    )
    services = CatalogServices(
        loader=loader,
        colors=colors,
        lures=LureIndex(loader, generation),
        resolver=ColorResolver(colors),
        generation=generation,
    )
    services.reload()
    return services


def get_catalog_services(source: "ICatalogSource | None" = None) -> CatalogServices:
    """
    Get or create the CatalogServices instance.

    Creates a JSON file source from settings if none is provided.
    Uses singleton pattern; an explicit source builds an unshared instance.

    Args:
        source: Optional catalog source override

    Returns:
        Loaded CatalogServices
    """
    global _catalog_services

    if _catalog_services is not None and source is None:
        return _catalog_services

    settings = get_settings()

    # Lazy import infrastructure to avoid circular imports
    from luredb.infrastructure.catalog import JsonCatalogSource

    catalog_source = source or JsonCatalogSource(settings.catalog.data_path)
    services = build_catalog_services(
        catalog_source,
        use_advisory_indexes=settings.catalog.use_advisory_indexes,
    )

    if source is None:
        _catalog_services = services

    return services


def set_catalog_services(services: CatalogServices | None) -> None:
    """Install (or clear) the shared instance, for hosts and tests."""
    global _catalog_services
    _catalog_services = services


def get_color_index() -> ColorIndex:
    return get_catalog_services().colors


def get_lure_index() -> LureIndex:
    return get_catalog_services().lures
