"""Core interfaces implemented by the infrastructure layer."""

from luredb.core.interfaces.catalog_source import ICatalogSource

__all__ = ["ICatalogSource"]
