"""
Abstract interface for catalog sources.

A source produces one parsed Catalog per read. Implementations raise
CatalogLoadError on any failure; deciding what to do about it is the
loader's job.
"""

from abc import ABC, abstractmethod

from luredb.core.entities.catalog import Catalog


class ICatalogSource(ABC):
    """Abstract interface for reading the catalog document."""

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable description of where the catalog comes from."""

    @abstractmethod
    def read(self) -> Catalog:
        """Read and validate the catalog, raising CatalogLoadError on failure."""
