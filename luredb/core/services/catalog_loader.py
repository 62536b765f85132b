"""
Catalog loading boundary.

Load failures stop here: they are logged and turned into "no catalog",
so every index built from the result stays queryable.
"""

from luredb.config import get_logger
from luredb.core.entities.catalog import Catalog
from luredb.core.exceptions import CatalogLoadError
from luredb.core.interfaces.catalog_source import ICatalogSource

logger = get_logger(__name__)


class CatalogLoader:
    """
    Reads a catalog from a source without ever raising.

    `last_error` keeps the most recent failure (None after a good load)
    so health checks can report why the catalog is empty.
    """

    def __init__(self, source: ICatalogSource) -> None:
        self._source = source
        self.last_error: CatalogLoadError | None = None

    @property
    def source(self) -> ICatalogSource:
        return self._source

    def load(self) -> Catalog | None:
        """Load the catalog, or return None if the source is unusable."""
        try:
            catalog = self._source.read()
        except CatalogLoadError as e:
            self.last_error = e
            logger.error(
                "catalog_load_failed",
                source=self._source.location,
                reason=e.details.get("reason"),
            )
            return None

        self.last_error = None
        logger.info(
            "catalog_loaded",
            source=self._source.location,
            manufacturers=len(catalog.manufacturers),
        )
        return catalog
