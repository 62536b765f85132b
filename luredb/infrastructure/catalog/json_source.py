"""
JSON file catalog source.
"""

import json
from pathlib import Path

from luredb.config import get_logger
from luredb.core.entities.catalog import Catalog
from luredb.core.exceptions import CatalogLoadError
from luredb.core.interfaces.catalog_source import ICatalogSource
from luredb.infrastructure.catalog.parser import parse_catalog

logger = get_logger(__name__)


class JsonCatalogSource(ICatalogSource):
    """Reads the catalog from a UTF-8 JSON file on disk."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def location(self) -> str:
        return str(self._path)

    def read(self) -> Catalog:
        try:
            content = self._path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise CatalogLoadError(self.location, "file not found") from e
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogLoadError(self.location, str(e)) from e

        try:
            document = json.loads(content)
        except json.JSONDecodeError as e:
            raise CatalogLoadError(
                self.location, f"invalid JSON at line {e.lineno} column {e.colno}: {e.msg}"
            ) from e

        logger.debug("catalog_document_read", source=self.location, size=len(content))
        return parse_catalog(document, source=self.location)
