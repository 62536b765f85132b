"""
Catalog document validation.
"""

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from luredb.core.entities.catalog import Catalog
from luredb.core.exceptions import CatalogLoadError


def _summarize(error: PydanticValidationError, limit: int = 3) -> str:
    """First few validation problems as 'loc: msg' pairs."""
    parts = []
    for item in error.errors()[:limit]:
        loc = " -> ".join(str(part) for part in item["loc"]) or "<root>"
        parts.append(f"{loc}: {item['msg']}")
    if error.error_count() > limit:
        parts.append(f"... {error.error_count() - limit} more")
    return "; ".join(parts)


def parse_catalog(document: Any, source: str = "<memory>") -> Catalog:
    """
    Validate a decoded catalog document.

    Args:
        document: The decoded JSON value.
        source: Where the document came from, for error messages.

    Returns:
        The parsed Catalog.

    Raises:
        CatalogLoadError: If the document does not have the catalog shape.
    """
    if not isinstance(document, dict):
        raise CatalogLoadError(
            source, f"expected a JSON object at the top level, got {type(document).__name__}"
        )

    try:
        return Catalog.model_validate(document)
    except PydanticValidationError as e:
        raise CatalogLoadError(source, _summarize(e)) from e
