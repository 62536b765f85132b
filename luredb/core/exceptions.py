"""
Domain exceptions for LureDB.

Search never raises these; they surface from the loader boundary
(where they are logged and swallowed) and from direct lookups made
by the application layer.
"""

from typing import Any


class LureDBError(Exception):
    """Base exception for all LureDB errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Catalog Exceptions
class CatalogError(LureDBError):
    """Base exception for catalog operations."""

    pass


class CatalogLoadError(CatalogError):
    """Catalog document is missing, unreadable, or structurally invalid."""

    def __init__(self, source: str, reason: str):
        super().__init__(
            f"Failed to load catalog from '{source}': {reason}",
            code="CATALOG_LOAD_FAILED",
            details={"source": source, "reason": reason},
        )


class ColorNotFoundError(CatalogError):
    """Color id not present in the color index."""

    def __init__(self, color_id: str):
        super().__init__(
            f"Color not found: {color_id}",
            code="COLOR_NOT_FOUND",
            details={"color_id": color_id},
        )


class LureNotFoundError(CatalogError):
    """No lure carries the requested number."""

    def __init__(self, number: int | str):
        super().__init__(
            f"Lure not found: {number}",
            code="LURE_NOT_FOUND",
            details={"number": str(number)},
        )


class ConfigurationError(LureDBError):
    """Configuration error."""

    pass
