"""Infrastructure layer implementations."""

from luredb.infrastructure import catalog

__all__ = ["catalog"]
