"""API route modules."""

from luredb.api.routes.catalog import router as catalog_router
from luredb.api.routes.colors import router as colors_router
from luredb.api.routes.health import router as health_router
from luredb.api.routes.lures import router as lures_router

__all__ = [
    "health_router",
    "colors_router",
    "lures_router",
    "catalog_router",
]
