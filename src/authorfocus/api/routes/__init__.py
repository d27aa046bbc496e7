"""API route modules."""

from authorfocus.api.routes.authors import router as authors_router
from authorfocus.api.routes.health import router as health_router
from authorfocus.api.routes.products import router as products_router

__all__ = [
    "authors_router",
    "health_router",
    "products_router",
]
