"""Service layer for author rankings and product lookups."""

from .product_authors import ProductAuthorsService
from .ranking import AuthorRankingService, clamp_focus_limit
from .related import RelatedProductsService
from .thumbnails import fetch_thumbnails

__all__ = [
    "AuthorRankingService",
    "ProductAuthorsService",
    "RelatedProductsService",
    "clamp_focus_limit",
    "fetch_thumbnails",
]
