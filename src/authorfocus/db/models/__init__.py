"""Database models."""

from .associations import product_author_association
from .author import AuthorModel, AuthorThumbnailModel
from .product import ProductModel

__all__ = [
    "AuthorModel",
    "AuthorThumbnailModel",
    "ProductModel",
    "product_author_association",
]
