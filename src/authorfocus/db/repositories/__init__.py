"""Repository implementations."""

from .author import AuthorRepository
from .base import BaseRepository
from .product import ProductRepository

__all__ = ["AuthorRepository", "BaseRepository", "ProductRepository"]
