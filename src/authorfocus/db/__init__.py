"""Database layer."""

from .base import Base, IntegerPrimaryKeyMixin, TimestampMixin, create_engine, create_session_factory
from .models import AuthorModel, AuthorThumbnailModel, ProductModel
from .repositories import AuthorRepository, BaseRepository, ProductRepository
from .session import DatabaseManager

__all__ = [
    # Base
    "Base",
    "IntegerPrimaryKeyMixin",
    "TimestampMixin",
    "create_engine",
    "create_session_factory",
    # Models
    "AuthorModel",
    "AuthorThumbnailModel",
    "ProductModel",
    # Repositories
    "AuthorRepository",
    "BaseRepository",
    "ProductRepository",
    # Session
    "DatabaseManager",
]
