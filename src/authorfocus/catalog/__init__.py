"""Catalog store implementations."""

from .base import AbstractCatalogStore
from .memory import MemoryCatalogStore
from .sql import SqlCatalogStore

__all__ = [
    "AbstractCatalogStore",
    "MemoryCatalogStore",
    "SqlCatalogStore",
]
