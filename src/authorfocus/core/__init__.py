"""Core types, models, and utilities."""

from .exceptions import AuthorFocusError, StoreUnavailableError
from .models import Author, Product, RankedAuthor, RankedAuthorList, Thumbnail
from .text import (
    author_initials,
    book_count_label,
    clamp,
    normalize_text,
    parse_bool,
    parse_int,
    slugify,
    trim_words,
)
from .types import OrderDirection, ProductOrderBy, ProductStatus, RankingTier

__all__ = [
    # Types
    "OrderDirection",
    "ProductOrderBy",
    "ProductStatus",
    "RankingTier",
    # Models
    "Author",
    "Product",
    "RankedAuthor",
    "RankedAuthorList",
    "Thumbnail",
    # Text
    "author_initials",
    "book_count_label",
    "clamp",
    "normalize_text",
    "parse_bool",
    "parse_int",
    "slugify",
    "trim_words",
    # Exceptions
    "AuthorFocusError",
    "StoreUnavailableError",
]
