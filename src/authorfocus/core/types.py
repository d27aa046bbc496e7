"""Core enums and type definitions."""

from enum import StrEnum


class ProductStatus(StrEnum):
    """Publication status of a catalog product."""

    PUBLISH = "publish"
    DRAFT = "draft"
    PENDING = "pending"
    PRIVATE = "private"
    TRASH = "trash"


class RankingTier(StrEnum):
    """Ranking strategies of the authors on focus cascade, in fallback order."""

    SALES = "sales"  # Summed sales of published products
    FEATURED = "featured"  # Count of published featured products
    CATALOG = "catalog"  # Count of any published products


class ProductOrderBy(StrEnum):
    """Sort keys accepted by the same-author product lookup."""

    DATE = "date"
    PRICE = "price"
    RANDOM = "rand"
    SALES = "sales"
    TITLE = "title"


class OrderDirection(StrEnum):
    """Sort direction."""

    ASC = "ASC"
    DESC = "DESC"
