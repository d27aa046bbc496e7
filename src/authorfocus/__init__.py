"""Authorfocus - author rankings and same-author product lookups for book catalogs."""

__version__ = "0.1.0"

from authorfocus.catalog import AbstractCatalogStore, MemoryCatalogStore, SqlCatalogStore  # noqa: E402
from authorfocus.core.exceptions import AuthorFocusError, StoreUnavailableError  # noqa: E402
from authorfocus.core.models import (  # noqa: E402
    Author,
    Product,
    RankedAuthor,
    RankedAuthorList,
    Thumbnail,
)
from authorfocus.core.types import (  # noqa: E402
    OrderDirection,
    ProductOrderBy,
    ProductStatus,
    RankingTier,
)
from authorfocus.services import (  # noqa: E402
    AuthorRankingService,
    ProductAuthorsService,
    RelatedProductsService,
)

__all__ = [
    # Stores
    "AbstractCatalogStore",
    "MemoryCatalogStore",
    "SqlCatalogStore",
    # Services
    "AuthorRankingService",
    "ProductAuthorsService",
    "RelatedProductsService",
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
    # Errors
    "AuthorFocusError",
    "StoreUnavailableError",
    # Version
    "__version__",
]
