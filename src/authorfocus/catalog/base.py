"""Abstract catalog store: the read-only boundary to products, authors and custom fields."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Collection

from authorfocus.core.models import Author, Product, RankedAuthor, Thumbnail
from authorfocus.core.types import OrderDirection, ProductOrderBy


class AbstractCatalogStore(ABC):
    """
    Read-only access to the product catalog and the author taxonomy.

    Implementations raise ``StoreUnavailableError`` when the underlying
    storage cannot be queried. Empty results are returned as empty lists,
    never as errors.
    """

    # Taxonomy lookups

    @abstractmethod
    async def get_author(self, author_id: int) -> Author | None:
        """Get an author by ID."""
        ...

    @abstractmethod
    async def list_authors_for_product(self, product_id: int) -> list[int]:
        """IDs of the authors linked to a product."""
        ...

    @abstractmethod
    async def list_author_terms(self, product_id: int, limit: int = 0) -> list[Author]:
        """Authors linked to a product ordered by name; ``limit <= 0`` means all."""
        ...

    @abstractmethod
    async def get_thumbnail_for_author(self, author_id: int) -> Thumbnail | None:
        """Thumbnail custom field of an author, or None when unset."""
        ...

    # Product lookups

    @abstractmethod
    async def list_published_products_by_author(self, author_id: int) -> list[Product]:
        """Published products linked to an author."""
        ...

    @abstractmethod
    async def count_published_products(self, author_id: int) -> int:
        """Number of published products linked to an author."""
        ...

    @abstractmethod
    async def find_products_by_authors(
        self,
        author_ids: Collection[int],
        *,
        order_by: ProductOrderBy = ProductOrderBy.DATE,
        order_direction: OrderDirection = OrderDirection.DESC,
        limit: int = 4,
        exclude_ids: Collection[int] = (),
    ) -> list[Product]:
        """Published products sharing at least one of ``author_ids``, sorted and limited."""
        ...

    # Ranking tiers

    @abstractmethod
    async def authors_by_sales(self, limit: int) -> list[RankedAuthor]:
        """Authors with positive summed sales of published products, highest first."""
        ...

    @abstractmethod
    async def authors_by_featured(self, limit: int) -> list[RankedAuthor]:
        """Authors with published featured products, by featured count then name."""
        ...

    @abstractmethod
    async def authors_by_product_count(self, limit: int) -> list[RankedAuthor]:
        """Authors with published products, by product count then name."""
        ...
