"""Author terms of a single product."""

from __future__ import annotations

from typing import TYPE_CHECKING

from authorfocus.core.models import Author

if TYPE_CHECKING:
    from authorfocus.catalog.base import AbstractCatalogStore


class ProductAuthorsService:
    """Looks up the authors attached to a product."""

    def __init__(self, store: "AbstractCatalogStore") -> None:
        self._store = store

    async def authors_for_product(self, product_id: int, limit: int = 0) -> list[Author]:
        """Authors of a product ordered by name; ``limit <= 0`` returns all of them."""
        return await self._store.list_author_terms(product_id, limit=max(limit, 0))
