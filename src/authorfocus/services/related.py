"""Related products by author: other published products sharing an author."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from authorfocus.core.models import Product
from authorfocus.core.types import OrderDirection, ProductOrderBy

if TYPE_CHECKING:
    from authorfocus.catalog.base import AbstractCatalogStore

logger = logging.getLogger(__name__)


class RelatedProductsService:
    """Finds products by the same author(s) as a given product."""

    def __init__(self, store: "AbstractCatalogStore") -> None:
        self._store = store

    async def products_by_same_author(
        self,
        product_id: int,
        limit: int,
        order_by: ProductOrderBy = ProductOrderBy.DATE,
        order_direction: OrderDirection = OrderDirection.DESC,
        exclude_self: bool = True,
    ) -> list[Product]:
        """
        Published products linked to ANY author of ``product_id``.

        Args:
            product_id: Product whose authors are matched
            limit: Maximum number of products (callers clamp; below 1 yields nothing)
            order_by: Sort key; random ordering ignores ``order_direction``
            order_direction: Ascending or descending
            exclude_self: Remove ``product_id`` itself before limiting

        Returns:
            Matching products, empty when the product has no authors

        Raises:
            StoreUnavailableError: If the catalog store cannot be queried
        """
        author_ids = await self._store.list_authors_for_product(product_id)
        if not author_ids:
            logger.debug(f"Product {product_id} has no authors, nothing related")
            return []

        return await self._store.find_products_by_authors(
            author_ids,
            order_by=order_by,
            order_direction=order_direction,
            limit=limit,
            exclude_ids=(product_id,) if exclude_self else (),
        )
