"""Product repository with same-author queries."""

from collections.abc import Collection, Sequence

from sqlalchemy import ColumnElement, func, select

from authorfocus.core.types import OrderDirection, ProductOrderBy, ProductStatus
from authorfocus.db.models.associations import product_author_association
from authorfocus.db.models.product import ProductModel
from authorfocus.db.repositories.base import BaseRepository


class ProductRepository(BaseRepository[ProductModel]):
    """Repository for Product entities with specialized queries."""

    model = ProductModel

    async def author_ids_for(self, product_id: int) -> list[int]:
        """IDs of the authors linked to a product."""
        stmt = (
            select(product_author_association.c.author_id)
            .where(product_author_association.c.product_id == product_id)
            .order_by(product_author_association.c.author_id)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def list_published_by_author(self, author_id: int) -> Sequence[ProductModel]:
        """Published products linked to an author, newest first."""
        stmt = (
            select(ProductModel)
            .join(
                product_author_association,
                product_author_association.c.product_id == ProductModel.id,
            )
            .where(
                product_author_association.c.author_id == author_id,
                ProductModel.status == ProductStatus.PUBLISH,
            )
            .order_by(ProductModel.published_at.desc(), ProductModel.id.desc())
        )
        result = await self._session.execute(stmt)
        return result.scalars().all()

    async def find_by_authors(
        self,
        author_ids: Collection[int],
        *,
        order_by: ProductOrderBy = ProductOrderBy.DATE,
        order_direction: OrderDirection = OrderDirection.DESC,
        limit: int = 4,
        exclude_ids: Collection[int] = (),
    ) -> Sequence[ProductModel]:
        """
        Published products linked to ANY of the given authors.

        Args:
            author_ids: Authors to match (a product matches if it shares one)
            order_by: Sort key
            order_direction: Sort direction, ignored for random ordering
            limit: Maximum number of products
            exclude_ids: Product IDs removed before the limit is applied

        Returns:
            Distinct matching products in the requested order
        """
        if not author_ids or limit < 1:
            return []

        linked = select(product_author_association.c.product_id).where(
            product_author_association.c.author_id.in_(list(author_ids))
        )
        stmt = select(ProductModel).where(
            ProductModel.status == ProductStatus.PUBLISH,
            ProductModel.id.in_(linked),
        )
        if exclude_ids:
            stmt = stmt.where(ProductModel.id.not_in(list(exclude_ids)))

        stmt = stmt.order_by(*self._ordering(order_by, order_direction)).limit(limit)
        result = await self._session.execute(stmt)
        return result.scalars().all()

    @staticmethod
    def _ordering(
        order_by: ProductOrderBy,
        order_direction: OrderDirection,
    ) -> list[ColumnElement]:
        """ORDER BY clauses for a sort key; ties break on ID in the same direction."""
        if order_by == ProductOrderBy.RANDOM:
            return [func.random()]

        key: ColumnElement
        if order_by == ProductOrderBy.PRICE:
            key = func.coalesce(ProductModel.price, 0)
        elif order_by == ProductOrderBy.SALES:
            key = func.coalesce(ProductModel.sales_count, 0)
        elif order_by == ProductOrderBy.TITLE:
            key = ProductModel.title
        else:
            key = ProductModel.published_at

        if order_direction == OrderDirection.ASC:
            return [key.asc(), ProductModel.id.asc()]
        return [key.desc(), ProductModel.id.desc()]
