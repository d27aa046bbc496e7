"""Author repository with ranking and taxonomy queries."""

from typing import Sequence

from sqlalchemy import ColumnElement, Select, func, select

from authorfocus.core.types import ProductStatus
from authorfocus.db.models.associations import product_author_association
from authorfocus.db.models.author import AuthorModel, AuthorThumbnailModel
from authorfocus.db.models.product import ProductModel
from authorfocus.db.repositories.base import BaseRepository


class AuthorRepository(BaseRepository[AuthorModel]):
    """Repository for Author entities with specialized queries."""

    model = AuthorModel

    async def list_for_product(self, product_id: int, *, limit: int = 0) -> Sequence[AuthorModel]:
        """Authors linked to a product, ordered by name. ``limit <= 0`` returns all."""
        stmt = (
            select(AuthorModel)
            .join(
                product_author_association,
                product_author_association.c.author_id == AuthorModel.id,
            )
            .where(product_author_association.c.product_id == product_id)
            .order_by(AuthorModel.name.asc(), AuthorModel.id.asc())
        )
        if limit > 0:
            stmt = stmt.limit(limit)

        result = await self._session.execute(stmt)
        return result.scalars().all()

    async def rank_by_sales(self, limit: int) -> list[tuple[AuthorModel, int]]:
        """
        Authors ranked by summed sales of their published products.

        Products without a sales count contribute zero; authors whose total
        is zero are left out.
        """
        total_sales = func.sum(func.coalesce(ProductModel.sales_count, 0))
        stmt = (
            self._published_join(total_sales.label("score"))
            .having(total_sales > 0)
            .order_by(total_sales.desc(), AuthorModel.name.asc(), AuthorModel.id.asc())
            .limit(limit)
        )
        return await self._ranked(stmt)

    async def rank_by_featured(self, limit: int) -> list[tuple[AuthorModel, int]]:
        """Authors ranked by their number of distinct published featured products."""
        featured_count = func.count(ProductModel.id.distinct())
        stmt = (
            self._published_join(featured_count.label("score"))
            .where(ProductModel.is_featured.is_(True))
            .order_by(featured_count.desc(), AuthorModel.name.asc(), AuthorModel.id.asc())
            .limit(limit)
        )
        return await self._ranked(stmt)

    async def rank_by_product_count(self, limit: int) -> list[tuple[AuthorModel, int]]:
        """Authors ranked by their number of distinct published products."""
        product_count = func.count(ProductModel.id.distinct())
        stmt = (
            self._published_join(product_count.label("score"))
            .order_by(product_count.desc(), AuthorModel.name.asc(), AuthorModel.id.asc())
            .limit(limit)
        )
        return await self._ranked(stmt)

    async def count_published_products(self, author_id: int) -> int:
        """Number of published products linked to an author."""
        stmt = (
            select(func.count(ProductModel.id.distinct()))
            .join(
                product_author_association,
                product_author_association.c.product_id == ProductModel.id,
            )
            .where(
                product_author_association.c.author_id == author_id,
                ProductModel.status == ProductStatus.PUBLISH,
            )
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def get_thumbnail(self, author_id: int) -> AuthorThumbnailModel | None:
        """Get the thumbnail custom field of an author, if set."""
        return await self._session.get(AuthorThumbnailModel, author_id)

    @staticmethod
    def _published_join(score: ColumnElement[int]) -> Select:
        """Authors joined to their published products, grouped per author."""
        return (
            select(AuthorModel, score)
            .join(
                product_author_association,
                product_author_association.c.author_id == AuthorModel.id,
            )
            .join(ProductModel, ProductModel.id == product_author_association.c.product_id)
            .where(ProductModel.status == ProductStatus.PUBLISH)
            .group_by(AuthorModel.id)
        )

    async def _ranked(self, stmt: Select) -> list[tuple[AuthorModel, int]]:
        result = await self._session.execute(stmt)
        return [(author, int(score)) for author, score in result.all()]
