"""Catalog store backed by the SQLAlchemy repositories."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Collection
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from sqlalchemy.exc import SQLAlchemyError

from authorfocus.catalog.base import AbstractCatalogStore
from authorfocus.core.exceptions import StoreUnavailableError
from authorfocus.core.models import Author, Product, RankedAuthor, Thumbnail
from authorfocus.core.types import OrderDirection, ProductOrderBy
from authorfocus.db.repositories.author import AuthorRepository
from authorfocus.db.repositories.product import ProductRepository

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from authorfocus.db.models.author import AuthorModel
    from authorfocus.db.models.product import ProductModel

logger = logging.getLogger(__name__)


class SqlCatalogStore(AbstractCatalogStore):
    """
    Catalog store over a single async database session.

    Every query failure is rolled back and re-raised as
    ``StoreUnavailableError`` so callers can fall through to other
    strategies without handling driver-specific errors.
    """

    def __init__(self, session: "AsyncSession") -> None:
        """
        Initialize the store.

        Args:
            session: Database session used for all reads
        """
        self._session = session
        self._authors = AuthorRepository(session)
        self._products = ProductRepository(session)

    @asynccontextmanager
    async def _guard(self, operation: str) -> AsyncIterator[None]:
        """Translate database errors into StoreUnavailableError."""
        try:
            yield
        except SQLAlchemyError as e:
            logger.warning(f"Catalog query '{operation}' failed: {e}")
            try:
                await self._session.rollback()
            except SQLAlchemyError as rollback_error:
                logger.debug(f"Rollback after '{operation}' failed: {rollback_error}")
            raise StoreUnavailableError(
                f"Catalog store unavailable during {operation}",
                operation=operation,
                details={"error": str(e)},
            ) from e

    async def get_author(self, author_id: int) -> Author | None:
        async with self._guard("get_author"):
            model = await self._authors.get(author_id)
        return Author.model_validate(model) if model else None

    async def list_authors_for_product(self, product_id: int) -> list[int]:
        async with self._guard("list_authors_for_product"):
            return await self._products.author_ids_for(product_id)

    async def list_author_terms(self, product_id: int, limit: int = 0) -> list[Author]:
        async with self._guard("list_author_terms"):
            models = await self._authors.list_for_product(product_id, limit=limit)
        return [Author.model_validate(m) for m in models]

    async def get_thumbnail_for_author(self, author_id: int) -> Thumbnail | None:
        async with self._guard("get_thumbnail_for_author"):
            model = await self._authors.get_thumbnail(author_id)
        return Thumbnail.model_validate(model) if model else None

    async def list_published_products_by_author(self, author_id: int) -> list[Product]:
        async with self._guard("list_published_products_by_author"):
            models = await self._products.list_published_by_author(author_id)
        return [self._to_product(m) for m in models]

    async def count_published_products(self, author_id: int) -> int:
        async with self._guard("count_published_products"):
            return await self._authors.count_published_products(author_id)

    async def find_products_by_authors(
        self,
        author_ids: Collection[int],
        *,
        order_by: ProductOrderBy = ProductOrderBy.DATE,
        order_direction: OrderDirection = OrderDirection.DESC,
        limit: int = 4,
        exclude_ids: Collection[int] = (),
    ) -> list[Product]:
        async with self._guard("find_products_by_authors"):
            models = await self._products.find_by_authors(
                author_ids,
                order_by=order_by,
                order_direction=order_direction,
                limit=limit,
                exclude_ids=exclude_ids,
            )
        return [self._to_product(m) for m in models]

    async def authors_by_sales(self, limit: int) -> list[RankedAuthor]:
        async with self._guard("authors_by_sales"):
            rows = await self._authors.rank_by_sales(limit)
        return self._to_ranked(rows)

    async def authors_by_featured(self, limit: int) -> list[RankedAuthor]:
        async with self._guard("authors_by_featured"):
            rows = await self._authors.rank_by_featured(limit)
        return self._to_ranked(rows)

    async def authors_by_product_count(self, limit: int) -> list[RankedAuthor]:
        async with self._guard("authors_by_product_count"):
            rows = await self._authors.rank_by_product_count(limit)
        return self._to_ranked(rows)

    @staticmethod
    def _to_ranked(rows: list[tuple["AuthorModel", int]]) -> list[RankedAuthor]:
        return [
            RankedAuthor(author=Author.model_validate(model), score=score)
            for model, score in rows
        ]

    @staticmethod
    def _to_product(model: "ProductModel") -> Product:
        return Product(
            id=model.id,
            title=model.title,
            status=model.status,
            author_ids=frozenset(a.id for a in model.authors),
            sales_count=model.sales_count,
            is_featured=model.is_featured,
            price=model.price,
            publish_date=model.published_at,
        )
