"""FastAPI dependency injection."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from authorfocus.catalog.base import AbstractCatalogStore
from authorfocus.catalog.sql import SqlCatalogStore
from authorfocus.config import AuthorFocusSettings
from authorfocus.services.product_authors import ProductAuthorsService
from authorfocus.services.ranking import AuthorRankingService
from authorfocus.services.related import RelatedProductsService


async def get_db_session(request: Request) -> AsyncIterator[AsyncSession]:
    """
    Get database session from app state.

    Yields a read-only session that is closed after the request.
    """
    session_factory = request.app.state.db_session_factory
    async with session_factory() as session:
        yield session


def get_app_settings(request: Request) -> AuthorFocusSettings:
    """Get the settings the application was created with."""
    return request.app.state.settings


async def get_catalog_store(
    session: AsyncSession = Depends(get_db_session),
) -> AbstractCatalogStore:
    """Get the catalog store for this request."""
    return SqlCatalogStore(session)


async def get_ranking_service(
    store: AbstractCatalogStore = Depends(get_catalog_store),
) -> AuthorRankingService:
    """Get the authors on focus ranking service."""
    return AuthorRankingService(store)


async def get_product_authors_service(
    store: AbstractCatalogStore = Depends(get_catalog_store),
) -> ProductAuthorsService:
    """Get the product author terms service."""
    return ProductAuthorsService(store)


async def get_related_products_service(
    store: AbstractCatalogStore = Depends(get_catalog_store),
) -> RelatedProductsService:
    """Get the related products by author service."""
    return RelatedProductsService(store)


# Type aliases for cleaner dependency injection
Settings = Annotated[AuthorFocusSettings, Depends(get_app_settings)]
CatalogStore = Annotated[AbstractCatalogStore, Depends(get_catalog_store)]
RankingSvc = Annotated[AuthorRankingService, Depends(get_ranking_service)]
ProductAuthorsSvc = Annotated[ProductAuthorsService, Depends(get_product_authors_service)]
RelatedSvc = Annotated[RelatedProductsService, Depends(get_related_products_service)]
