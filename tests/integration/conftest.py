"""Integration test fixtures for the catalog database and the API."""

from __future__ import annotations

import os
from datetime import datetime
from typing import Any, AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from authorfocus.catalog.memory import MemoryCatalogStore
from authorfocus.config import AuthorFocusSettings
from authorfocus.core.types import ProductStatus
from authorfocus.db.base import Base
from authorfocus.db.models.author import AuthorModel, AuthorThumbnailModel
from authorfocus.db.models.product import ProductModel

# ============================================================================
# Sample Catalog
# ============================================================================

# Sales: Ada=14, Bea=5, Cyd=0. Featured: Bea=2, Ada=1. Products: Ada=2, Bea=2, Cyd=1.
# Dee has no products; product 13 is a draft; product 15 has no authors.
CATALOG: dict[str, Any] = {
    "authors": [
        {"id": 1, "name": "Ada", "slug": "ada", "description": "Wrote about analytical engines."},
        {"id": 2, "name": "Bea", "slug": "bea", "description": ""},
        {"id": 3, "name": "Cyd", "slug": "cyd", "description": ""},
        {"id": 4, "name": "Dee", "slug": "dee", "description": ""},
    ],
    "products": [
        {"id": 10, "title": "Shared", "author_ids": [1, 2], "sales_count": 5, "price": 20.0,
         "is_featured": True, "publish_date": "2020-01-01T00:00:00"},
        {"id": 11, "title": "Ada Solo", "author_ids": [1], "sales_count": 9, "price": 15.0,
         "publish_date": "2021-01-01T00:00:00"},
        {"id": 12, "title": "Bea Solo", "author_ids": [2], "sales_count": None, "price": None,
         "is_featured": True, "publish_date": "2022-01-01T00:00:00"},
        {"id": 13, "title": "Ada Draft", "author_ids": [1], "sales_count": 500, "price": 1.0,
         "is_featured": True, "status": "draft", "publish_date": "2023-01-01T00:00:00"},
        {"id": 14, "title": "Cyd Solo", "author_ids": [3], "sales_count": 0, "price": 30.0,
         "publish_date": "2023-02-01T00:00:00"},
        {"id": 15, "title": "Orphan", "author_ids": [], "sales_count": 2, "price": 5.0,
         "publish_date": "2023-03-01T00:00:00"},
    ],
    "thumbnails": {"1": {"url": "https://example.com/ada.jpg", "alt": None}},
}


async def seed_catalog(session: AsyncSession, document: dict[str, Any]) -> None:
    """Insert a catalog document (MemoryCatalogStore.from_dict shape) into the database."""
    authors = {
        a["id"]: AuthorModel(
            id=a["id"],
            name=a["name"],
            slug=a["slug"],
            description=a.get("description") or "",
        )
        for a in document.get("authors", [])
    }
    session.add_all(authors.values())

    for p in document.get("products", []):
        session.add(
            ProductModel(
                id=p["id"],
                title=p["title"],
                status=ProductStatus(p.get("status", "publish")),
                sales_count=p.get("sales_count"),
                is_featured=p.get("is_featured", False),
                price=p.get("price"),
                published_at=datetime.fromisoformat(p["publish_date"]),
                authors=[authors[author_id] for author_id in p.get("author_ids", [])],
            )
        )

    for author_id, t in (document.get("thumbnails") or {}).items():
        session.add(AuthorThumbnailModel(author_id=int(author_id), url=t["url"], alt=t.get("alt")))

    await session.commit()


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest.fixture(scope="session")
def database_url() -> str:
    """Get test database URL from environment or use in-memory SQLite."""
    return os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite://")


@pytest.fixture(scope="function")
async def db_engine(database_url: str):
    """
    Create a fresh database engine for each test.

    In-memory SQLite shares one connection through StaticPool so every
    session sees the same database.
    """
    if make_url(database_url).get_backend_name() == "sqlite":
        engine = create_async_engine(
            database_url,
            echo=False,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    else:
        engine = create_async_engine(
            database_url,
            echo=False,
            pool_size=2,
            max_overflow=5,
            pool_pre_ping=True,
        )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Clean up all data, children before parents
    async with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            await conn.execute(table.delete())

    await engine.dispose()


@pytest.fixture(scope="function")
async def db_session_factory(db_engine) -> async_sessionmaker[AsyncSession]:
    """Create session factory from engine."""
    return async_sessionmaker(
        db_engine,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db_session(db_session_factory) -> AsyncIterator[AsyncSession]:
    """Get a database session for one test."""
    async with db_session_factory() as session:
        yield session


@pytest.fixture
async def seeded_session(db_session: AsyncSession) -> AsyncSession:
    """Database session over the sample catalog."""
    await seed_catalog(db_session, CATALOG)
    return db_session


@pytest.fixture
def memory_catalog() -> MemoryCatalogStore:
    """The sample catalog held in memory."""
    return MemoryCatalogStore.from_dict(CATALOG)


# ============================================================================
# FastAPI Test Client Fixtures
# ============================================================================


@pytest.fixture
def api_settings(database_url: str) -> AuthorFocusSettings:
    """Settings served to the routes under test."""
    return AuthorFocusSettings(_env_file=None, database_url=database_url)


@pytest.fixture
async def test_app(db_session_factory, api_settings: AuthorFocusSettings):
    """Create test FastAPI application with overridden dependencies."""
    from fastapi import FastAPI

    from authorfocus.api.dependencies import get_db_session
    from authorfocus.api.routes import authors_router, health_router, products_router

    # Create a minimal app for testing
    app = FastAPI()
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(authors_router, prefix="/api/v1")
    app.include_router(products_router, prefix="/api/v1")

    # Routes read settings and the session factory from app state
    app.state.db_session_factory = db_session_factory
    app.state.settings = api_settings

    async def override_db_session():
        async with db_session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_db_session

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
async def seeded_app(test_app, db_session_factory):
    """Test application over the sample catalog."""
    async with db_session_factory() as session:
        await seed_catalog(session, CATALOG)
    return test_app


@pytest.fixture
async def test_client(seeded_app) -> AsyncIterator[AsyncClient]:
    """Create async HTTP test client over the sample catalog."""
    transport = ASGITransport(app=seeded_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
