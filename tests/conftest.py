"""Shared test fixtures for all tests."""

from __future__ import annotations

from datetime import datetime

import pytest

from authorfocus.catalog.memory import MemoryCatalogStore
from authorfocus.config import AuthorFocusSettings
from authorfocus.core.models import Author, Product, Thumbnail
from authorfocus.core.types import ProductStatus


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_author() -> Author:
    """Create a sample author."""
    return Author(
        id=1,
        name="Ursula K. Le Guin",
        slug="ursula-k-le-guin",
        description="American author best known for her works of speculative fiction.",
    )


@pytest.fixture
def sample_author_minimal() -> Author:
    """Create a minimal author with only required fields."""
    return Author(id=2, name="John Doe", slug="john-doe")


@pytest.fixture
def sample_product(sample_author: Author) -> Product:
    """Create a published product with one author."""
    return Product(
        id=100,
        title="The Left Hand of Darkness",
        author_ids=frozenset({sample_author.id}),
        sales_count=42,
        is_featured=True,
        price=12.5,
        publish_date=datetime(2020, 1, 15, 12, 0, 0),
    )


# ============================================================================
# Catalog Store Fixtures
# ============================================================================


def build_authors(*names: str) -> list[Author]:
    """Authors with sequential IDs starting at 1, in the given order."""
    return [
        Author(id=i, name=name, slug=name.lower().replace(" ", "-"))
        for i, name in enumerate(names, start=1)
    ]


@pytest.fixture
def bestseller_catalog() -> MemoryCatalogStore:
    """
    Catalog where sales alone rank several authors.

    Sales totals: Ada=80, Cyd=40, Bea=40, Dee=0 (not ranked by sales).
    """
    ada, bea, cyd, dee = build_authors("Ada", "Bea", "Cyd", "Dee")
    products = [
        Product(id=1, title="A1", author_ids={ada.id}, sales_count=50,
                publish_date=datetime(2021, 1, 1)),
        Product(id=2, title="A2", author_ids={ada.id}, sales_count=30,
                publish_date=datetime(2021, 6, 1)),
        Product(id=3, title="B1", author_ids={bea.id}, sales_count=40,
                publish_date=datetime(2022, 1, 1)),
        Product(id=4, title="C1", author_ids={cyd.id}, sales_count=40,
                publish_date=datetime(2022, 6, 1)),
        Product(id=5, title="D1", author_ids={dee.id}, sales_count=0,
                publish_date=datetime(2023, 1, 1)),
        # Drafts never count
        Product(id=6, title="D2", author_ids={dee.id}, sales_count=500,
                status=ProductStatus.DRAFT, publish_date=datetime(2023, 6, 1)),
    ]
    return MemoryCatalogStore([ada, bea, cyd, dee], products)


@pytest.fixture
def new_catalog() -> MemoryCatalogStore:
    """
    Freshly launched catalog with no sales at all.

    Featured counts: Cal=1. Product counts: Cal=1, Dan=1, Eve=2.
    """
    cal, dan, eve = build_authors("Cal", "Dan", "Eve")
    products = [
        Product(id=4, title="Featured", author_ids={cal.id}, is_featured=True,
                publish_date=datetime(2024, 3, 1)),
        Product(id=5, title="Plain", author_ids={dan.id},
                publish_date=datetime(2024, 3, 2)),
        Product(id=7, title="Eve One", author_ids={eve.id},
                publish_date=datetime(2024, 3, 3)),
        Product(id=8, title="Eve Two", author_ids={eve.id},
                publish_date=datetime(2024, 3, 4)),
    ]
    return MemoryCatalogStore([cal, dan, eve], products)


@pytest.fixture
def shelf_catalog() -> MemoryCatalogStore:
    """
    Catalog for same-author lookups.

    Product 10 is co-authored by Ada and Bea; Cyd writes alone.
    """
    ada, bea, cyd = build_authors("Ada", "Bea", "Cyd")
    products = [
        Product(id=10, title="Shared", author_ids={ada.id, bea.id}, price=20.0,
                sales_count=5, publish_date=datetime(2020, 1, 1)),
        Product(id=11, title="Ada Solo", author_ids={ada.id}, price=15.0,
                sales_count=9, publish_date=datetime(2021, 1, 1)),
        Product(id=12, title="Bea Solo", author_ids={bea.id}, price=None,
                sales_count=1, publish_date=datetime(2022, 1, 1)),
        Product(id=13, title="Ada Draft", author_ids={ada.id}, price=1.0,
                status=ProductStatus.DRAFT, publish_date=datetime(2023, 1, 1)),
        Product(id=14, title="Cyd Solo", author_ids={cyd.id}, price=30.0,
                sales_count=100, publish_date=datetime(2023, 1, 1)),
        Product(id=15, title="Orphan", author_ids=set(), price=5.0,
                publish_date=datetime(2023, 1, 1)),
    ]
    thumbnails = {ada.id: Thumbnail(url="https://example.com/ada.jpg", alt=None)}
    return MemoryCatalogStore([ada, bea, cyd], products, thumbnails)


@pytest.fixture
def empty_catalog() -> MemoryCatalogStore:
    """Catalog with authors but no published products."""
    authors = build_authors("Ada", "Bea")
    products = [
        Product(id=1, title="Draft", author_ids={1}, sales_count=10, status=ProductStatus.DRAFT),
    ]
    return MemoryCatalogStore(authors, products)


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def mock_settings() -> AuthorFocusSettings:
    """Create mock settings for testing."""
    return AuthorFocusSettings(
        database_url="sqlite+aiosqlite://",
        debug=True,
        log_level="DEBUG",
    )
