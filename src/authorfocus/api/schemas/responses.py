"""Response schemas for API endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from authorfocus.api.schemas.base import APIBaseSchema
from authorfocus.core.types import OrderDirection, ProductOrderBy, RankingTier


# Author schemas
class ThumbnailResponse(APIBaseSchema):
    """Author image; ``alt`` falls back to the author name."""

    url: str
    alt: str


class AuthorResponse(APIBaseSchema):
    """Author term with display data."""

    id: int
    name: str
    slug: str
    description: str = ""
    initials: str
    thumbnail: ThumbnailResponse | None = None


class FocusAuthorResponse(AuthorResponse):
    """Author entry of the authors on focus section."""

    score: int
    product_count: int | None = None
    count_label: str | None = None


class AuthorsOnFocusResponse(APIBaseSchema):
    """Ranked authors for the homepage section."""

    limit: int
    tier: RankingTier | None = None
    authors: list[FocusAuthorResponse] = Field(default_factory=list)


class ProductAuthorsResponse(APIBaseSchema):
    """Authors attached to a product."""

    product_id: int
    authors: list[AuthorResponse] = Field(default_factory=list)


# Product schemas
class ProductResponse(APIBaseSchema):
    """Catalog product."""

    id: int
    title: str
    price: float | None = None
    sales_count: int = 0
    is_featured: bool = False
    publish_date: datetime | None = None
    author_ids: list[int] = Field(default_factory=list)


class RelatedProductsResponse(APIBaseSchema):
    """Products by the same author(s) as a given product."""

    product_id: int
    columns: int
    order_by: ProductOrderBy
    order: OrderDirection
    products: list[ProductResponse] = Field(default_factory=list)


# Health check
class HealthResponse(APIBaseSchema):
    """Health check response."""

    status: Literal["healthy", "degraded", "unhealthy"]
    version: str
    services: dict[str, Literal["up", "down", "unknown"]]
