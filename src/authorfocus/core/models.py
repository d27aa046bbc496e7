"""Domain models for catalog authors and products."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .types import ProductStatus, RankingTier


class Author(BaseModel):
    """An author taxonomy term."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int = Field(..., description="Term ID")
    name: str = Field(..., description="Display name")
    slug: str = Field(..., description="URL-safe identifier")
    description: str = Field(default="", description="Free-text biography")

    @field_validator("description", mode="before")
    @classmethod
    def _none_description(cls, value: Any) -> Any:
        return "" if value is None else value


class Thumbnail(BaseModel):
    """Author image from the custom-fields store."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    url: str = Field(..., description="Image URL")
    alt: str | None = Field(default=None, description="Alternative text")


class Product(BaseModel):
    """A catalog product (book)."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Product ID")
    title: str = Field(default="", description="Product title")
    status: ProductStatus = Field(default=ProductStatus.PUBLISH, description="Publication status")
    author_ids: frozenset[int] = Field(default_factory=frozenset, description="Linked author IDs")
    sales_count: int = Field(default=0, ge=0, description="Units sold")
    is_featured: bool = Field(default=False, description="Editorial promotion flag")
    price: float | None = Field(default=None, description="Current price")
    publish_date: datetime | None = Field(default=None, description="Publication date")

    @field_validator("sales_count", mode="before")
    @classmethod
    def _coerce_sales(cls, value: Any) -> int:
        """Treat missing, negative or non-numeric sales as zero."""
        if value is None or isinstance(value, bool):
            return 0
        try:
            sales = int(float(value))
        except (TypeError, ValueError):
            return 0
        return max(sales, 0)

    @field_validator("author_ids", mode="before")
    @classmethod
    def _coerce_author_ids(cls, value: Any) -> Any:
        return frozenset() if value is None else value

    @property
    def is_published(self) -> bool:
        """Whether the product is eligible for display."""
        return self.status == ProductStatus.PUBLISH


class RankedAuthor(BaseModel):
    """An author together with the score of the tier that ranked it."""

    model_config = ConfigDict(frozen=True)

    author: Author
    score: int = Field(..., description="Summed sales or product count, depending on tier")
    product_count: int | None = Field(default=None, description="Published product count")


class RankedAuthorList(BaseModel):
    """Ordered result of the authors on focus cascade."""

    limit: int = Field(..., ge=1, le=12, description="Clamped limit the list was built for")
    tier: RankingTier | None = Field(default=None, description="Tier that produced the entries")
    entries: list[RankedAuthor] = Field(default_factory=list)

    @property
    def authors(self) -> list[Author]:
        """Authors in ranking order."""
        return [entry.author for entry in self.entries]

    @property
    def is_empty(self) -> bool:
        """Whether there is nothing to display."""
        return not self.entries

    def __len__(self) -> int:
        return len(self.entries)
