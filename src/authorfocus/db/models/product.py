"""Product database model."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    Enum,
    Index,
    Integer,
    Numeric,
    String,
    false,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from authorfocus.core.types import ProductStatus
from authorfocus.db.base import Base, IntegerPrimaryKeyMixin, TimestampMixin
from authorfocus.db.models.associations import product_author_association

if TYPE_CHECKING:
    from authorfocus.db.models.author import AuthorModel


class ProductModel(Base, IntegerPrimaryKeyMixin, TimestampMixin):
    """
    Catalog product.

    Only products with status ``publish`` take part in rankings and lookups.
    ``sales_count`` is maintained by the order subsystem and may be NULL for
    products that never sold; queries treat NULL as zero.
    """

    __tablename__ = "products"

    title: Mapped[str] = mapped_column(String(2000), nullable=False)
    status: Mapped[ProductStatus] = mapped_column(
        Enum(
            ProductStatus,
            name="product_status",
            values_callable=lambda x: [e.value for e in x],
        ),
        nullable=False,
        default=ProductStatus.PUBLISH,
        index=True,
    )
    sales_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    is_featured: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
    )
    price: Mapped[float | None] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=True)
    published_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=func.now(),
        server_default=func.now(),
        index=True,
    )

    # Relationships
    authors: Mapped[list["AuthorModel"]] = relationship(
        "AuthorModel",
        secondary=product_author_association,
        lazy="selectin",
        order_by="AuthorModel.name",
    )

    __table_args__ = (
        CheckConstraint("sales_count IS NULL OR sales_count >= 0", name="valid_sales_count"),
        Index("ix_products_status_featured", "status", "is_featured"),
    )

    def __repr__(self) -> str:
        return f"<ProductModel(id={self.id}, status={self.status}, title='{self.title[:50]}')>"
