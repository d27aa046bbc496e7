"""Author database models."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from authorfocus.db.base import Base, IntegerPrimaryKeyMixin, TimestampMixin


class AuthorModel(Base, IntegerPrimaryKeyMixin, TimestampMixin):
    """
    Author taxonomy term.

    Authors are linked to products through the product_authors association
    table. Ranking queries aggregate over that table, so the author side
    carries no product collection.
    """

    __tablename__ = "authors"

    name: Mapped[str] = mapped_column(String(500), nullable=False, index=True)
    slug: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        unique=True,
        comment="URL-safe identifier used in author archive links",
    )
    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        server_default="",
    )

    def __repr__(self) -> str:
        return f"<AuthorModel(id={self.id}, name='{self.name}')>"


class AuthorThumbnailModel(Base):
    """
    Custom image field attached to an author term.

    An author without a row here has no thumbnail and is displayed with its
    initials.
    """

    __tablename__ = "author_thumbnails"

    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("authors.id", ondelete="CASCADE"),
        primary_key=True,
    )
    url: Mapped[str] = mapped_column(String(2000), nullable=False)
    alt: Mapped[str | None] = mapped_column(String(500), nullable=True)

    def __repr__(self) -> str:
        return f"<AuthorThumbnailModel(author_id={self.author_id}, url='{self.url}')>"
