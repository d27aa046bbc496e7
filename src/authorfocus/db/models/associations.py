"""Association/junction tables for many-to-many relationships."""

from sqlalchemy import Column, ForeignKey, Integer, Table

from authorfocus.db.base import Base

# Product-Author many-to-many (the "autor" taxonomy relationship)
product_author_association = Table(
    "product_authors",
    Base.metadata,
    Column(
        "product_id",
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "author_id",
        Integer,
        ForeignKey("authors.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
)
