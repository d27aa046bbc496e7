"""Initial catalog schema for authorfocus.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    # Create authors table (the "autor" taxonomy terms)
    op.create_table(
        "authors",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(500), nullable=False),
        sa.Column("slug", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, server_default="", nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("slug", name="uq_authors_slug"),
    )
    op.create_index("ix_authors_name", "authors", ["name"])

    # Create author_thumbnails table (custom image field per term)
    op.create_table(
        "author_thumbnails",
        sa.Column(
            "author_id",
            sa.Integer,
            sa.ForeignKey("authors.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("url", sa.String(2000), nullable=False),
        sa.Column("alt", sa.String(500), nullable=True),
    )

    # Create products table
    op.create_table(
        "products",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(2000), nullable=False),
        sa.Column(
            "status",
            sa.Enum(
                "publish",
                "draft",
                "pending",
                "private",
                "trash",
                name="product_status",
            ),
            nullable=False,
        ),
        sa.Column("sales_count", sa.Integer, nullable=True),
        sa.Column("is_featured", sa.Boolean, server_default=sa.false(), nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=True),
        sa.Column(
            "published_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        *_timestamps(),
        sa.CheckConstraint(
            "sales_count IS NULL OR sales_count >= 0",
            name="ck_products_valid_sales_count",
        ),
    )
    op.create_index("ix_products_status", "products", ["status"])
    op.create_index("ix_products_published_at", "products", ["published_at"])
    op.create_index("ix_products_status_featured", "products", ["status", "is_featured"])

    # Create product_authors junction table
    op.create_table(
        "product_authors",
        sa.Column(
            "product_id",
            sa.Integer,
            sa.ForeignKey("products.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "author_id",
            sa.Integer,
            sa.ForeignKey("authors.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )
    op.create_index("ix_product_authors_author_id", "product_authors", ["author_id"])


def downgrade() -> None:
    op.drop_table("product_authors")
    op.drop_table("products")
    op.drop_table("author_thumbnails")
    op.drop_table("authors")
    sa.Enum(name="product_status").drop(op.get_bind(), checkfirst=True)
