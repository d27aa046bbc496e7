"""Conversions from domain models to API responses."""

from __future__ import annotations

from authorfocus.api.schemas import (
    AuthorResponse,
    FocusAuthorResponse,
    ProductResponse,
    ThumbnailResponse,
)
from authorfocus.core.models import Author, Product, RankedAuthor, Thumbnail
from authorfocus.core.text import author_initials, book_count_label, trim_words


def thumbnail_response(author: Author, thumbnail: Thumbnail | None) -> ThumbnailResponse | None:
    """Thumbnail with its alt text defaulting to the author name."""
    if thumbnail is None or not thumbnail.url:
        return None
    return ThumbnailResponse(url=thumbnail.url, alt=thumbnail.alt or author.name)


def author_response(
    author: Author,
    thumbnail: Thumbnail | None,
    *,
    initials_length: int = 1,
) -> AuthorResponse:
    """Author term as shown in the product author block."""
    return AuthorResponse(
        id=author.id,
        name=author.name,
        slug=author.slug,
        description=author.description,
        initials=author_initials(author.name, initials_length),
        thumbnail=thumbnail_response(author, thumbnail),
    )


def focus_author_response(
    entry: RankedAuthor,
    thumbnail: Thumbnail | None,
    *,
    description_words: int = 15,
    show_count: bool = False,
) -> FocusAuthorResponse:
    """Ranked author as shown in the authors on focus section."""
    author = entry.author
    count_label = None
    if show_count and entry.product_count:
        count_label = book_count_label(entry.product_count)

    return FocusAuthorResponse(
        id=author.id,
        name=author.name,
        slug=author.slug,
        description=trim_words(author.description, description_words),
        initials=author_initials(author.name, 2),
        thumbnail=thumbnail_response(author, thumbnail),
        score=entry.score,
        product_count=entry.product_count if show_count else None,
        count_label=count_label,
    )


def product_response(product: Product) -> ProductResponse:
    """Catalog product."""
    return ProductResponse(
        id=product.id,
        title=product.title,
        price=product.price,
        sales_count=product.sales_count,
        is_featured=product.is_featured,
        publish_date=product.publish_date,
        author_ids=sorted(product.author_ids),
    )
