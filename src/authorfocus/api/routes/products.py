"""Product author terms and related products endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query

from authorfocus.api.dependencies import CatalogStore, ProductAuthorsSvc, RelatedSvc, Settings
from authorfocus.api.presenters import author_response, product_response
from authorfocus.api.schemas import ProductAuthorsResponse, RelatedProductsResponse
from authorfocus.core.exceptions import StoreUnavailableError
from authorfocus.core.text import clamp, parse_bool, parse_int
from authorfocus.core.types import OrderDirection, ProductOrderBy
from authorfocus.services.thumbnails import fetch_thumbnails

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])

MIN_COLUMNS = 1
MAX_COLUMNS = 6
DEFAULT_COLUMNS = 4


def _parse_order_by(value: str | None) -> ProductOrderBy:
    """Sort key from a query value; unknown keys sort by date."""
    try:
        return ProductOrderBy((value or "").strip().lower())
    except ValueError:
        return ProductOrderBy.DATE


def _parse_order(value: str | None) -> OrderDirection:
    """Sort direction from a query value; unknown directions sort descending."""
    try:
        return OrderDirection((value or "").strip().upper())
    except ValueError:
        return OrderDirection.DESC


@router.get(
    "/{product_id}/authors",
    response_model=ProductAuthorsResponse,
    operation_id="getProductAuthors",
    summary="Product authors",
    description="Authors attached to a product, ordered by name.",
)
async def product_authors(
    product_id: int,
    service: ProductAuthorsSvc,
    store: CatalogStore,
    limit: str | None = Query(None, description="Number of authors, 0 for all"),
) -> ProductAuthorsResponse:
    """List the author terms of a product."""
    requested = max(parse_int(limit, 0), 0)

    try:
        authors = await service.authors_for_product(product_id, limit=requested)
    except StoreUnavailableError as e:
        logger.warning(f"Authors of product {product_id} unavailable: {e}")
        return ProductAuthorsResponse(product_id=product_id)

    thumbnails = await fetch_thumbnails(store, authors)

    return ProductAuthorsResponse(
        product_id=product_id,
        authors=[author_response(a, thumbnails.get(a.id)) for a in authors],
    )


@router.get(
    "/{product_id}/related",
    response_model=RelatedProductsResponse,
    operation_id="getRelatedProductsByAuthor",
    summary="Related products by author",
    description="Published products sharing at least one author with the given product.",
)
async def related_products(
    product_id: int,
    service: RelatedSvc,
    settings: Settings,
    limit: str | None = Query(None, description="Number of products"),
    columns: str | None = Query(None, description="Grid columns (1-6)"),
    orderby: str | None = Query(None, description="date, price, rand, sales or title"),
    order: str | None = Query(None, description="ASC or DESC"),
    exclude_current: str | None = Query(None, alias="excludeCurrent"),
) -> RelatedProductsResponse:
    """List products by the same author(s)."""
    requested = clamp(
        parse_int(limit, settings.related_default_limit),
        1,
        settings.related_max_limit,
    )
    grid_columns = clamp(parse_int(columns, DEFAULT_COLUMNS), MIN_COLUMNS, MAX_COLUMNS)
    order_by = _parse_order_by(orderby)
    direction = _parse_order(order)

    response = RelatedProductsResponse(
        product_id=product_id,
        columns=grid_columns,
        order_by=order_by,
        order=direction,
    )

    try:
        products = await service.products_by_same_author(
            product_id,
            requested,
            order_by=order_by,
            order_direction=direction,
            exclude_self=parse_bool(exclude_current, True),
        )
    except StoreUnavailableError as e:
        logger.warning(f"Related products for {product_id} unavailable: {e}")
        return response

    response.products = [product_response(p) for p in products]
    return response
