"""API schema definitions."""

from authorfocus.api.schemas.base import APIBaseSchema
from authorfocus.api.schemas.responses import (
    AuthorResponse,
    AuthorsOnFocusResponse,
    FocusAuthorResponse,
    HealthResponse,
    ProductAuthorsResponse,
    ProductResponse,
    RelatedProductsResponse,
    ThumbnailResponse,
)

__all__ = [
    # Base
    "APIBaseSchema",
    # Responses
    "AuthorResponse",
    "AuthorsOnFocusResponse",
    "FocusAuthorResponse",
    "HealthResponse",
    "ProductAuthorsResponse",
    "ProductResponse",
    "RelatedProductsResponse",
    "ThumbnailResponse",
]
