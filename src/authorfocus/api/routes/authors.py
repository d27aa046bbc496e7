"""Authors on focus endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query

from authorfocus.api.dependencies import CatalogStore, RankingSvc, Settings
from authorfocus.api.presenters import focus_author_response
from authorfocus.api.schemas import AuthorsOnFocusResponse
from authorfocus.core.exceptions import StoreUnavailableError
from authorfocus.core.text import clamp, parse_bool, parse_int
from authorfocus.services.thumbnails import fetch_thumbnails

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/authors", tags=["authors"])


@router.get(
    "/focus",
    response_model=AuthorsOnFocusResponse,
    operation_id="getAuthorsOnFocus",
    summary="Authors on focus",
    description=(
        "Top authors ranked by sales, falling back to featured products and then "
        "to catalog size. Invalid parameters are clamped; failures yield an empty list."
    ),
)
async def authors_on_focus(
    ranking_service: RankingSvc,
    store: CatalogStore,
    settings: Settings,
    limit: str | None = Query(None, description="Number of authors (1-12)"),
    show_count: str | None = Query(None, alias="showCount", description="Include book counts"),
) -> AuthorsOnFocusResponse:
    """Rank authors for the homepage section."""
    requested = parse_int(limit, settings.focus_default_limit)
    requested = clamp(requested, 1, settings.focus_max_limit)
    with_counts = parse_bool(show_count, False)

    try:
        ranked = await ranking_service.rank_authors(requested, with_counts=with_counts)
    except StoreUnavailableError as e:
        logger.warning(f"Authors on focus unavailable: {e}")
        return AuthorsOnFocusResponse(limit=requested)

    thumbnails = await fetch_thumbnails(store, ranked.authors)

    return AuthorsOnFocusResponse(
        limit=ranked.limit,
        tier=ranked.tier,
        authors=[
            focus_author_response(
                entry,
                thumbnails.get(entry.author.id),
                description_words=settings.description_words,
                show_count=with_counts,
            )
            for entry in ranked.entries
        ],
    )
