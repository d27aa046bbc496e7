"""Author thumbnail lookups from the custom-fields store."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from authorfocus.core.exceptions import StoreUnavailableError
from authorfocus.core.models import Author, Thumbnail

if TYPE_CHECKING:
    from authorfocus.catalog.base import AbstractCatalogStore

logger = logging.getLogger(__name__)


async def fetch_thumbnails(
    store: "AbstractCatalogStore",
    authors: Iterable[Author],
) -> dict[int, Thumbnail]:
    """
    Thumbnails keyed by author ID.

    Authors without a thumbnail are absent from the mapping. A failed lookup
    is treated the same way, since callers fall back to initials.
    """
    thumbnails: dict[int, Thumbnail] = {}
    for author in authors:
        try:
            thumbnail = await store.get_thumbnail_for_author(author.id)
        except StoreUnavailableError as e:
            logger.warning(f"Thumbnail for author {author.id} unavailable: {e}")
            continue
        if thumbnail is not None:
            thumbnails[author.id] = thumbnail
    return thumbnails
