"""Authors on focus: ranking cascade over sales, featured products and catalog size."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from authorfocus.core.exceptions import StoreUnavailableError
from authorfocus.core.models import RankedAuthor, RankedAuthorList
from authorfocus.core.text import clamp
from authorfocus.core.types import RankingTier

if TYPE_CHECKING:
    from authorfocus.catalog.base import AbstractCatalogStore

logger = logging.getLogger(__name__)

FOCUS_MIN_LIMIT = 1
FOCUS_MAX_LIMIT = 12

TierFetcher = Callable[[int], Awaitable[list[RankedAuthor]]]


def clamp_focus_limit(limit: int) -> int:
    """Clamp a requested number of authors into the supported range."""
    return clamp(limit, FOCUS_MIN_LIMIT, FOCUS_MAX_LIMIT)


class AuthorRankingService:
    """
    Ranks authors for the authors on focus section.

    Tiers run in order and each one is recomputed from scratch:

    1. sales: summed sales of published products (only positive totals)
    2. featured: number of published featured products
    3. catalog: number of published products

    The first tier that yields ``limit`` authors wins. Otherwise the result of
    the last tier that answered is returned, even if it is short. A tier whose
    store query fails counts as an empty tier; only when every attempted tier
    failed does the error reach the caller.
    """

    def __init__(self, store: "AbstractCatalogStore") -> None:
        """
        Initialize the ranking service.

        Args:
            store: Catalog store the tiers query
        """
        self._store = store

    def _tiers(self) -> list[tuple[RankingTier, TierFetcher]]:
        return [
            (RankingTier.SALES, self._store.authors_by_sales),
            (RankingTier.FEATURED, self._store.authors_by_featured),
            (RankingTier.CATALOG, self._store.authors_by_product_count),
        ]

    async def rank_authors(self, limit: int, *, with_counts: bool = False) -> RankedAuthorList:
        """
        Resolve the authors to feature.

        Args:
            limit: Requested number of authors, clamped to [1, 12]
            with_counts: Also look up each author's published product count

        Returns:
            Ranked list, empty when no author has a published product

        Raises:
            StoreUnavailableError: If the store failed for every tier
        """
        limit = clamp_focus_limit(limit)
        result = RankedAuthorList(limit=limit)

        attempted = 0
        failures: list[StoreUnavailableError] = []

        for tier, fetch in self._tiers():
            attempted += 1
            try:
                entries = self._unique(await fetch(limit))[:limit]
            except StoreUnavailableError as e:
                logger.warning(f"Ranking tier {tier} failed, falling through: {e}")
                failures.append(e)
                continue

            logger.debug(f"Ranking tier {tier} yielded {len(entries)}/{limit} authors")
            result = RankedAuthorList(
                limit=limit,
                tier=tier if entries else None,
                entries=entries,
            )
            if len(entries) >= limit:
                break

        if failures and len(failures) == attempted:
            raise StoreUnavailableError(
                "Catalog store unavailable for every ranking tier",
                operation="rank_authors",
                details={"errors": [str(e) for e in failures]},
            ) from failures[-1]

        if with_counts and result.entries:
            result = result.model_copy(update={"entries": await self._with_counts(result.entries)})

        return result

    async def _with_counts(self, entries: list[RankedAuthor]) -> list[RankedAuthor]:
        """Attach published product counts; a failed count is left unset."""
        counted = []
        for entry in entries:
            try:
                count = await self._store.count_published_products(entry.author.id)
            except StoreUnavailableError as e:
                logger.warning(f"Product count for author {entry.author.id} unavailable: {e}")
                counted.append(entry)
                continue
            counted.append(entry.model_copy(update={"product_count": count}))
        return counted

    @staticmethod
    def _unique(entries: list[RankedAuthor]) -> list[RankedAuthor]:
        """Drop repeated authors, keeping the first (best ranked) occurrence."""
        seen: set[int] = set()
        unique = []
        for entry in entries:
            if entry.author.id in seen:
                continue
            seen.add(entry.author.id)
            unique.append(entry)
        return unique
