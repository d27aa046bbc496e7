"""
In-process catalog store.

Holds authors, products and thumbnails in dictionaries and evaluates the
ranking tiers and same-author lookups in Python with the same ordering rules
as the SQL store. Useful for fixtures, demos and tests; the catalog can be
loaded from a JSON document with :meth:`MemoryCatalogStore.from_dict`.
"""

from __future__ import annotations

import json
import random
from collections import Counter
from collections.abc import Callable, Collection, Iterable
from pathlib import Path
from typing import Any

from authorfocus.catalog.base import AbstractCatalogStore
from authorfocus.core.models import Author, Product, RankedAuthor, Thumbnail
from authorfocus.core.text import slugify
from authorfocus.core.types import OrderDirection, ProductOrderBy


class MemoryCatalogStore(AbstractCatalogStore):
    """Catalog store over in-memory records."""

    def __init__(
        self,
        authors: Iterable[Author] = (),
        products: Iterable[Product] = (),
        thumbnails: dict[int, Thumbnail] | None = None,
    ) -> None:
        self._authors: dict[int, Author] = {a.id: a for a in authors}
        self._products: dict[int, Product] = {p.id: p for p in products}
        self._thumbnails: dict[int, Thumbnail] = dict(thumbnails or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MemoryCatalogStore:
        """
        Build a store from a plain document.

        Expected shape::

            {
                "authors": [{"id": 1, "name": "...", "slug": "...", "description": "..."}],
                "products": [{"id": 10, "title": "...", "author_ids": [1], "sales_count": 3}],
                "thumbnails": {"1": {"url": "...", "alt": "..."}}
            }

        Authors without a slug get one derived from their name.
        """
        authors = [
            Author.model_validate({**a, "slug": a.get("slug") or slugify(a.get("name", ""))})
            for a in data.get("authors", [])
        ]
        products = [Product.model_validate(p) for p in data.get("products", [])]
        thumbnails = {
            int(author_id): Thumbnail.model_validate(t)
            for author_id, t in (data.get("thumbnails") or {}).items()
        }
        return cls(authors, products, thumbnails)

    @classmethod
    def from_json_file(cls, path: str | Path) -> MemoryCatalogStore:
        """Build a store from a JSON file in the :meth:`from_dict` shape."""
        with Path(path).open("r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

    # Taxonomy lookups

    async def get_author(self, author_id: int) -> Author | None:
        return self._authors.get(author_id)

    async def list_authors_for_product(self, product_id: int) -> list[int]:
        product = self._products.get(product_id)
        if product is None:
            return []
        return sorted(a for a in product.author_ids if a in self._authors)

    async def list_author_terms(self, product_id: int, limit: int = 0) -> list[Author]:
        author_ids = await self.list_authors_for_product(product_id)
        terms = sorted((self._authors[a] for a in author_ids), key=lambda a: (a.name, a.id))
        return terms[:limit] if limit > 0 else terms

    async def get_thumbnail_for_author(self, author_id: int) -> Thumbnail | None:
        return self._thumbnails.get(author_id)

    # Product lookups

    async def list_published_products_by_author(self, author_id: int) -> list[Product]:
        products = [p for p in self._published() if author_id in p.author_ids]
        return sorted(products, key=lambda p: (_timestamp(p), p.id), reverse=True)

    async def count_published_products(self, author_id: int) -> int:
        return sum(1 for p in self._published() if author_id in p.author_ids)

    async def find_products_by_authors(
        self,
        author_ids: Collection[int],
        *,
        order_by: ProductOrderBy = ProductOrderBy.DATE,
        order_direction: OrderDirection = OrderDirection.DESC,
        limit: int = 4,
        exclude_ids: Collection[int] = (),
    ) -> list[Product]:
        wanted = set(author_ids)
        if not wanted or limit < 1:
            return []

        excluded = set(exclude_ids)
        matches = [
            p for p in self._published()
            if p.author_ids & wanted and p.id not in excluded
        ]

        if order_by == ProductOrderBy.RANDOM:
            random.shuffle(matches)
        else:
            key = _SORT_KEYS.get(order_by, _timestamp)
            matches.sort(
                key=lambda p: (key(p), p.id),
                reverse=order_direction == OrderDirection.DESC,
            )
        return matches[:limit]

    # Ranking tiers

    async def authors_by_sales(self, limit: int) -> list[RankedAuthor]:
        totals: Counter[int] = Counter()
        for product in self._published():
            for author_id in product.author_ids:
                totals[author_id] += product.sales_count

        scored = {a: total for a, total in totals.items() if total > 0}
        return self._rank(scored, limit)

    async def authors_by_featured(self, limit: int) -> list[RankedAuthor]:
        counts: Counter[int] = Counter()
        for product in self._published():
            if product.is_featured:
                counts.update(product.author_ids)
        return self._rank(counts, limit)

    async def authors_by_product_count(self, limit: int) -> list[RankedAuthor]:
        counts: Counter[int] = Counter()
        for product in self._published():
            counts.update(product.author_ids)
        return self._rank(counts, limit)

    def _published(self) -> list[Product]:
        return [p for p in self._products.values() if p.is_published]

    def _rank(self, scores: dict[int, int], limit: int) -> list[RankedAuthor]:
        """Order by score desc, then name asc, then ID asc; unknown author IDs are skipped."""
        ranked = [
            RankedAuthor(author=self._authors[author_id], score=score)
            for author_id, score in scores.items()
            if author_id in self._authors
        ]
        ranked.sort(key=lambda r: (-r.score, r.author.name, r.author.id))
        return ranked[:limit]


def _timestamp(product: Product) -> float:
    if product.publish_date is None:
        return float("-inf")
    return product.publish_date.timestamp()


_SORT_KEYS: dict[ProductOrderBy, Callable[[Product], Any]] = {
    ProductOrderBy.DATE: _timestamp,
    ProductOrderBy.PRICE: lambda p: p.price or 0.0,
    ProductOrderBy.SALES: lambda p: p.sales_count,
    ProductOrderBy.TITLE: lambda p: p.title,
}
