"""Base repository shared by the catalog repositories."""

from typing import Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from authorfocus.db.base import Base

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """Generic async repository keyed by integer IDs."""

    model: type[T]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: int) -> T | None:
        """Get a single entity by ID."""
        return await self._session.get(self.model, id)
