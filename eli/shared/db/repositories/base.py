"""Base repository with the common CRUD queries."""

from typing import TypeVar, Generic, Optional, List, Type

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Base

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """
    Base repository for a single model.

    Subclasses set `model` and add their filtered queries.
    """

    model: Type[T]

    def __init__(self, session: AsyncSession):
        self.session = session

    def _base_query(self):
        """Get base query for the model."""
        return select(self.model)

    async def _scalars(self, query) -> List[T]:
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_by_id(self, id: int) -> Optional[T]:
        """Get entity by ID."""
        query = self._base_query().where(self.model.id == id).limit(1)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def list_all(self, *order_by, limit: Optional[int] = None) -> List[T]:
        """Get every row, ordered by the given columns (primary key if none)."""
        query = self._base_query().order_by(*(order_by or (self.model.id,)))
        if limit is not None:
            query = query.limit(limit)
        return await self._scalars(query)

    async def create(self, entity: T) -> T:
        """Create a new entity."""
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def update(self, entity: T) -> T:
        """Flush changes made to a loaded entity and reload it."""
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def count(self, *conditions) -> int:
        """Count rows matching all conditions."""
        query = select(func.count()).select_from(self.model)
        for condition in conditions:
            query = query.where(condition)
        result = await self.session.execute(query)
        return result.scalar_one()
