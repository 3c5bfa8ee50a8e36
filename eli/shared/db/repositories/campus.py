"""Building, floor and zone repositories."""

from typing import List, Optional

from ..models import Building, Floor, Zone
from .base import BaseRepository


class BuildingRepository(BaseRepository[Building]):
    """Repository for campus buildings."""

    model = Building

    async def list_by_name(self) -> List[Building]:
        """Get all buildings ordered by name."""
        return await self.list_all(Building.name)


class FloorRepository(BaseRepository[Floor]):
    """Repository for building floors."""

    model = Floor

    async def list_floors(self, building_id: Optional[int] = None) -> List[Floor]:
        """Get floors of one building by level, or every floor by building then level."""
        if building_id is not None:
            query = (
                self._base_query()
                .where(Floor.building_id == building_id)
                .order_by(Floor.level)
            )
        else:
            query = self._base_query().order_by(Floor.building_id, Floor.level)
        return await self._scalars(query)


class ZoneRepository(BaseRepository[Zone]):
    """Repository for floor zones."""

    model = Zone

    async def get_by_floor(self, floor_id: int) -> List[Zone]:
        """Get zones on a floor ordered by name."""
        query = self._base_query().where(Zone.floor_id == floor_id).order_by(Zone.name)
        return await self._scalars(query)
