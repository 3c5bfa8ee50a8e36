"""Sensor, access reader and Wi-Fi access point repositories."""

from typing import Optional, List

from sqlalchemy import and_

from ..models import Sensor, SensorType, AccessReader, WifiAccessPoint
from .base import BaseRepository


class _PlacedDeviceRepository(BaseRepository):
    """Devices placed in a building and optionally on a floor."""

    def _placement_conditions(
        self,
        building_id: Optional[int],
        floor_id: Optional[int],
    ) -> list:
        conditions = []
        if building_id is not None:
            conditions.append(self.model.building_id == building_id)
        if floor_id is not None:
            conditions.append(self.model.floor_id == floor_id)
        return conditions

    async def _list(self, conditions: list):
        query = self._base_query()
        if conditions:
            query = query.where(and_(*conditions))
        return await self._scalars(query.order_by(self.model.name))

    async def get_filtered(
        self,
        building_id: Optional[int] = None,
        floor_id: Optional[int] = None,
    ) -> list:
        """Get devices by building and floor, ordered by name."""
        return await self._list(self._placement_conditions(building_id, floor_id))


class SensorRepository(_PlacedDeviceRepository):
    """Repository for sensors."""

    model = Sensor

    async def get_filtered(
        self,
        building_id: Optional[int] = None,
        floor_id: Optional[int] = None,
        type: Optional[SensorType] = None,
    ) -> List[Sensor]:
        """Get sensors by building, floor and type, ordered by name."""
        conditions = self._placement_conditions(building_id, floor_id)
        if type is not None:
            conditions.append(Sensor.type == type)
        return await self._list(conditions)


class AccessReaderRepository(_PlacedDeviceRepository):
    """Repository for door access readers."""

    model = AccessReader


class WifiAccessPointRepository(_PlacedDeviceRepository):
    """Repository for Wi-Fi access points."""

    model = WifiAccessPoint
