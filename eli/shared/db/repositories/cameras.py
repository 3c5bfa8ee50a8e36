"""Camera repository."""

from typing import Optional, List
from datetime import datetime

from sqlalchemy import select, func, and_

from ..models import Camera, EquipmentStatus
from .base import BaseRepository


class CameraRepository(BaseRepository[Camera]):
    """Repository for camera operations."""

    model = Camera

    async def get_filtered(
        self,
        building_id: Optional[int] = None,
        floor_id: Optional[int] = None,
        status: Optional[EquipmentStatus] = None,
    ) -> List[Camera]:
        """Get cameras matching the filters, ordered by name."""
        conditions = []
        if building_id is not None:
            conditions.append(Camera.building_id == building_id)
        if floor_id is not None:
            conditions.append(Camera.floor_id == floor_id)
        if status is not None:
            conditions.append(Camera.status == status)

        query = self._base_query()
        if conditions:
            query = query.where(and_(*conditions))
        return await self._scalars(query.order_by(Camera.name))

    async def update_status(self, camera_id: int, status: EquipmentStatus) -> bool:
        """Update camera status."""
        camera = await self.get_by_id(camera_id)
        if camera:
            camera.status = status
            camera.updated_at = datetime.utcnow()
            await self.session.flush()
            return True
        return False

    async def count_by_status(self) -> dict:
        """Get camera counts keyed by status value."""
        query = select(Camera.status, func.count().label("count")).group_by(Camera.status)
        result = await self.session.execute(query)
        return {
            (row.status.value if row.status else None): row.count
            for row in result.all()
        }
