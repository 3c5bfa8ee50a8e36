"""Demo scenario repository."""

from typing import List, Optional

from sqlalchemy import update

from ..models import DemoScenario
from .base import BaseRepository


class ScenarioRepository(BaseRepository[DemoScenario]):
    """Repository for scripted demo scenarios."""

    model = DemoScenario

    async def list_by_name(self) -> List[DemoScenario]:
        """Get all scenarios ordered by name."""
        return await self.list_all(DemoScenario.name)

    async def activate(self, scenario_id: int) -> Optional[DemoScenario]:
        """Mark one scenario active and every other one inactive."""
        scenario = await self.get_by_id(scenario_id)
        if not scenario:
            return None

        await self.session.execute(
            update(DemoScenario)
            .where(DemoScenario.id != scenario_id)
            .values(is_active=False)
            .execution_options(synchronize_session="fetch")
        )
        scenario.is_active = True
        return await self.update(scenario)

    async def deactivate(self, scenario_id: int) -> Optional[DemoScenario]:
        """Mark a scenario inactive."""
        scenario = await self.get_by_id(scenario_id)
        if not scenario:
            return None
        scenario.is_active = False
        return await self.update(scenario)
