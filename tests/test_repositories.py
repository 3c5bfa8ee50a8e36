from __future__ import annotations

from eli.shared.db.models import Building, Camera, DemoScenario, EquipmentStatus
from eli.shared.db.repositories import BuildingRepository, CameraRepository, ScenarioRepository


async def test_list_all_orders_by_id_unless_told(session_factory, insert) -> None:
    await insert(Building(name="Student Union"), Building(name="Admin Hall"), Building(name="Library"))

    async with session_factory() as session:
        repo = BuildingRepository(session)
        assert [b.name for b in await repo.list_all()] == ["Student Union", "Admin Hall", "Library"]
        assert [b.name for b in await repo.list_all(Building.name)] == ["Admin Hall", "Library", "Student Union"]
        assert [b.name for b in await repo.list_all(Building.name, limit=2)] == ["Admin Hall", "Library"]


async def test_count_with_conditions(session_factory, insert) -> None:
    (building,) = await insert(Building(name="Library"))
    await insert(
        Camera(building_id=building.id, name="CAM-1", status=EquipmentStatus.ONLINE),
        Camera(building_id=building.id, name="CAM-2", status=EquipmentStatus.ONLINE),
        Camera(building_id=building.id, name="CAM-3", status=EquipmentStatus.OFFLINE),
    )

    async with session_factory() as session:
        repo = CameraRepository(session)
        assert await repo.count() == 3
        assert await repo.count(Camera.status == EquipmentStatus.ONLINE) == 2
        assert await repo.count(Camera.status == EquipmentStatus.ONLINE, Camera.name == "CAM-2") == 1


async def test_update_flushes_changes(session_factory, insert) -> None:
    (scenario,) = await insert(DemoScenario(name="Fire Drill", is_active=False))

    async with session_factory() as session:
        repo = ScenarioRepository(session)
        loaded = await repo.get_by_id(scenario.id)
        loaded.description = "Evacuate the library"
        updated = await repo.update(loaded)
        assert updated.description == "Evacuate the library"
        await session.commit()

    async with session_factory() as session:
        reloaded = await ScenarioRepository(session).get_by_id(scenario.id)
        assert reloaded.description == "Evacuate the library"
