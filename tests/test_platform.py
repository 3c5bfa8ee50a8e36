from __future__ import annotations

from eli.shared.db.models import AuditLog, DemoScenario


async def test_config_upsert(admin_client) -> None:
    assert (await admin_client.get("/api/v1/config/retention_days")).json() is None

    created = (await admin_client.put("/api/v1/config", json={
        "key": "retention_days",
        "value": 30,
        "description": "Days to keep location history",
    })).json()
    assert created["value"] == 30

    replaced = (await admin_client.put("/api/v1/config", json={
        "key": "retention_days",
        "value": {"locations": 14, "events": 90},
    })).json()
    assert replaced["id"] == created["id"]
    assert replaced["value"] == {"locations": 14, "events": 90}
    assert replaced["description"] == "Days to keep location history"

    await admin_client.put("/api/v1/config", json={"key": "alert_sound", "value": True})
    keys = [entry["key"] for entry in (await admin_client.get("/api/v1/config")).json()]
    assert keys == ["alert_sound", "retention_days"]

    fetched = (await admin_client.get("/api/v1/config/alert_sound")).json()
    assert fetched["value"] is True


async def test_audit_log_is_admin_readable(admin_client, insert) -> None:
    await insert(
        AuditLog(action="alert.create", entity_type="alert", entity_id=1),
        AuditLog(action="config.set", entity_type="config", entity_id=2),
    )
    await admin_client.put("/api/v1/config", json={"key": "theme", "value": "dark"})

    logs = (await admin_client.get("/api/v1/audit")).json()
    assert len(logs) == 3
    assert logs[0]["action"] == "config.set"
    assert logs[0]["user_id"] == 1
    assert logs[0]["details"] == {"key": "theme"}
    assert logs[0]["ip_address"] == "127.0.0.1"

    alerts_only = (await admin_client.get("/api/v1/audit", params={"entity_type": "alert"})).json()
    assert [log["action"] for log in alerts_only] == ["alert.create"]

    config_sets = (await admin_client.get("/api/v1/audit", params={"action": "config.set"})).json()
    assert len(config_sets) == 2


async def test_audit_records_forwarded_address(admin_client) -> None:
    await admin_client.put(
        "/api/v1/config",
        json={"key": "theme", "value": "light"},
        headers={"x-forwarded-for": "203.0.113.9, 10.0.0.1"},
    )
    (log,) = (await admin_client.get("/api/v1/audit")).json()
    assert log["ip_address"] == "203.0.113.9"


async def test_only_one_scenario_active(client, insert, live_messages) -> None:
    first, second = await insert(
        DemoScenario(name="Active Shooter Drill", duration=600, events=[{"offset_seconds": 0}]),
        DemoScenario(name="Crowd Gathering", duration=300, is_active=True),
    )

    names = [s["name"] for s in (await client.get("/api/v1/scenarios")).json()]
    assert names == ["Active Shooter Drill", "Crowd Gathering"]

    activated = (await client.post(f"/api/v1/scenarios/{first.id}/activate")).json()
    assert activated["is_active"] is True

    other = (await client.get(f"/api/v1/scenarios/{second.id}")).json()
    assert other["is_active"] is False

    deactivated = (await client.post(f"/api/v1/scenarios/{first.id}/deactivate")).json()
    assert deactivated["is_active"] is False

    assert live_messages.of_type("system_status") == [
        {"active_scenario_id": first.id, "scenario": "Active Shooter Drill"},
        {"active_scenario_id": None},
    ]


async def test_missing_scenario(client) -> None:
    assert (await client.get("/api/v1/scenarios/55")).json() is None

    response = await client.post("/api/v1/scenarios/55/activate")
    assert response.status_code == 404
    assert response.json()["detail"] == "Scenario not found"
