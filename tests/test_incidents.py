from __future__ import annotations

from eli.shared.db.models import Incident, IncidentPriority, IncidentStatus


async def test_create_incident_starts_timeline(admin_client, live_messages) -> None:
    response = await admin_client.post("/api/v1/incidents", json={
        "title": "Suspicious Activity Investigation",
        "priority": "high",
        "building_id": 3,
        "linked_alert_ids": [4, 7],
    })
    assert response.status_code == 201

    incident = response.json()
    assert incident["status"] == "open"
    assert incident["priority"] == "high"
    assert incident["commander_id"] == 1
    assert incident["linked_alert_ids"] == [4, 7]
    assert len(incident["timeline"]) == 1
    assert incident["timeline"][0]["action"] == "created"
    assert incident["timeline"][0]["user_id"] == 1

    (published,) = live_messages.of_type("incident_update")
    assert published["id"] == incident["id"]


async def test_create_incident_without_session(client) -> None:
    response = await client.post("/api/v1/incidents", json={"title": "Fire Alarm", "priority": "critical"})
    assert response.status_code == 201

    incident = response.json()
    assert incident["commander_id"] is None
    assert incident["linked_alert_ids"] == []
    assert incident["timeline"][0]["user_id"] is None


async def test_status_changes_append_to_timeline(admin_client, live_messages) -> None:
    created = (await admin_client.post(
        "/api/v1/incidents", json={"title": "Medical Emergency Response", "priority": "critical"}
    )).json()
    incident_id = created["id"]

    for status in ("in_progress", "resolved", "closed"):
        response = await admin_client.patch(
            f"/api/v1/incidents/{incident_id}/status", json={"status": status}
        )
        assert response.json() == {"success": True}

    incident = (await admin_client.get(f"/api/v1/incidents/{incident_id}")).json()
    assert incident["status"] == "closed"
    assert incident["resolved_at"] is not None
    assert incident["closed_at"] is not None
    assert [entry["action"] for entry in incident["timeline"]] == [
        "created",
        "status:in_progress",
        "status:resolved",
        "status:closed",
    ]

    updates = live_messages.of_type("incident_update")
    assert updates[-1] == {"incident_id": incident_id, "status": "closed"}


async def test_incident_stats_and_filters(client, insert) -> None:
    await insert(
        Incident(title="a", status=IncidentStatus.OPEN, priority=IncidentPriority.LOW),
        Incident(title="b", status=IncidentStatus.OPEN, priority=IncidentPriority.HIGH),
        Incident(title="c", status=IncidentStatus.IN_PROGRESS, priority=IncidentPriority.HIGH),
        Incident(title="d", status=IncidentStatus.CLOSED, priority=IncidentPriority.MEDIUM),
    )

    stats = (await client.get("/api/v1/incidents/stats")).json()
    assert stats == {"total": 4, "open": 2, "in_progress": 1, "resolved": 0, "closed": 1}

    high = (await client.get("/api/v1/incidents", params={"priority": "high"})).json()
    assert sorted(i["title"] for i in high) == ["b", "c"]

    open_only = (await client.get("/api/v1/incidents", params={"status": "open"})).json()
    assert sorted(i["title"] for i in open_only) == ["a", "b"]


async def test_missing_incident(client) -> None:
    assert (await client.get("/api/v1/incidents/31337")).json() is None

    response = await client.patch("/api/v1/incidents/31337/status", json={"status": "closed"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Incident not found"
