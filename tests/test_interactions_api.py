"""Tests for interaction endpoints (all authenticated)."""

from __future__ import annotations

import uuid

import pytest

MEETING = {
    "personId": "person-1",
    "type": "meeting",
    "occurredAt": "2026-10-01T15:30:00Z",
    "notes": "Coffee with the board chair",
    "dataQualityScore": 90,
}


@pytest.mark.asyncio
async def test_create_interaction_echoes_record(client):
    response = await client.post("/api/interactions", json=MEETING)

    assert response.status_code == 201, response.text
    data = response.json()
    assert data["personId"] == "person-1"
    assert data["type"] == "meeting"
    assert data["occurredAt"].startswith("2026-10-01T15:30:00")
    assert data["notes"] == "Coffee with the board chair"
    assert data["dataQualityScore"] == 90
    assert "id" in data


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {**MEETING, "type": "carrier_pigeon"},
        {k: v for k, v in MEETING.items() if k != "personId"},
        {k: v for k, v in MEETING.items() if k != "type"},
        {k: v for k, v in MEETING.items() if k != "occurredAt"},
        {**MEETING, "dataQualityScore": 101},
    ],
    ids=["bad-type", "missing-person", "missing-type", "missing-occurred-at", "score-out-of-range"],
)
async def test_create_interaction_rejects_invalid_body(client, body):
    response = await client.post("/api/interactions", json=body)

    assert response.status_code == 400, response.text
    assert response.json()["message"] == "Validation failed"


@pytest.mark.asyncio
async def test_list_interactions_newest_first_and_filtered(client):
    await client.post("/api/interactions", json=MEETING)
    await client.post(
        "/api/interactions",
        json={**MEETING, "type": "call", "occurredAt": "2026-10-05T09:00:00Z"},
    )
    await client.post(
        "/api/interactions",
        json={**MEETING, "personId": "person-2", "occurredAt": "2026-10-03T09:00:00Z"},
    )

    response = await client.get("/api/interactions")
    assert response.status_code == 200
    assert [i["occurredAt"][:10] for i in response.json()] == [
        "2026-10-05",
        "2026-10-03",
        "2026-10-01",
    ]

    response = await client.get("/api/interactions", params={"personId": "person-1"})
    assert {i["personId"] for i in response.json()} == {"person-1"}
    assert len(response.json()) == 2


@pytest.mark.asyncio
async def test_get_interaction_not_found(client):
    response = await client.get(f"/api/interactions/{uuid.uuid4()}")

    assert response.status_code == 404
    assert response.json()["message"] == "Interaction not found"


@pytest.mark.asyncio
async def test_patch_interaction(client):
    created = (await client.post("/api/interactions", json=MEETING)).json()

    response = await client.patch(
        f"/api/interactions/{created['id']}",
        json={"type": "event", "notes": "Moved to the gala"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["type"] == "event"
    assert data["notes"] == "Moved to the gala"
    assert data["personId"] == "person-1"


@pytest.mark.asyncio
async def test_patch_interaction_rejects_bad_type_and_null_required(client):
    created = (await client.post("/api/interactions", json=MEETING)).json()

    bad_type = await client.patch(f"/api/interactions/{created['id']}", json={"type": "fax"})
    null_time = await client.patch(f"/api/interactions/{created['id']}", json={"occurredAt": None})

    assert bad_type.status_code == 400
    assert null_time.status_code == 400
    assert null_time.json()["message"] == "Occurred date/time is required"


@pytest.mark.asyncio
async def test_patch_unknown_interaction_is_404(client):
    response = await client.patch(f"/api/interactions/{uuid.uuid4()}", json={"notes": "x"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_interaction(client):
    created = (await client.post("/api/interactions", json=MEETING)).json()

    response = await client.delete(f"/api/interactions/{created['id']}")
    assert response.status_code == 200
    assert response.json()["id"] == created["id"]

    response = await client.delete(f"/api/interactions/{created['id']}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_interactions_require_auth(anon_client):
    response = await anon_client.get("/api/interactions")

    assert response.status_code == 401
    assert response.json()["message"] == "Not authenticated"
