"""Tests for opportunity endpoints and OpportunityService rules."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from src.fundrazor.core.errors import NotFoundError, ValidationError
from src.fundrazor.people.schemas import OpportunityCreate, OpportunityUpdate
from src.fundrazor.people.service import OpportunityService

MAJOR_GIFT = {
    "personId": "person-1",
    "stage": "Ask",
    "askAmount": "250000",
    "probability": 60,
    "closeDate": "2026-12-15",
    "ownerId": "user-1",
}


@pytest.mark.asyncio
async def test_create_opportunity_echoes_record(client):
    response = await client.post("/api/opportunities", json=MAJOR_GIFT)

    assert response.status_code == 201, response.text
    data = response.json()
    assert data["personId"] == "person-1"
    assert data["stage"] == "Ask"
    assert Decimal(data["askAmount"]) == Decimal("250000")
    assert data["closeDate"].startswith("2026-12-15")


@pytest.mark.asyncio
async def test_stage_defaults_to_prospect(client):
    response = await client.post("/api/opportunities", json={"personId": "person-1"})

    assert response.status_code == 201
    assert response.json()["stage"] == "Prospect"
    assert response.json()["ownerId"] is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"personId": None},
        {"askAmount": "0"},
        {"askAmount": "-10"},
        {"askAmount": "0.001"},
        {"stage": "Closed"},
        {"probability": 150},
    ],
    ids=["missing-person", "zero-ask", "negative-ask", "sub-cent-ask", "bad-stage", "probability-over-100"],
)
async def test_create_opportunity_rejects_invalid_body(client, overrides):
    body = {**MAJOR_GIFT, **overrides}
    body = {k: v for k, v in body.items() if v is not None}

    response = await client.post("/api/opportunities", json=body)

    assert response.status_code == 400, response.text


@pytest.mark.asyncio
async def test_zero_ask_amount_message(client):
    response = await client.post("/api/opportunities", json={**MAJOR_GIFT, "askAmount": "0"})

    assert response.json()["message"] == "Ask amount must be greater than zero"


@pytest.mark.asyncio
async def test_list_filters_and_orders_by_close_date(client):
    await client.post("/api/opportunities", json=MAJOR_GIFT)
    await client.post(
        "/api/opportunities",
        json={"personId": "person-1", "closeDate": "2027-03-01", "ownerId": "user-2"},
    )
    await client.post("/api/opportunities", json={"personId": "person-1"})
    await client.post("/api/opportunities", json={"personId": "person-2", "ownerId": "user-1"})

    response = await client.get("/api/opportunities", params={"personId": "person-1"})
    assert response.status_code == 200
    dates = [o["closeDate"] for o in response.json()]
    assert len(dates) == 3
    assert dates[0].startswith("2027-03-01")
    assert dates[1].startswith("2026-12-15")
    assert dates[2] is None

    response = await client.get("/api/opportunities", params={"ownerId": "user-1"})
    assert sorted(o["personId"] for o in response.json()) == ["person-1", "person-2"]


@pytest.mark.asyncio
async def test_get_opportunity_not_found(client):
    response = await client.get(f"/api/opportunities/{uuid.uuid4()}")

    assert response.status_code == 404
    assert response.json()["message"] == "Opportunity not found"


@pytest.mark.asyncio
async def test_patch_opportunity_moves_stage(client):
    created = (await client.post("/api/opportunities", json=MAJOR_GIFT)).json()

    response = await client.patch(
        f"/api/opportunities/{created['id']}", json={"stage": "Steward", "probability": 100}
    )

    assert response.status_code == 200, response.text
    data = response.json()
    assert data["stage"] == "Steward"
    assert data["probability"] == 100
    assert data["ownerId"] == "user-1"


@pytest.mark.asyncio
async def test_patch_opportunity_can_clear_owner(client):
    created = (await client.post("/api/opportunities", json=MAJOR_GIFT)).json()

    response = await client.patch(f"/api/opportunities/{created['id']}", json={"ownerId": None})

    assert response.status_code == 200
    assert response.json()["ownerId"] is None


@pytest.mark.asyncio
async def test_patch_opportunity_rejects_null_stage_and_zero_ask(client):
    created = (await client.post("/api/opportunities", json=MAJOR_GIFT)).json()

    null_stage = await client.patch(f"/api/opportunities/{created['id']}", json={"stage": None})
    zero_ask = await client.patch(f"/api/opportunities/{created['id']}", json={"askAmount": 0})

    assert null_stage.status_code == 400
    assert null_stage.json()["message"].startswith("Stage must be one of")
    assert zero_ask.status_code == 400


@pytest.mark.asyncio
async def test_patch_unknown_opportunity_is_404(client):
    response = await client.patch(f"/api/opportunities/{uuid.uuid4()}", json={"stage": "Ask"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_opportunity(client):
    created = (await client.post("/api/opportunities", json=MAJOR_GIFT)).json()

    response = await client.delete(f"/api/opportunities/{created['id']}")
    assert response.status_code == 200
    assert response.json()["id"] == created["id"]

    response = await client.delete(f"/api/opportunities/{created['id']}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_opportunity_writes_require_auth(anon_client):
    assert (await anon_client.get("/api/opportunities")).status_code == 200

    response = await anon_client.post("/api/opportunities", json=MAJOR_GIFT)
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_service_accepts_past_close_date(stores):
    service = OpportunityService(
        stores.people, now=lambda: datetime(2026, 10, 19, tzinfo=timezone.utc)
    )

    created = await service.create_opportunity(
        OpportunityCreate(person_id="person-1", close_date=datetime(2026, 1, 1))
    )

    assert created.close_date.year == 2026


@pytest.mark.asyncio
async def test_service_update_missing_raises_not_found(stores):
    service = OpportunityService(stores.people)

    with pytest.raises(NotFoundError) as exc_info:
        await service.update_opportunity("missing", OpportunityUpdate(stage="Ask"))

    assert exc_info.value.message == "Opportunity not found"


@pytest.mark.asyncio
async def test_service_rejects_blank_person_id(stores):
    service = OpportunityService(stores.people)

    with pytest.raises(ValidationError, match="Person ID is required"):
        await service.create_opportunity(OpportunityCreate(person_id="  "))
