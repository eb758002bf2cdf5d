"""Tests for DataHealthService and GET /api/data-health.

Uses the in-memory data-health store double from conftest and a fixed clock so
the freshness window is deterministic.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from src.fundrazor.data_health.schemas import CheckStatus, Freshness
from src.fundrazor.data_health.service import DataHealthService

FIXED_NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def _service(store, window_days=30):
    return DataHealthService(store, freshness_window_days=window_days, now=lambda: FIXED_NOW)


# ── Service ──────────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_recent_interaction_keeps_data_fresh(make_health_store):
    store = make_health_store(interaction_times=[FIXED_NOW - timedelta(days=29)])

    report = await _service(store).get_report()

    assert report.metrics.data_freshness == Freshness.GOOD


@pytest.mark.asyncio
async def test_stale_interactions_need_attention(make_health_store):
    store = make_health_store(interaction_times=[FIXED_NOW - timedelta(days=31)])

    report = await _service(store).get_report()

    assert report.metrics.data_freshness == Freshness.NEEDS_ATTENTION


@pytest.mark.asyncio
async def test_no_interactions_need_attention(make_health_store):
    report = await _service(make_health_store()).get_report()

    assert report.metrics.data_freshness == Freshness.NEEDS_ATTENTION
    assert report.metrics.overall_health == 100


@pytest.mark.asyncio
async def test_freshness_window_is_configurable(make_health_store):
    store = make_health_store(interaction_times=[FIXED_NOW - timedelta(days=10)])

    report = await _service(store, window_days=7).get_report()

    assert report.metrics.data_freshness == Freshness.NEEDS_ATTENTION


@pytest.mark.asyncio
async def test_duplicate_groups_counted_case_insensitively(make_health_store, person_factory):
    persons = [
        person_factory(first_name="James", last_name="Whitfield"),
        person_factory(first_name="james", last_name="WHITFIELD"),
        person_factory(first_name="James", last_name="Whitfield"),
        person_factory(first_name="Ana", last_name="Lee"),
        person_factory(first_name="ana", last_name="lee"),
        person_factory(first_name="Solo", last_name="Donor"),
    ]
    store = make_health_store(persons=persons)

    report = await _service(store).get_report()

    # two groups, not three surplus records
    item = next(i for i in report.action_items if i.id == "duplicates")
    assert item.title == "2 potential duplicate records detected"
    assert report.quality_checks.duplicate_detection == CheckStatus.WARNING


@pytest.mark.asyncio
async def test_null_and_empty_owners_are_unassigned(make_health_store):
    store = make_health_store(opportunity_owners=[None, "", "user-1"])

    report = await _service(store).get_report()

    item = next(i for i in report.action_items if i.id == "unassigned-opps")
    assert item.title == "2 opportunities without owners"


# ── API ──────────────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_get_data_health_is_public(anon_client, stores, person_factory):
    stores.data_health.persons = [
        person_factory(primary_email=None),
        person_factory(primary_email=None),
        person_factory(),
    ]
    stores.data_health.interaction_times = [FIXED_NOW - timedelta(days=1)]

    response = await anon_client.get("/api/data-health")

    assert response.status_code == 200, response.text
    data = response.json()
    assert data["metrics"]["missingEmails"] == 2
    assert data["metrics"]["dataFreshness"] == "Good"
    assert data["metrics"]["profileCompleteness"] == 33
    assert data["qualityChecks"]["emailValidation"] == "Warning"
    assert data["actionItems"][0]["id"] == "missing-emails"
    assert "2 donors missing email" in data["actionItems"][0]["title"]


@pytest.mark.asyncio
async def test_get_data_health_empty_database(anon_client):
    response = await anon_client.get("/api/data-health")

    assert response.status_code == 200
    data = response.json()
    assert data["metrics"]["overallHealth"] == 100
    assert data["metrics"]["profileCompleteness"] == 100
    assert data["actionItems"] == []


@pytest.mark.asyncio
async def test_store_failure_returns_500(app, stores, monkeypatch):
    async def _fail():
        raise RuntimeError("connection reset")

    monkeypatch.setattr(stores.data_health, "list_persons", _fail)

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/data-health")

    assert response.status_code == 500
    assert "message" in response.json()


@pytest.mark.asyncio
async def test_data_health_503_when_not_initialized(app):
    app.state.data_health_service = None

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/data-health")

    assert response.status_code == 503
    assert "not initialized" in response.json()["message"]
