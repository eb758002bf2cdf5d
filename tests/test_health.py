"""Tests for liveness, readiness, request logging and the Prometheus endpoint."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from src.fundrazor.api.routes import health as health_module


@pytest.mark.asyncio
async def test_liveness(anon_client):
    response = await anon_client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_readiness_degraded_without_database(anon_client, monkeypatch):
    def _no_engine():
        raise ConnectionRefusedError("database is down")

    monkeypatch.setattr(health_module, "get_engine", _no_engine)

    response = await anon_client.get("/api/health/ready")

    assert response.status_code == 503
    data = response.json()
    assert data["status"] == "degraded"
    assert data["checks"]["database"] == "error"


@pytest.mark.asyncio
async def test_metrics_exposition(anon_client):
    await anon_client.get("/api/health")

    response = await anon_client.get("/metrics")

    assert response.status_code == 200
    assert "fundrazor_http_requests_total" in response.text
    assert 'endpoint="/api/health"' in response.text


@pytest.mark.asyncio
async def test_request_id_header(anon_client):
    response = await anon_client.get("/api/health")

    assert response.headers["X-Request-ID"]


@pytest.mark.asyncio
async def test_request_log_names_matched_route(anon_client):
    with capture_logs() as logs:
        response = await anon_client.get("/api/campaigns/c-404")

    assert response.status_code == 404
    entry = next(e for e in logs if e["event"] == "request_completed")
    assert entry["route"] == "/api/campaigns/{campaign_id}"
    assert entry["path"] == "/api/campaigns/c-404"
    assert entry["log_level"] == "warning"
