"""API router -- aggregates all endpoint routers under /api."""

from __future__ import annotations

from fastapi import APIRouter

from src.fundrazor.api.routes import (
    auth,
    campaigns,
    data_health,
    health,
    interactions,
    opportunities,
    organization_canvases,
    persons,
)

router = APIRouter(prefix="/api")

router.include_router(health.router)
router.include_router(auth.router)
router.include_router(data_health.router)
router.include_router(persons.router)
router.include_router(opportunities.router)
router.include_router(campaigns.router)
router.include_router(interactions.router)
router.include_router(organization_canvases.router)
