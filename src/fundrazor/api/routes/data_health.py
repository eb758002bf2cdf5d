"""Data-health report endpoint (public)."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, status

from src.fundrazor.data_health.schemas import DataHealthReport
from src.fundrazor.data_health.service import DataHealthService

router = APIRouter(prefix="/data-health", tags=["data-health"])


def _get_data_health_service(request: Request) -> DataHealthService:
    service = getattr(request.app.state, "data_health_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Data health service not initialized",
        )
    return service


@router.get("", response_model=DataHealthReport)
async def get_data_health(request: Request) -> DataHealthReport:
    """Recompute the data-quality report from current donor data."""
    service = _get_data_health_service(request)
    return await service.get_report()
