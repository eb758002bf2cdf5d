"""REST API endpoints for donor interactions. All endpoints require authentication."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from src.fundrazor.api.deps import get_current_user
from src.fundrazor.interactions.schemas import InteractionCreate, InteractionRead, InteractionUpdate
from src.fundrazor.interactions.service import InteractionService

router = APIRouter(
    prefix="/interactions",
    tags=["interactions"],
    dependencies=[Depends(get_current_user)],
)


def _get_interaction_service(request: Request) -> InteractionService:
    """Retrieve InteractionService from app.state, 503 if not available."""
    service = getattr(request.app.state, "interaction_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Interaction service not initialized",
        )
    return service


@router.get("", response_model=list[InteractionRead])
async def list_interactions(
    request: Request,
    person_id: str | None = Query(default=None, alias="personId"),
) -> list[InteractionRead]:
    """List interactions, newest first, optionally for a single person."""
    service = _get_interaction_service(request)
    return await service.list_interactions(person_id)


@router.get("/{interaction_id}", response_model=InteractionRead)
async def get_interaction(interaction_id: str, request: Request) -> InteractionRead:
    service = _get_interaction_service(request)
    return await service.get_interaction(interaction_id)


@router.post("", response_model=InteractionRead, status_code=201)
async def create_interaction(body: InteractionCreate, request: Request) -> InteractionRead:
    service = _get_interaction_service(request)
    return await service.create_interaction(body)


@router.patch("/{interaction_id}", response_model=InteractionRead)
async def update_interaction(
    interaction_id: str, body: InteractionUpdate, request: Request
) -> InteractionRead:
    service = _get_interaction_service(request)
    return await service.update_interaction(interaction_id, body)


@router.delete("/{interaction_id}", response_model=InteractionRead)
async def delete_interaction(interaction_id: str, request: Request) -> InteractionRead:
    service = _get_interaction_service(request)
    return await service.delete_interaction(interaction_id)
