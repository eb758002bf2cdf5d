"""REST API endpoints for fundraising opportunities.

Reads are public; create, update and delete require an authenticated user.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from src.fundrazor.api.deps import get_current_user
from src.fundrazor.people.schemas import OpportunityCreate, OpportunityRead, OpportunityUpdate
from src.fundrazor.people.service import OpportunityService
from src.fundrazor.users.schemas import UserRead

router = APIRouter(prefix="/opportunities", tags=["opportunities"])


def _get_opportunity_service(request: Request) -> OpportunityService:
    service = getattr(request.app.state, "opportunity_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Opportunity service not initialized",
        )
    return service


@router.get("", response_model=list[OpportunityRead])
async def list_opportunities(
    request: Request,
    person_id: str | None = Query(default=None, alias="personId"),
    owner_id: str | None = Query(default=None, alias="ownerId"),
) -> list[OpportunityRead]:
    """List opportunities by close date, newest first."""
    service = _get_opportunity_service(request)
    return await service.list_opportunities(person_id=person_id, owner_id=owner_id)


@router.get("/{opportunity_id}", response_model=OpportunityRead)
async def get_opportunity(opportunity_id: str, request: Request) -> OpportunityRead:
    service = _get_opportunity_service(request)
    return await service.get_opportunity(opportunity_id)


@router.post("", response_model=OpportunityRead, status_code=201)
async def create_opportunity(
    body: OpportunityCreate,
    request: Request,
    user: UserRead = Depends(get_current_user),
) -> OpportunityRead:
    service = _get_opportunity_service(request)
    return await service.create_opportunity(body)


@router.patch("/{opportunity_id}", response_model=OpportunityRead)
async def update_opportunity(
    opportunity_id: str,
    body: OpportunityUpdate,
    request: Request,
    user: UserRead = Depends(get_current_user),
) -> OpportunityRead:
    service = _get_opportunity_service(request)
    return await service.update_opportunity(opportunity_id, body)


@router.delete("/{opportunity_id}", response_model=OpportunityRead)
async def delete_opportunity(
    opportunity_id: str,
    request: Request,
    user: UserRead = Depends(get_current_user),
) -> OpportunityRead:
    service = _get_opportunity_service(request)
    return await service.delete_opportunity(opportunity_id)
