"""REST API endpoints for campaigns.

Reads are public; create, update and delete require an authenticated user.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from src.fundrazor.api.deps import get_current_user
from src.fundrazor.campaigns.schemas import CampaignCreate, CampaignRead, CampaignStatus, CampaignUpdate
from src.fundrazor.campaigns.service import CampaignService
from src.fundrazor.users.schemas import UserRead

router = APIRouter(prefix="/campaigns", tags=["campaigns"])


def _get_campaign_service(request: Request) -> CampaignService:
    """Retrieve CampaignService from app.state, 503 if not available."""
    service = getattr(request.app.state, "campaign_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Campaign service not initialized",
        )
    return service


@router.get("", response_model=list[CampaignRead])
async def list_campaigns(
    request: Request,
    status_filter: CampaignStatus | None = Query(default=None, alias="status"),
    owner_id: str | None = Query(default=None, alias="ownerId"),
) -> list[CampaignRead]:
    """List campaigns ordered by start date."""
    service = _get_campaign_service(request)
    return await service.list_campaigns(
        status=status_filter.value if status_filter else None,
        owner_id=owner_id,
    )


@router.get("/{campaign_id}", response_model=CampaignRead)
async def get_campaign(campaign_id: str, request: Request) -> CampaignRead:
    service = _get_campaign_service(request)
    return await service.get_campaign(campaign_id)


@router.post("", response_model=CampaignRead, status_code=201)
async def create_campaign(
    body: CampaignCreate,
    request: Request,
    user: UserRead = Depends(get_current_user),
) -> CampaignRead:
    service = _get_campaign_service(request)
    return await service.create_campaign(body)


@router.patch("/{campaign_id}", response_model=CampaignRead)
async def update_campaign(
    campaign_id: str,
    body: CampaignUpdate,
    request: Request,
    user: UserRead = Depends(get_current_user),
) -> CampaignRead:
    """Apply a partial update; only fields present in the body change."""
    service = _get_campaign_service(request)
    return await service.update_campaign(campaign_id, body)


@router.delete("/{campaign_id}", response_model=CampaignRead)
async def delete_campaign(
    campaign_id: str,
    request: Request,
    user: UserRead = Depends(get_current_user),
) -> CampaignRead:
    """Delete a campaign and return the record as it was."""
    service = _get_campaign_service(request)
    return await service.delete_campaign(campaign_id)
