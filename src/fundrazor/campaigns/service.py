"""Campaign business rules.

Validates names, statuses, goals and date ordering before delegating to
the repository, and turns missing rows into NotFoundError.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Protocol

import structlog

from src.fundrazor.campaigns.schemas import (
    VALID_STATUSES,
    CampaignCreate,
    CampaignRead,
    CampaignUpdate,
)
from src.fundrazor.core.errors import NotFoundError, ValidationError
from src.fundrazor.schemas.base import as_utc, column_values

logger = structlog.get_logger(__name__)


class CampaignStore(Protocol):
    async def list_campaigns(
        self, status: str | None = None, owner_id: str | None = None
    ) -> list[CampaignRead]: ...

    async def get_campaign(self, campaign_id: str) -> CampaignRead | None: ...

    async def create_campaign(self, values: dict[str, Any]) -> CampaignRead: ...

    async def update_campaign(
        self, campaign_id: str, changes: dict[str, Any]
    ) -> CampaignRead | None: ...

    async def delete_campaign(self, campaign_id: str) -> CampaignRead | None: ...


def _check_status(status: str | None) -> None:
    if status and status not in VALID_STATUSES:
        raise ValidationError(f"Status must be one of: {', '.join(VALID_STATUSES)}")


def _check_goal(goal: Any) -> None:
    if goal is None:
        return
    try:
        value = Decimal(str(goal))
    except InvalidOperation:
        raise ValidationError("Goal must be a number")
    if value <= 0:
        raise ValidationError("Goal must be greater than zero")


def _check_dates(start: datetime | None, end: datetime | None) -> None:
    if start and end and as_utc(start) > as_utc(end):
        raise ValidationError("Start date must be before end date")


class CampaignService:
    """Campaign CRUD with validation on create and update."""

    def __init__(self, repository: CampaignStore) -> None:
        self._repo = repository

    async def list_campaigns(
        self, status: str | None = None, owner_id: str | None = None
    ) -> list[CampaignRead]:
        logger.debug("campaigns.fetching", status=status, owner_id=owner_id)
        campaigns = await self._repo.list_campaigns(status=status, owner_id=owner_id)
        logger.info("campaigns.fetched", count=len(campaigns))
        return campaigns

    async def get_campaign(self, campaign_id: str) -> CampaignRead:
        logger.debug("campaigns.fetching_one", campaign_id=campaign_id)
        campaign = await self._repo.get_campaign(campaign_id)
        if campaign is None:
            raise NotFoundError("Campaign")
        return campaign

    async def create_campaign(self, data: CampaignCreate) -> CampaignRead:
        logger.debug("campaigns.creating", name=data.name, type=data.type)

        if not data.name or not data.name.strip():
            raise ValidationError("Campaign name is required")
        if not data.type or not data.type.strip():
            raise ValidationError("Campaign type is required")
        status = data.status.value if data.status else None
        _check_status(status)
        _check_goal(data.goal)
        _check_dates(data.start_date, data.end_date)

        values = column_values(data.model_dump(exclude_none=True))
        campaign = await self._repo.create_campaign(values)
        logger.info("campaigns.created", campaign_id=campaign.id, name=campaign.name)
        return campaign

    async def update_campaign(self, campaign_id: str, data: CampaignUpdate) -> CampaignRead:
        changes = data.model_dump(exclude_unset=True)
        logger.debug("campaigns.updating", campaign_id=campaign_id, updates=sorted(changes))

        existing = await self._repo.get_campaign(campaign_id)
        if existing is None:
            raise NotFoundError("Campaign")

        if "name" in changes and (not changes["name"] or not changes["name"].strip()):
            raise ValidationError("Campaign name is required")
        if "type" in changes and (not changes["type"] or not changes["type"].strip()):
            raise ValidationError("Campaign type is required")
        status = changes.get("status")
        if "status" in changes and status is None:
            raise ValidationError(f"Status must be one of: {', '.join(VALID_STATUSES)}")
        _check_status(status.value if hasattr(status, "value") else status)
        _check_goal(changes.get("goal"))
        # Date order is checked against the record as it will be after the patch
        _check_dates(
            changes.get("start_date", existing.start_date),
            changes.get("end_date", existing.end_date),
        )

        updated = await self._repo.update_campaign(campaign_id, column_values(changes))
        if updated is None:
            raise NotFoundError("Campaign")

        logger.info("campaigns.updated", campaign_id=campaign_id, name=updated.name)
        return updated

    async def delete_campaign(self, campaign_id: str) -> CampaignRead:
        logger.debug("campaigns.deleting", campaign_id=campaign_id)
        deleted = await self._repo.delete_campaign(campaign_id)
        if deleted is None:
            raise NotFoundError("Campaign")
        logger.info("campaigns.deleted", campaign_id=campaign_id, name=deleted.name)
        return deleted
