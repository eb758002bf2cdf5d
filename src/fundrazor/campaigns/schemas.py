"""Pydantic schemas for campaign management.

- CampaignStatus: planning/active/completed/paused
- CampaignCreate / CampaignUpdate: request bodies (update is fully optional)
- CampaignRead: persisted campaign, optionally with the owner's display name
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import Field

from src.fundrazor.schemas.base import CamelModel


class CampaignStatus(str, Enum):
    PLANNING = "planning"
    ACTIVE = "active"
    COMPLETED = "completed"
    PAUSED = "paused"


VALID_STATUSES = [s.value for s in CampaignStatus]


class CampaignCreate(CamelModel):
    """Request body for creating a campaign."""

    name: str = Field(min_length=1, max_length=255)
    type: str = Field(min_length=1)
    description: str | None = None
    status: CampaignStatus = CampaignStatus.PLANNING
    goal: Decimal | None = Field(default=None, max_digits=12, decimal_places=2)
    raised: Decimal | None = Field(default=None, max_digits=12, decimal_places=2)
    donor_count: int | None = Field(default=None, ge=0)
    avg_gift_size: Decimal | None = Field(default=None, max_digits=12, decimal_places=2)
    total_gifts: int | None = Field(default=None, ge=0)
    owner_id: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None


class CampaignUpdate(CamelModel):
    """Partial update body; only fields present in the request are applied."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    type: str | None = Field(default=None, min_length=1)
    description: str | None = None
    status: CampaignStatus | None = None
    goal: Decimal | None = Field(default=None, max_digits=12, decimal_places=2)
    raised: Decimal | None = Field(default=None, max_digits=12, decimal_places=2)
    donor_count: int | None = Field(default=None, ge=0)
    avg_gift_size: Decimal | None = Field(default=None, max_digits=12, decimal_places=2)
    total_gifts: int | None = Field(default=None, ge=0)
    owner_id: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None


class CampaignRead(CamelModel):
    id: str
    name: str
    type: str
    description: str | None = None
    status: str = CampaignStatus.PLANNING.value
    goal: Decimal | None = None
    raised: Decimal | None = None
    donor_count: int | None = None
    avg_gift_size: Decimal | None = None
    total_gifts: int | None = None
    owner_id: str | None = None
    owner_name: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
