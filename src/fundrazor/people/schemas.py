"""Pydantic schemas for persons and opportunities.

- PersonCreate / PersonUpdate / PersonRead: donor records
- OpportunityStage: Prospect -> Cultivation -> Ask -> Steward -> Renewal
- OpportunityCreate / OpportunityUpdate / OpportunityRead: pipeline entries
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import Field

from src.fundrazor.schemas.base import CamelModel


class OpportunityStage(str, Enum):
    PROSPECT = "Prospect"
    CULTIVATION = "Cultivation"
    ASK = "Ask"
    STEWARD = "Steward"
    RENEWAL = "Renewal"


VALID_STAGES = [s.value for s in OpportunityStage]


class PersonCreate(CamelModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    preferred_name: str | None = None
    primary_email: str | None = None
    primary_phone: str | None = None
    organization_name: str | None = None
    wealth_band: str | None = None
    capacity_score: int | None = Field(default=None, ge=0, le=100)
    engagement_score: int | None = Field(default=None, ge=0, le=100)
    source_system: str | None = None
    source_record_id: str | None = None
    data_quality_score: int | None = Field(default=None, ge=0, le=100)


class PersonUpdate(CamelModel):
    """Partial update body; only fields present in the request are applied."""

    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    preferred_name: str | None = None
    primary_email: str | None = None
    primary_phone: str | None = None
    organization_name: str | None = None
    wealth_band: str | None = None
    capacity_score: int | None = Field(default=None, ge=0, le=100)
    engagement_score: int | None = Field(default=None, ge=0, le=100)
    source_system: str | None = None
    source_record_id: str | None = None
    data_quality_score: int | None = Field(default=None, ge=0, le=100)


class PersonRead(CamelModel):
    """Person as read from the store; the data-health report consumes these."""

    id: str
    first_name: str
    last_name: str
    preferred_name: str | None = None
    primary_email: str | None = None
    primary_phone: str | None = None
    organization_name: str | None = None
    wealth_band: str | None = None
    capacity_score: int | None = None
    engagement_score: int | None = None
    source_system: str | None = None
    source_record_id: str | None = None
    synced_at: datetime | None = None
    data_quality_score: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class OpportunityCreate(CamelModel):
    person_id: str = Field(min_length=1)
    stage: OpportunityStage = OpportunityStage.PROSPECT
    ask_amount: Decimal | None = Field(default=None, max_digits=10, decimal_places=2)
    probability: int | None = Field(default=None, ge=0, le=100)
    close_date: datetime | None = None
    owner_id: str | None = None
    notes: str | None = None


class OpportunityUpdate(CamelModel):
    person_id: str | None = Field(default=None, min_length=1)
    stage: OpportunityStage | None = None
    ask_amount: Decimal | None = Field(default=None, max_digits=10, decimal_places=2)
    probability: int | None = Field(default=None, ge=0, le=100)
    close_date: datetime | None = None
    owner_id: str | None = None
    notes: str | None = None


class OpportunityRead(CamelModel):
    id: str
    person_id: str
    stage: str
    ask_amount: Decimal | None = None
    probability: int | None = None
    close_date: datetime | None = None
    owner_id: str | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
