"""Pydantic schemas for interaction tracking."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import Field

from src.fundrazor.schemas.base import CamelModel


class InteractionType(str, Enum):
    EMAIL_OPEN = "email_open"
    EMAIL_CLICK = "email_click"
    MEETING = "meeting"
    CALL = "call"
    EVENT = "event"
    NOTE = "note"


VALID_TYPES = [t.value for t in InteractionType]


class InteractionCreate(CamelModel):
    """Request body for logging an interaction."""

    person_id: str = Field(min_length=1)
    type: InteractionType
    occurred_at: datetime
    owner_id: str | None = None
    notes: str | None = None
    source: str | None = None
    source_system: str | None = None
    source_record_id: str | None = None
    synced_at: datetime | None = None
    data_quality_score: int | None = Field(default=None, ge=0, le=100)


class InteractionUpdate(CamelModel):
    person_id: str | None = Field(default=None, min_length=1)
    type: InteractionType | None = None
    occurred_at: datetime | None = None
    owner_id: str | None = None
    notes: str | None = None
    source: str | None = None
    source_system: str | None = None
    source_record_id: str | None = None
    synced_at: datetime | None = None
    data_quality_score: int | None = Field(default=None, ge=0, le=100)


class InteractionRead(CamelModel):
    id: str
    person_id: str
    type: str
    occurred_at: datetime
    owner_id: str | None = None
    notes: str | None = None
    source: str | None = None
    source_system: str | None = None
    source_record_id: str | None = None
    synced_at: datetime | None = None
    data_quality_score: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
