"""Pydantic schemas for organization canvases."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from src.fundrazor.schemas.base import CamelModel


class CanvasCreate(CamelModel):
    name: str
    description: str | None = None
    owner_id: str | None = None
    is_default: bool = False
    canvas_data: dict[str, Any]


class CanvasUpdate(CamelModel):
    name: str | None = None
    description: str | None = None
    owner_id: str | None = None
    is_default: bool | None = None
    canvas_data: dict[str, Any] | None = None


class CanvasRead(CamelModel):
    id: str
    name: str
    description: str | None = None
    owner_id: str | None = None
    is_default: bool = False
    canvas_data: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class DeleteResult(CamelModel):
    success: bool = True
