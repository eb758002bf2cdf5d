"""Pydantic schemas for the data-health report.

The report is derived, never persisted: it is recomputed from current
person/interaction/opportunity state on every request.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from src.fundrazor.schemas.base import CamelModel


class CheckStatus(str, Enum):
    PASSING = "Passing"
    WARNING = "Warning"
    FAILING = "Failing"


class Freshness(str, Enum):
    GOOD = "Good"
    NEEDS_ATTENTION = "Needs Attention"


class HealthMetrics(CamelModel):
    overall_health: int = Field(ge=0, le=100)
    profile_completeness: int = Field(ge=0, le=100)
    missing_emails: int = Field(ge=0)
    data_freshness: Freshness


class QualityChecks(CamelModel):
    email_validation: CheckStatus
    phone_formatting: CheckStatus
    address_completeness: CheckStatus
    duplicate_detection: CheckStatus


class ActionItem(CamelModel):
    """Remediation suggestion; ``id`` is stable across reports."""

    id: str
    title: str
    description: str


class DataHealthReport(CamelModel):
    metrics: HealthMetrics
    quality_checks: QualityChecks
    action_items: list[ActionItem] = Field(default_factory=list)
