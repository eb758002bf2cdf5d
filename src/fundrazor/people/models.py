"""Donor persistence models -- persons and their pipeline opportunities.

- PersonModel: a donor/contact record (read-only to the data-health report)
- OpportunityModel: a pipeline entry tied to a person and optionally an owner
"""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, Text, func, text
from sqlalchemy.orm import Mapped, mapped_column

from src.fundrazor.core.database import Base


class PersonModel(Base):
    """Donor or contact.

    Integration metadata (source_system, source_record_id, synced_at,
    data_quality_score) is written by CRM sync jobs.
    """

    __tablename__ = "persons"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    preferred_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    primary_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    primary_phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    organization_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    wealth_band: Mapped[str | None] = mapped_column(String(50), nullable=True)
    capacity_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    engagement_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    source_system: Mapped[str | None] = mapped_column(String(100), nullable=True)
    source_record_id: Mapped[str | None] = mapped_column(String(200), nullable=True)
    synced_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    data_quality_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        onupdate=func.now(),
        nullable=True,
    )


class OpportunityModel(Base):
    """Pipeline entry for a prospective or in-progress gift."""

    __tablename__ = "opportunities"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    person_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("persons.id", ondelete="CASCADE"), nullable=False
    )
    stage: Mapped[str] = mapped_column(
        String(30), default="Prospect", server_default=text("'Prospect'")
    )
    ask_amount: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    probability: Mapped[int | None] = mapped_column(Integer, nullable=True)
    close_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    owner_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        onupdate=func.now(),
        nullable=True,
    )
