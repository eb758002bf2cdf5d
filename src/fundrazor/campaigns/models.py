"""Campaign persistence model."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, Text, func, text
from sqlalchemy.orm import Mapped, mapped_column

from src.fundrazor.core.database import Base


class CampaignModel(Base):
    """Fundraising campaign (Annual, Year-End, Gala, P2P, ...).

    Monetary columns are fixed-point decimals; status is constrained to
    planning/active/completed/paused by the service layer.
    """

    __tablename__ = "campaigns"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), default="planning", server_default=text("'planning'")
    )
    goal: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    raised: Mapped[Decimal | None] = mapped_column(
        Numeric(12, 2), default=Decimal("0.00"), server_default=text("0.00")
    )
    donor_count: Mapped[int | None] = mapped_column(Integer, default=0, server_default=text("0"))
    avg_gift_size: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    total_gifts: Mapped[int | None] = mapped_column(Integer, default=0, server_default=text("0"))
    owner_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    start_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    end_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=True,
    )
