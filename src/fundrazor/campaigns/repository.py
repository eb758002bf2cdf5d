"""Campaign repository -- async CRUD over a session factory.

Uses the session_factory callable pattern: each method opens its own
session, so a repository instance can be shared across requests.
Missing rows are reported as ``None``; turning that into a NotFoundError
is the service's job.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator, Callable
from datetime import datetime, timezone
from typing import Any

import structlog
from sqlalchemy import literal, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.fundrazor.campaigns.models import CampaignModel
from src.fundrazor.campaigns.schemas import CampaignRead
from src.fundrazor.users.models import User

logger = structlog.get_logger(__name__)


class CampaignRepository:
    """Async CRUD operations for campaigns.

    Args:
        session_factory: Async callable that yields AsyncSession instances.
    """

    def __init__(
        self, session_factory: Callable[..., AsyncGenerator[AsyncSession, None]]
    ) -> None:
        self._session_factory = session_factory

    async def list_campaigns(
        self, status: str | None = None, owner_id: str | None = None
    ) -> list[CampaignRead]:
        """List campaigns ordered by start date, optionally filtered."""
        async for session in self._session_factory():
            stmt = select(CampaignModel)
            if status:
                stmt = stmt.where(CampaignModel.status == status)
            if owner_id:
                stmt = stmt.where(CampaignModel.owner_id == owner_id)
            stmt = stmt.order_by(CampaignModel.start_date)
            result = await session.execute(stmt)
            return [CampaignRead.model_validate(m) for m in result.scalars().all()]
        return []

    async def get_campaign(self, campaign_id: str) -> CampaignRead | None:
        """Get a campaign by ID, including the owner's display name."""
        async for session in self._session_factory():
            owner_name = (User.first_name + literal(" ") + User.last_name).label("owner_name")
            stmt = (
                select(CampaignModel, owner_name)
                .outerjoin(User, CampaignModel.owner_id == User.id)
                .where(CampaignModel.id == campaign_id)
            )
            row = (await session.execute(stmt)).first()
            if row is None:
                return None
            campaign = CampaignRead.model_validate(row[0])
            campaign.owner_name = row[1]
            return campaign
        return None

    async def create_campaign(self, values: dict[str, Any]) -> CampaignRead:
        async for session in self._session_factory():
            model = CampaignModel(**values)
            session.add(model)
            await session.commit()
            await session.refresh(model)
            return CampaignRead.model_validate(model)
        raise RuntimeError("session factory yielded no session")

    async def update_campaign(
        self, campaign_id: str, changes: dict[str, Any]
    ) -> CampaignRead | None:
        """Apply a partial patch and refresh updated_at. None if the row is gone."""
        async for session in self._session_factory():
            result = await session.execute(
                select(CampaignModel).where(CampaignModel.id == campaign_id)
            )
            model = result.scalar_one_or_none()
            if model is None:
                return None

            for key, value in changes.items():
                setattr(model, key, value)
            model.updated_at = datetime.now(timezone.utc)
            await session.commit()
            await session.refresh(model)
            return CampaignRead.model_validate(model)
        return None

    async def delete_campaign(self, campaign_id: str) -> CampaignRead | None:
        """Delete a campaign and return its prior state. None if nothing was deleted."""
        async for session in self._session_factory():
            result = await session.execute(
                select(CampaignModel).where(CampaignModel.id == campaign_id)
            )
            model = result.scalar_one_or_none()
            if model is None:
                return None
            deleted = CampaignRead.model_validate(model)
            await session.delete(model)
            await session.commit()
            return deleted
        return None
