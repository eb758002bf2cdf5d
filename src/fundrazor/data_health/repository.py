"""Read-only queries feeding the data-health report."""

from __future__ import annotations

from collections.abc import AsyncGenerator, Callable
from datetime import datetime

from sqlalchemy import func, literal, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.fundrazor.interactions.models import InteractionModel
from src.fundrazor.people.models import OpportunityModel, PersonModel
from src.fundrazor.people.schemas import PersonRead


class DataHealthRepository:
    def __init__(
        self, session_factory: Callable[..., AsyncGenerator[AsyncSession, None]]
    ) -> None:
        self._session_factory = session_factory

    async def list_persons(self) -> list[PersonRead]:
        async for session in self._session_factory():
            result = await session.execute(select(PersonModel))
            return [PersonRead.model_validate(m) for m in result.scalars().all()]
        return []

    async def count_interactions_since(self, cutoff: datetime) -> int:
        async for session in self._session_factory():
            result = await session.execute(
                select(func.count(InteractionModel.id)).where(
                    InteractionModel.occurred_at >= cutoff
                )
            )
            return int(result.scalar_one())
        return 0

    async def count_unassigned_opportunities(self) -> int:
        async for session in self._session_factory():
            result = await session.execute(
                select(func.count(OpportunityModel.id)).where(
                    or_(OpportunityModel.owner_id.is_(None), OpportunityModel.owner_id == "")
                )
            )
            return int(result.scalar_one())
        return 0

    async def count_duplicate_name_groups(self) -> int:
        """Number of case-insensitive "first last" names shared by 2+ persons."""
        full_name = func.lower(
            PersonModel.first_name + literal(" ") + PersonModel.last_name
        ).label("full_name")
        groups = (
            select(full_name)
            .group_by(full_name)
            .having(func.count(PersonModel.id) > 1)
            .subquery()
        )
        async for session in self._session_factory():
            result = await session.execute(select(func.count()).select_from(groups))
            return int(result.scalar_one())
        return 0
