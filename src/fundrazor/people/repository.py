"""Person and opportunity repository -- async CRUD over a session factory.

Each method opens its own session. Missing rows come back as ``None`` and
the services decide whether that is a NotFoundError.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator, Callable
from datetime import datetime, timezone
from typing import Any

import structlog
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.fundrazor.people.models import OpportunityModel, PersonModel
from src.fundrazor.people.schemas import OpportunityRead, PersonRead

logger = structlog.get_logger(__name__)


class PeopleRepository:
    """Async data access for persons and opportunities.

    Args:
        session_factory: Async callable that yields AsyncSession instances.
    """

    def __init__(
        self, session_factory: Callable[..., AsyncGenerator[AsyncSession, None]]
    ) -> None:
        self._session_factory = session_factory

    # ── Persons ─────────────────────────────────────────────────────────────

    async def list_persons(self, search: str | None = None) -> list[PersonRead]:
        """List persons by last then first name, optionally matching name or email."""
        async for session in self._session_factory():
            stmt = select(PersonModel)
            if search:
                pattern = f"%{search}%"
                stmt = stmt.where(
                    or_(
                        PersonModel.first_name.ilike(pattern),
                        PersonModel.last_name.ilike(pattern),
                        PersonModel.primary_email.ilike(pattern),
                    )
                )
            stmt = stmt.order_by(PersonModel.last_name, PersonModel.first_name)
            result = await session.execute(stmt)
            return [PersonRead.model_validate(m) for m in result.scalars().all()]
        return []

    async def get_person(self, person_id: str) -> PersonRead | None:
        async for session in self._session_factory():
            model = await session.get(PersonModel, person_id)
            return PersonRead.model_validate(model) if model else None
        return None

    async def create_person(self, values: dict[str, Any]) -> PersonRead:
        async for session in self._session_factory():
            model = PersonModel(**values)
            session.add(model)
            await session.commit()
            await session.refresh(model)
            logger.debug("person_created", person_id=model.id)
            return PersonRead.model_validate(model)
        raise RuntimeError("session factory yielded no session")

    async def update_person(self, person_id: str, changes: dict[str, Any]) -> PersonRead | None:
        async for session in self._session_factory():
            model = await session.get(PersonModel, person_id)
            if model is None:
                return None
            for key, value in changes.items():
                setattr(model, key, value)
            model.updated_at = datetime.now(timezone.utc)
            await session.commit()
            await session.refresh(model)
            return PersonRead.model_validate(model)
        return None

    async def delete_person(self, person_id: str) -> PersonRead | None:
        """Delete a person; interactions and opportunities cascade in the database."""
        async for session in self._session_factory():
            model = await session.get(PersonModel, person_id)
            if model is None:
                return None
            deleted = PersonRead.model_validate(model)
            await session.delete(model)
            await session.commit()
            return deleted
        return None

    # ── Opportunities ───────────────────────────────────────────────────────

    async def list_opportunities(
        self, person_id: str | None = None, owner_id: str | None = None
    ) -> list[OpportunityRead]:
        """List opportunities, latest close date first, undated last."""
        async for session in self._session_factory():
            stmt = select(OpportunityModel)
            if person_id:
                stmt = stmt.where(OpportunityModel.person_id == person_id)
            if owner_id:
                stmt = stmt.where(OpportunityModel.owner_id == owner_id)
            stmt = stmt.order_by(OpportunityModel.close_date.desc().nulls_last())
            result = await session.execute(stmt)
            return [OpportunityRead.model_validate(m) for m in result.scalars().all()]
        return []

    async def get_opportunity(self, opportunity_id: str) -> OpportunityRead | None:
        async for session in self._session_factory():
            model = await session.get(OpportunityModel, opportunity_id)
            return OpportunityRead.model_validate(model) if model else None
        return None

    async def create_opportunity(self, values: dict[str, Any]) -> OpportunityRead:
        async for session in self._session_factory():
            model = OpportunityModel(**values)
            session.add(model)
            await session.commit()
            await session.refresh(model)
            logger.debug("opportunity_created", opportunity_id=model.id)
            return OpportunityRead.model_validate(model)
        raise RuntimeError("session factory yielded no session")

    async def update_opportunity(
        self, opportunity_id: str, changes: dict[str, Any]
    ) -> OpportunityRead | None:
        async for session in self._session_factory():
            model = await session.get(OpportunityModel, opportunity_id)
            if model is None:
                return None
            for key, value in changes.items():
                setattr(model, key, value)
            model.updated_at = datetime.now(timezone.utc)
            await session.commit()
            await session.refresh(model)
            return OpportunityRead.model_validate(model)
        return None

    async def delete_opportunity(self, opportunity_id: str) -> OpportunityRead | None:
        async for session in self._session_factory():
            model = await session.get(OpportunityModel, opportunity_id)
            if model is None:
                return None
            deleted = OpportunityRead.model_validate(model)
            await session.delete(model)
            await session.commit()
            return deleted
        return None
