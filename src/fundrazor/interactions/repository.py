"""Interaction repository -- async CRUD over a session factory."""

from __future__ import annotations

from collections.abc import AsyncGenerator, Callable
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.fundrazor.interactions.models import InteractionModel
from src.fundrazor.interactions.schemas import InteractionRead


class InteractionRepository:
    """Async CRUD operations for interactions.

    Args:
        session_factory: Async callable that yields AsyncSession instances.
    """

    def __init__(
        self, session_factory: Callable[..., AsyncGenerator[AsyncSession, None]]
    ) -> None:
        self._session_factory = session_factory

    async def list_interactions(self, person_id: str | None = None) -> list[InteractionRead]:
        """List interactions newest first, optionally for a single person."""
        async for session in self._session_factory():
            stmt = select(InteractionModel)
            if person_id:
                stmt = stmt.where(InteractionModel.person_id == person_id)
            stmt = stmt.order_by(InteractionModel.occurred_at.desc())
            result = await session.execute(stmt)
            return [InteractionRead.model_validate(m) for m in result.scalars().all()]
        return []

    async def get_interaction(self, interaction_id: str) -> InteractionRead | None:
        async for session in self._session_factory():
            result = await session.execute(
                select(InteractionModel).where(InteractionModel.id == interaction_id)
            )
            model = result.scalar_one_or_none()
            return InteractionRead.model_validate(model) if model else None
        return None

    async def create_interaction(self, values: dict[str, Any]) -> InteractionRead:
        async for session in self._session_factory():
            model = InteractionModel(**values)
            session.add(model)
            await session.commit()
            await session.refresh(model)
            return InteractionRead.model_validate(model)
        raise RuntimeError("session factory yielded no session")

    async def update_interaction(
        self, interaction_id: str, changes: dict[str, Any]
    ) -> InteractionRead | None:
        async for session in self._session_factory():
            result = await session.execute(
                select(InteractionModel).where(InteractionModel.id == interaction_id)
            )
            model = result.scalar_one_or_none()
            if model is None:
                return None

            for key, value in changes.items():
                setattr(model, key, value)
            model.updated_at = datetime.now(timezone.utc)
            await session.commit()
            await session.refresh(model)
            return InteractionRead.model_validate(model)
        return None

    async def delete_interaction(self, interaction_id: str) -> InteractionRead | None:
        async for session in self._session_factory():
            result = await session.execute(
                select(InteractionModel).where(InteractionModel.id == interaction_id)
            )
            model = result.scalar_one_or_none()
            if model is None:
                return None
            deleted = InteractionRead.model_validate(model)
            await session.delete(model)
            await session.commit()
            return deleted
        return None
