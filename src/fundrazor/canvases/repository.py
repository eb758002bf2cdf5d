"""Organization canvas repository -- async CRUD over a session factory."""

from __future__ import annotations

from collections.abc import AsyncGenerator, Callable
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.fundrazor.canvases.models import OrganizationCanvasModel
from src.fundrazor.canvases.schemas import CanvasRead


class CanvasRepository:
    def __init__(
        self, session_factory: Callable[..., AsyncGenerator[AsyncSession, None]]
    ) -> None:
        self._session_factory = session_factory

    async def list_canvases(self, owner_id: str | None = None) -> list[CanvasRead]:
        """List canvases, most recently updated first."""
        async for session in self._session_factory():
            stmt = select(OrganizationCanvasModel)
            if owner_id:
                stmt = stmt.where(OrganizationCanvasModel.owner_id == owner_id)
            stmt = stmt.order_by(OrganizationCanvasModel.updated_at.desc())
            result = await session.execute(stmt)
            return [CanvasRead.model_validate(m) for m in result.scalars().all()]
        return []

    async def get_canvas(self, canvas_id: str) -> CanvasRead | None:
        async for session in self._session_factory():
            model = await session.get(OrganizationCanvasModel, canvas_id)
            return CanvasRead.model_validate(model) if model else None
        return None

    async def create_canvas(self, values: dict[str, Any]) -> CanvasRead:
        async for session in self._session_factory():
            model = OrganizationCanvasModel(**values)
            session.add(model)
            await session.commit()
            await session.refresh(model)
            return CanvasRead.model_validate(model)
        raise RuntimeError("session factory yielded no session")

    async def update_canvas(self, canvas_id: str, changes: dict[str, Any]) -> CanvasRead | None:
        async for session in self._session_factory():
            model = await session.get(OrganizationCanvasModel, canvas_id)
            if model is None:
                return None
            for key, value in changes.items():
                setattr(model, key, value)
            model.updated_at = datetime.now(timezone.utc)
            await session.commit()
            await session.refresh(model)
            return CanvasRead.model_validate(model)
        return None

    async def delete_canvas(self, canvas_id: str) -> CanvasRead | None:
        async for session in self._session_factory():
            model = await session.get(OrganizationCanvasModel, canvas_id)
            if model is None:
                return None
            deleted = CanvasRead.model_validate(model)
            await session.delete(model)
            await session.commit()
            return deleted
        return None
