"""User repository -- lookups used by auth and the current-user dependency."""

from __future__ import annotations

from collections.abc import AsyncGenerator, Callable
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.fundrazor.users.models import User
from src.fundrazor.users.schemas import UserInternal


class UserRepository:
    def __init__(
        self, session_factory: Callable[..., AsyncGenerator[AsyncSession, None]]
    ) -> None:
        self._session_factory = session_factory

    async def get_active_user(self, user_id: str) -> UserInternal | None:
        async for session in self._session_factory():
            result = await session.execute(
                select(User).where(
                    User.id == user_id,
                    User.is_active == True,  # noqa: E712
                )
            )
            user = result.scalar_one_or_none()
            return UserInternal.model_validate(user) if user else None
        return None

    async def get_by_email(self, email: str) -> UserInternal | None:
        async for session in self._session_factory():
            result = await session.execute(
                select(User).where(func.lower(User.email) == email.lower())
            )
            user = result.scalar_one_or_none()
            return UserInternal.model_validate(user) if user else None
        return None

    async def create_user(self, values: dict[str, Any]) -> UserInternal:
        async for session in self._session_factory():
            user = User(**values)
            session.add(user)
            await session.commit()
            await session.refresh(user)
            return UserInternal.model_validate(user)
        raise RuntimeError("session factory yielded no session")
