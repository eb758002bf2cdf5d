"""Registration, login and token refresh."""

from __future__ import annotations

from typing import Any, Protocol

import structlog

from src.fundrazor.core.errors import ConflictError, UnauthorizedError
from src.fundrazor.core.security import (
    create_access_token,
    create_refresh_token,
    hash_password,
    verify_password,
    verify_token,
)
from src.fundrazor.users.schemas import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserInternal,
    UserRead,
)

logger = structlog.get_logger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class UserStore(Protocol):
    async def get_active_user(self, user_id: str) -> UserInternal | None: ...

    async def get_by_email(self, email: str) -> UserInternal | None: ...

    async def create_user(self, values: dict[str, Any]) -> UserInternal: ...


def _issue_tokens(user: UserInternal) -> TokenResponse:
    token_data = {"sub": user.id, "email": user.email, "role": user.role}
    return TokenResponse(
        access_token=create_access_token(token_data),
        refresh_token=create_refresh_token(token_data),
    )


def _auth_response(user: UserInternal) -> AuthResponse:
    tokens = _issue_tokens(user)
    return AuthResponse(
        access_token=tokens.access_token,
        refresh_token=tokens.refresh_token,
        user=UserRead.model_validate(user.model_dump()),
    )


class AuthService:
    def __init__(self, repository: UserStore) -> None:
        self._repo = repository

    async def register(self, body: RegisterRequest) -> AuthResponse:
        email = body.email.lower()
        if await self._repo.get_by_email(email) is not None:
            logger.warning("auth.register_conflict", email=email)
            raise ConflictError("A user with this email already exists")

        user = await self._repo.create_user({
            "email": email,
            "first_name": body.first_name,
            "last_name": body.last_name,
            "role": body.role.value,
            "hashed_password": hash_password(body.password),
        })
        logger.info("auth.registered", user_id=user.id, role=user.role)
        return _auth_response(user)

    async def login(self, body: LoginRequest) -> AuthResponse:
        user = await self._repo.get_by_email(body.email)
        if not user or not user.is_active or not user.hashed_password:
            raise UnauthorizedError(INVALID_CREDENTIALS)
        if not verify_password(body.password, user.hashed_password):
            logger.warning("auth.login_failed", user_id=user.id)
            raise UnauthorizedError(INVALID_CREDENTIALS)

        logger.info("auth.logged_in", user_id=user.id)
        return _auth_response(user)

    async def refresh(self, refresh_token: str) -> TokenResponse:
        payload = verify_token(refresh_token, token_type="refresh")
        user = await self._repo.get_active_user(payload["sub"])
        if user is None:
            raise UnauthorizedError("User not found or inactive")
        return _issue_tokens(user)
