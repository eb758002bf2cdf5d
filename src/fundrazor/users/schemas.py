"""Pydantic schemas for users and the auth endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import EmailStr, Field

from src.fundrazor.schemas.base import CamelModel
from src.fundrazor.users.models import UserRole


class RegisterRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=8, description="Plaintext password, hashed before storage")
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    role: UserRole = UserRole.MGO


class LoginRequest(CamelModel):
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


class TokenRefreshRequest(CamelModel):
    refresh_token: str = Field(..., description="Valid refresh token")


class TokenResponse(CamelModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class UserRead(CamelModel):
    id: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    role: str
    is_active: bool = True
    created_at: datetime | None = None


class UserInternal(UserRead):
    """UserRead plus the password hash; never returned over HTTP."""

    hashed_password: str | None = None


class AuthResponse(TokenResponse):
    user: UserRead
