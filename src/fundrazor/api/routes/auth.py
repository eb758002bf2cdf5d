"""Authentication API endpoints.

Provides registration, login, token refresh and current user info.
All endpoints except ``/me`` are public.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, status

from src.fundrazor.api.deps import get_current_user
from src.fundrazor.users.schemas import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    TokenRefreshRequest,
    TokenResponse,
    UserRead,
)
from src.fundrazor.users.service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


def _get_auth_service(request: Request) -> AuthService:
    service = getattr(request.app.state, "auth_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Auth service not initialized",
        )
    return service


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(body: RegisterRequest, request: Request) -> AuthResponse:
    """Create a staff account and sign it in."""
    return await _get_auth_service(request).register(body)


@router.post("/login", response_model=AuthResponse)
async def login(body: LoginRequest, request: Request) -> AuthResponse:
    """Authenticate a user and return JWT tokens."""
    return await _get_auth_service(request).login(body)


@router.post("/refresh", response_model=TokenResponse)
async def refresh_token(body: TokenRefreshRequest, request: Request) -> TokenResponse:
    """Issue a new token pair from a valid refresh token."""
    return await _get_auth_service(request).refresh(body.refresh_token)


@router.get("/me", response_model=UserRead)
async def get_me(current_user: UserRead = Depends(get_current_user)) -> UserRead:
    return current_user
