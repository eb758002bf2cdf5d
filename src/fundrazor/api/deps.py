"""FastAPI dependency injection for authentication.

get_current_user is used in endpoint signatures (or router dependencies)
to resolve the signed-in staff user from the bearer token.
"""

from __future__ import annotations

from fastapi import Request

from src.fundrazor.core.errors import ServiceUnavailableError, UnauthorizedError
from src.fundrazor.core.security import verify_token
from src.fundrazor.users.schemas import UserRead


async def get_current_user(request: Request) -> UserRead:
    """Extract and validate the current user from the bearer JWT.

    Raises:
        UnauthorizedError: If no valid token is provided or the user is
            missing or inactive.
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise UnauthorizedError("Not authenticated")

    payload = verify_token(auth_header[7:], token_type="access")

    repo = getattr(request.app.state, "user_repository", None)
    if repo is None:
        raise ServiceUnavailableError("User store")

    user = await repo.get_active_user(payload["sub"])
    if user is None:
        raise UnauthorizedError("User not found or inactive")
    return UserRead.model_validate(user.model_dump())
