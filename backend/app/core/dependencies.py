"""Reusable dependencies for FastAPI routes."""
from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from functools import lru_cache

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.exceptions import AuthenticationError, AuthorizationError
from app.core.security import TokenService
from app.db.session import get_session
from app.models.user import User, UserRole
from app.services.users import get_user_by_id

bearer_scheme = HTTPBearer(auto_error=False)


async def get_db() -> AsyncIterator[AsyncSession]:
    async with get_session() as session:
        yield session


@lru_cache
def get_token_service() -> TokenService:
    settings = get_settings()
    return TokenService(
        secret_key=settings.secret_key,
        expires_in_seconds=settings.access_token_expire_minutes * 60,
        salt=settings.token_salt,
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    session: AsyncSession = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
) -> User:
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("You are not logged in! Please log in to get access.")

    user_id = tokens.verify(credentials.credentials)
    user = await get_user_by_id(session, user_id)
    if not user:
        raise AuthenticationError("The user belonging to this token no longer exists.")
    return user


def require_roles(*roles: UserRole) -> Callable[..., Awaitable[User]]:
    """Build a dependency that admits only users whose role is in ``roles``."""
    allowed = frozenset(roles)

    async def _check_role(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in allowed:
            raise AuthorizationError("You do not have permission to perform this action")
        return current_user

    return _check_role


require_admin = require_roles(UserRole.ADMIN)
