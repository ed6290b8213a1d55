"""User service functions for registration, lookup and authentication."""
from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import AuthenticationError, ConflictError, ValidationError
from app.core.security import PasswordHasher
from app.models.user import User, UserRole, utcnow
from app.schemas.auth import SignupRequest

logger = logging.getLogger(__name__)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


async def get_user_by_id(session: AsyncSession, user_id: int) -> User | None:
    return await session.get(User, user_id)


async def get_user_by_email(session: AsyncSession, email: str) -> User | None:
    result = await session.execute(select(User).where(User.email == _normalize_email(email)))
    return result.scalar_one_or_none()


async def get_user_by_username(session: AsyncSession, username: str) -> User | None:
    result = await session.execute(select(User).where(User.username == username.strip()))
    return result.scalar_one_or_none()


async def create_user(
    session: AsyncSession,
    username: str,
    email: str,
    password: str,
    role: UserRole = UserRole.USER,
) -> User:
    username = username.strip()
    email = _normalize_email(email)
    if await get_user_by_email(session, email):
        raise ConflictError("email")
    if await get_user_by_username(session, username):
        raise ConflictError("username")

    user = User(username=username, email=email, password_hash=PasswordHasher.hash(password), role=role)
    session.add(user)
    try:
        await session.flush()
    except IntegrityError as exc:
        # Lost a race against a concurrent signup with the same email or username
        await session.rollback()
        field = "username" if "username" in str(exc.orig) else "email"
        raise ConflictError(field) from exc
    return user


async def register_user(session: AsyncSession, payload: SignupRequest) -> User:
    """Create a regular user account. The role is always ``user``."""
    if payload.password != payload.password_confirm:
        raise ValidationError("Passwords do not match!")

    user = await create_user(session, payload.username, payload.email, payload.password, role=UserRole.USER)
    logger.info("Registered user %s (id=%s)", user.username, user.id)
    return user


async def authenticate_user(session: AsyncSession, email: str, password: str) -> User:
    user = await get_user_by_email(session, email)
    if not user:
        PasswordHasher.dummy_verify()
        logger.warning("Failed login for unknown email")
        raise AuthenticationError("Incorrect email or password")
    if not PasswordHasher.verify(password, user.password_hash):
        logger.warning("Failed login for user id=%s", user.id)
        raise AuthenticationError("Incorrect email or password")
    return user


async def update_user_password(
    session: AsyncSession, user: User, current_password: str, new_password: str, new_password_confirm: str
) -> User:
    if not PasswordHasher.verify(current_password, user.password_hash):
        raise AuthenticationError("Current password is incorrect")
    if new_password != new_password_confirm:
        raise ValidationError("Passwords do not match!")
    user.password_hash = PasswordHasher.hash(new_password)
    user.updated_at = utcnow()
    await session.flush()
    logger.info("Password changed for user id=%s", user.id)
    return user


async def set_admin(session: AsyncSession, user: User, password: str | None = None) -> User:
    """Promote an existing account to admin, optionally resetting its password."""
    user.role = UserRole.ADMIN
    if password:
        user.password_hash = PasswordHasher.hash(password)
    user.updated_at = utcnow()
    await session.flush()
    logger.info("User id=%s promoted to admin", user.id)
    return user
