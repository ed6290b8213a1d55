"""Authentication endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_current_user, get_db, get_token_service
from app.core.security import TokenService
from app.models.user import User
from app.schemas.auth import AuthResponse, LoginRequest, SignupRequest
from app.schemas.common import SuccessResponse
from app.schemas.user import UserData, UserPasswordUpdate, UserRead
from app.services.users import authenticate_user, register_user, update_user_password

router = APIRouter(prefix="/auth", tags=["auth"])


def _auth_response(user: User, tokens: TokenService) -> AuthResponse:
    return AuthResponse(token=tokens.issue(user.id), data=UserData(user=UserRead.model_validate(user)))


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    payload: SignupRequest,
    session: AsyncSession = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
) -> AuthResponse:
    user = await register_user(session, payload)
    await session.commit()
    return _auth_response(user, tokens)


@router.post("/login", response_model=AuthResponse)
async def login(
    payload: LoginRequest,
    session: AsyncSession = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
) -> AuthResponse:
    user = await authenticate_user(session, payload.email, payload.password)
    return _auth_response(user, tokens)


@router.get("/me", response_model=SuccessResponse[UserData])
async def get_current_user_info(current_user: User = Depends(get_current_user)) -> SuccessResponse[UserData]:
    return SuccessResponse(data=UserData(user=UserRead.model_validate(current_user)))


@router.patch("/password", response_model=SuccessResponse[UserData])
async def change_password(
    payload: UserPasswordUpdate,
    session: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SuccessResponse[UserData]:
    updated = await update_user_password(
        session,
        current_user,
        payload.current_password,
        payload.new_password,
        payload.new_password_confirm,
    )
    await session.commit()
    return SuccessResponse(data=UserData(user=UserRead.model_validate(updated)))
