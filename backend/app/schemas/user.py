"""Pydantic schemas for user operations."""
from __future__ import annotations

from datetime import datetime

from pydantic import ConfigDict, Field

from app.models.user import UserRole
from app.schemas.common import APIModel


class UserSummary(APIModel):
    id: int = Field(..., alias="_id")
    username: str
    email: str


class UserRead(UserSummary):
    role: UserRole
    created_at: datetime
    updated_at: datetime


class UserData(APIModel):
    user: UserRead


class UserPasswordUpdate(APIModel):
    model_config = ConfigDict(str_strip_whitespace=False)

    current_password: str = Field(..., min_length=1, max_length=128)
    new_password: str = Field(..., min_length=8, max_length=128)
    new_password_confirm: str = Field(..., min_length=8, max_length=128)
