"""Authentication-related schemas."""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.common import APIModel
from app.schemas.user import UserData

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class SignupRequest(APIModel):
    model_config = ConfigDict(str_strip_whitespace=False)

    username: str = Field(..., min_length=3, max_length=64)
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=8, max_length=128)
    password_confirm: str = Field(..., min_length=8, max_length=128)

    @field_validator("username", "email", mode="before")
    @classmethod
    def _strip(cls, value):
        # Passwords keep their whitespace; identifiers do not
        return value.strip() if isinstance(value, str) else value


class LoginRequest(APIModel):
    model_config = ConfigDict(str_strip_whitespace=False)

    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class AuthResponse(BaseModel):
    status: Literal["success"] = "success"
    token: str
    data: UserData
