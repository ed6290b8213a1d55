"""Pydantic schemas for the service catalog."""
from __future__ import annotations

from datetime import datetime

from pydantic import Field

from app.schemas.common import APIModel


class ServiceBase(APIModel):
    name: str = Field(..., min_length=1, max_length=128)
    description: str | None = Field(default=None, max_length=2048)
    price: float = Field(..., ge=0)
    duration: int = Field(..., gt=0, description="Duration in minutes")


class ServiceCreate(ServiceBase):
    pass


class ServiceUpdate(APIModel):
    name: str | None = Field(default=None, min_length=1, max_length=128)
    description: str | None = Field(default=None, max_length=2048)
    price: float | None = Field(default=None, ge=0)
    duration: int | None = Field(default=None, gt=0)
    is_active: bool | None = None


class ServiceRead(ServiceBase):
    id: int = Field(..., alias="_id")
    is_active: bool
    created_at: datetime
    updated_at: datetime


class ServiceData(APIModel):
    service: ServiceRead


class ServiceListData(APIModel):
    services: list[ServiceRead]
