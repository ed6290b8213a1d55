"""Pydantic schemas for booking operations."""
from __future__ import annotations

from datetime import datetime

from pydantic import Field, field_validator

from app.db.types import as_utc
from app.models.booking import BookingStatus
from app.schemas.common import APIModel, ResourceId
from app.schemas.service import ServiceRead
from app.schemas.user import UserSummary


class BookingCreate(APIModel):
    customer_name: str = Field(..., min_length=1, max_length=128)
    address: str = Field(..., min_length=1, max_length=512)
    date_time: datetime
    service_id: ResourceId
    special_instructions: str | None = Field(default=None, max_length=2048)

    @field_validator("date_time")
    @classmethod
    def _to_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class BookingUpdate(APIModel):
    """Partial update; ``None`` or missing fields keep their stored value."""

    customer_name: str | None = Field(default=None, min_length=1, max_length=128)
    address: str | None = Field(default=None, min_length=1, max_length=512)
    date_time: datetime | None = None
    service_id: ResourceId | None = None
    special_instructions: str | None = Field(default=None, max_length=2048)
    status: BookingStatus | None = None

    @field_validator("date_time")
    @classmethod
    def _to_utc(cls, value: datetime | None) -> datetime | None:
        return as_utc(value)


class BookingRead(APIModel):
    id: int = Field(..., alias="_id")
    customer_name: str
    address: str
    date_time: datetime
    status: BookingStatus
    service: ServiceRead
    user: UserSummary
    special_instructions: str | None = None
    created_at: datetime
    updated_at: datetime


class BookingData(APIModel):
    booking: BookingRead


class BookingListData(APIModel):
    bookings: list[BookingRead]
