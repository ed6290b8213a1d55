"""Database model for customer bookings."""
from __future__ import annotations

import enum
from datetime import datetime

from sqlalchemy import Enum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.db.types import UTCDateTime
from app.models.service import Service
from app.models.user import User, utcnow


class BookingStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Booking(Base):
    """Appointment for one service, owned by the user who created it."""

    __tablename__ = "bookings"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    customer_name: Mapped[str] = mapped_column(String(128), nullable=False)
    address: Mapped[str] = mapped_column(String(512), nullable=False)
    date_time: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, index=True)
    status: Mapped[BookingStatus] = mapped_column(
        Enum(BookingStatus, native_enum=False, length=16, values_callable=lambda items: [s.value for s in items]),
        default=BookingStatus.PENDING,
        nullable=False,
    )
    service_id: Mapped[int] = mapped_column(ForeignKey("services.id"), nullable=False)
    # Owner is fixed at creation
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    special_instructions: Mapped[str | None] = mapped_column(Text, default=None)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime, default=utcnow, onupdate=utcnow)

    service: Mapped[Service] = relationship("Service", lazy="raise")
    user: Mapped[User] = relationship("User", lazy="raise")
