"""Booking lifecycle: creation, listing, patch updates and deletion.

Every read expands the service and owner explicitly through
``_with_relations``; the relationships are ``lazy="raise"`` so an
unexpanded access fails loudly instead of issuing a hidden query.
"""
from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.exceptions import AuthorizationError, NotFoundError
from app.core.permissions import can_mutate
from app.models.booking import Booking, BookingStatus
from app.models.user import User, UserRole, utcnow
from app.schemas.booking import BookingCreate, BookingUpdate
from app.services.catalog import require_service

logger = logging.getLogger(__name__)


def _with_relations():
    return (selectinload(Booking.service), selectinload(Booking.user))


async def _load(session: AsyncSession, booking_id: int) -> Booking | None:
    result = await session.execute(
        select(Booking)
        .options(*_with_relations())
        .where(Booking.id == booking_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def _load_for(session: AsyncSession, booking_id: int, acting_user: User, action: str) -> Booking:
    booking = await _load(session, booking_id)
    if not booking:
        raise NotFoundError("No booking found with that ID")
    if not can_mutate(acting_user, booking.user_id):
        logger.warning("User id=%s denied %s on booking id=%s", acting_user.id, action, booking_id)
        raise AuthorizationError(f"You are not authorized to {action} this booking")
    return booking


async def create_booking(session: AsyncSession, data: BookingCreate, acting_user: User) -> Booking:
    # Existence only; a deactivated service is still accepted
    service = await require_service(session, data.service_id)

    booking = Booking(
        customer_name=data.customer_name,
        address=data.address,
        date_time=data.date_time,
        status=BookingStatus.PENDING,
        service_id=service.id,
        user_id=acting_user.id,
        special_instructions=data.special_instructions,
    )
    session.add(booking)
    await session.flush()
    logger.info("User id=%s created booking id=%s for service id=%s", acting_user.id, booking.id, service.id)
    return await _load(session, booking.id)


async def list_user_bookings(session: AsyncSession, acting_user: User) -> list[Booking]:
    result = await session.execute(
        select(Booking)
        .options(*_with_relations())
        .where(Booking.user_id == acting_user.id)
        .order_by(Booking.date_time, Booking.id)
    )
    return list(result.scalars().all())


async def list_all_bookings(session: AsyncSession) -> list[Booking]:
    result = await session.execute(
        select(Booking).options(*_with_relations()).order_by(Booking.date_time, Booking.id)
    )
    return list(result.scalars().all())


async def get_booking(session: AsyncSession, booking_id: int, acting_user: User) -> Booking:
    return await _load_for(session, booking_id, acting_user, "view")


async def update_booking(
    session: AsyncSession, booking_id: int, data: BookingUpdate, acting_user: User
) -> Booking:
    booking = await _load_for(session, booking_id, acting_user, "update")

    if data.customer_name is not None:
        booking.customer_name = data.customer_name
    if data.address is not None:
        booking.address = data.address
    if data.date_time is not None:
        booking.date_time = data.date_time
    if data.service_id is not None:
        service = await require_service(session, data.service_id)
        booking.service_id = service.id
    if data.special_instructions is not None:
        booking.special_instructions = data.special_instructions

    # Status is silently ignored for non-admins; admins may set any value
    if data.status is not None and acting_user.role == UserRole.ADMIN:
        if booking.status != data.status:
            logger.info(
                "Admin id=%s moved booking id=%s from %s to %s",
                acting_user.id,
                booking.id,
                booking.status.value,
                data.status.value,
            )
        booking.status = data.status

    booking.updated_at = utcnow()
    await session.flush()
    return await _load(session, booking.id)


async def delete_booking(session: AsyncSession, booking_id: int, acting_user: User) -> None:
    booking = await _load_for(session, booking_id, acting_user, "delete")
    await session.delete(booking)
    await session.flush()
    logger.info("User id=%s deleted booking id=%s", acting_user.id, booking_id)
