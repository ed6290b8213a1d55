"""Booking endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_current_user, get_db, require_admin
from app.models.booking import Booking
from app.models.user import User
from app.schemas.booking import BookingCreate, BookingData, BookingListData, BookingRead, BookingUpdate
from app.schemas.common import ListResponse, PathId, SuccessResponse
from app.services import bookings as booking_service

router = APIRouter(prefix="/bookings", tags=["bookings"])


def _single(booking: Booking) -> SuccessResponse[BookingData]:
    return SuccessResponse(data=BookingData(booking=BookingRead.model_validate(booking)))


def _many(bookings: list[Booking]) -> ListResponse[BookingListData]:
    return ListResponse(
        results=len(bookings),
        data=BookingListData(bookings=[BookingRead.model_validate(booking) for booking in bookings]),
    )


@router.get("", response_model=ListResponse[BookingListData])
async def list_my_bookings(
    session: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ListResponse[BookingListData]:
    return _many(await booking_service.list_user_bookings(session, current_user))


@router.post("", response_model=SuccessResponse[BookingData], status_code=status.HTTP_201_CREATED)
async def create_booking(
    payload: BookingCreate,
    session: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SuccessResponse[BookingData]:
    booking = await booking_service.create_booking(session, payload, current_user)
    await session.commit()
    return _single(booking)


@router.get("/all", response_model=ListResponse[BookingListData])
async def list_all_bookings(
    session: AsyncSession = Depends(get_db),
    _: User = Depends(require_admin),
) -> ListResponse[BookingListData]:
    return _many(await booking_service.list_all_bookings(session))


@router.get("/{booking_id}", response_model=SuccessResponse[BookingData])
async def get_booking(
    booking_id: PathId,
    session: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SuccessResponse[BookingData]:
    return _single(await booking_service.get_booking(session, booking_id, current_user))


@router.patch("/{booking_id}", response_model=SuccessResponse[BookingData])
async def update_booking(
    booking_id: PathId,
    payload: BookingUpdate,
    session: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SuccessResponse[BookingData]:
    booking = await booking_service.update_booking(session, booking_id, payload, current_user)
    await session.commit()
    return _single(booking)


@router.delete("/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_booking(
    booking_id: PathId,
    session: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Response:
    await booking_service.delete_booking(session, booking_id, current_user)
    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
