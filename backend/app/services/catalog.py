"""Service layer for the bookable service catalog."""
from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, NotFoundError
from app.models.service import Service
from app.models.user import utcnow
from app.schemas.service import ServiceCreate, ServiceUpdate

logger = logging.getLogger(__name__)


async def list_active_services(session: AsyncSession) -> list[Service]:
    result = await session.execute(select(Service).where(Service.is_active.is_(True)).order_by(Service.name))
    return list(result.scalars().all())


async def get_service(session: AsyncSession, service_id: int) -> Service | None:
    """Look up a service by id, whether or not it is still active."""
    return await session.get(Service, service_id)


async def require_service(session: AsyncSession, service_id: int) -> Service:
    service = await get_service(session, service_id)
    if not service:
        raise NotFoundError("No service found with that ID")
    return service


async def _ensure_unique_name(session: AsyncSession, name: str, exclude_id: int | None = None) -> None:
    result = await session.execute(select(Service.id).where(Service.name == name))
    existing_id = result.scalar_one_or_none()
    if existing_id is not None and existing_id != exclude_id:
        raise ConflictError("name", "Service with this name already exists!")


async def create_service(session: AsyncSession, data: ServiceCreate) -> Service:
    await _ensure_unique_name(session, data.name)
    service = Service(
        name=data.name,
        description=data.description,
        price=data.price,
        duration=data.duration,
    )
    session.add(service)
    try:
        await session.flush()
    except IntegrityError as exc:
        await session.rollback()
        raise ConflictError("name", "Service with this name already exists!") from exc
    logger.info("Created service %s (id=%s)", service.name, service.id)
    return service


async def update_service(session: AsyncSession, service_id: int, data: ServiceUpdate) -> Service:
    service = await require_service(session, service_id)

    if data.name is not None and data.name != service.name:
        await _ensure_unique_name(session, data.name, exclude_id=service.id)
        service.name = data.name
    if data.description is not None:
        service.description = data.description
    if data.price is not None:
        service.price = data.price
    if data.duration is not None:
        service.duration = data.duration
    if data.is_active is not None:
        service.is_active = data.is_active
    service.updated_at = utcnow()

    await session.flush()
    return service


async def deactivate_service(session: AsyncSession, service_id: int) -> Service:
    service = await require_service(session, service_id)
    service.is_active = False
    service.updated_at = utcnow()
    await session.flush()
    logger.info("Deactivated service id=%s", service.id)
    return service
