"""Service catalog endpoints. Reads are public, mutations are admin-only."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_db, require_admin
from app.core.exceptions import NotFoundError
from app.models.user import User
from app.schemas.common import ListResponse, PathId, SuccessResponse
from app.schemas.service import ServiceCreate, ServiceData, ServiceListData, ServiceRead, ServiceUpdate
from app.services import catalog as catalog_service

router = APIRouter(prefix="/services", tags=["services"])


@router.get("", response_model=ListResponse[ServiceListData])
async def list_services(session: AsyncSession = Depends(get_db)) -> ListResponse[ServiceListData]:
    services = await catalog_service.list_active_services(session)
    return ListResponse(
        results=len(services),
        data=ServiceListData(services=[ServiceRead.model_validate(service) for service in services]),
    )


@router.get("/{service_id}", response_model=SuccessResponse[ServiceData])
async def get_service(service_id: PathId, session: AsyncSession = Depends(get_db)) -> SuccessResponse[ServiceData]:
    service = await catalog_service.get_service(session, service_id)
    if not service:
        raise NotFoundError("No service found with that ID")
    return SuccessResponse(data=ServiceData(service=ServiceRead.model_validate(service)))


@router.post("", response_model=SuccessResponse[ServiceData], status_code=status.HTTP_201_CREATED)
async def create_service(
    payload: ServiceCreate,
    session: AsyncSession = Depends(get_db),
    _: User = Depends(require_admin),
) -> SuccessResponse[ServiceData]:
    service = await catalog_service.create_service(session, payload)
    await session.commit()
    return SuccessResponse(data=ServiceData(service=ServiceRead.model_validate(service)))


@router.patch("/{service_id}", response_model=SuccessResponse[ServiceData])
async def update_service(
    service_id: PathId,
    payload: ServiceUpdate,
    session: AsyncSession = Depends(get_db),
    _: User = Depends(require_admin),
) -> SuccessResponse[ServiceData]:
    service = await catalog_service.update_service(session, service_id, payload)
    await session.commit()
    return SuccessResponse(data=ServiceData(service=ServiceRead.model_validate(service)))


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def deactivate_service(
    service_id: PathId,
    session: AsyncSession = Depends(get_db),
    _: User = Depends(require_admin),
) -> Response:
    await catalog_service.deactivate_service(session, service_id)
    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
