"""API router aggregator."""
from fastapi import APIRouter

from app.api.routes import auth, bookings, catalog

api_router = APIRouter(prefix="/api")
api_router.include_router(auth.router)
api_router.include_router(bookings.router)
api_router.include_router(catalog.router)

__all__ = ["api_router"]
