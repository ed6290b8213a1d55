"""Route modules for the booking API."""
from . import auth, bookings, catalog

__all__ = ["auth", "bookings", "catalog"]
