"""SQLAlchemy models exposed for table creation and imports."""
from .booking import Booking, BookingStatus
from .service import Service
from .user import User, UserRole

__all__ = ["User", "UserRole", "Service", "Booking", "BookingStatus"]
