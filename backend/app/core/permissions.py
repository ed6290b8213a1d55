"""Ownership policy for user-owned resources."""
from __future__ import annotations

from app.models.user import User, UserRole


def can_mutate(acting_user: User, resource_owner_id: int) -> bool:
    """Owners may act on their own resources; admins may act on any."""
    return acting_user.id == resource_owner_id or acting_user.role == UserRole.ADMIN
