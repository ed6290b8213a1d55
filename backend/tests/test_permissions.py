from app.core.permissions import can_mutate
from app.models.user import User, UserRole


def _user(user_id, role=UserRole.USER):
    return User(id=user_id, username=f"u{user_id}", email=f"u{user_id}@example.com", password_hash="x", role=role)


def test_owner_may_mutate():
    assert can_mutate(_user(1), 1)


def test_other_user_may_not_mutate():
    assert not can_mutate(_user(2), 1)


def test_admin_may_mutate_anything():
    admin = _user(3, UserRole.ADMIN)
    assert can_mutate(admin, 1)
    assert can_mutate(admin, 3)
