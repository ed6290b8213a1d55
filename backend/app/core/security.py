"""Security helpers for password hashing and bearer token signing."""
from __future__ import annotations

from typing import Any

from itsdangerous import BadSignature, URLSafeTimedSerializer
from passlib.context import CryptContext

from .exceptions import AuthenticationError


_password_context = CryptContext(schemes=["argon2"], deprecated="auto")


class PasswordHasher:
    """Hash and verify user passwords using Argon2id."""

    @staticmethod
    def hash(password: str) -> str:
        return _password_context.hash(password)

    @staticmethod
    def verify(password: str, hashed: str) -> bool:
        return _password_context.verify(password, hashed)

    @staticmethod
    def dummy_verify() -> None:
        """Spend the same effort as a real verify when there is no stored hash."""
        _password_context.dummy_verify()


class TokenService:
    """Issue and verify signed, time-limited bearer tokens.

    The issuance timestamp is embedded in the signature; a token is rejected
    once it is older than ``expires_in_seconds``. There is no revocation list.
    """

    def __init__(self, secret_key: str, expires_in_seconds: int, salt: str = "booking-auth") -> None:
        self.expires_in_seconds = expires_in_seconds
        self._serializer = URLSafeTimedSerializer(secret_key, salt=salt)

    def issue(self, user_id: int) -> str:
        return self._serializer.dumps({"sub": user_id})

    def verify(self, token: str) -> int:
        try:
            payload: Any = self._serializer.loads(token, max_age=self.expires_in_seconds)
        except BadSignature as exc:
            # SignatureExpired and BadPayload are both BadSignature subclasses
            raise AuthenticationError("Invalid or expired token. Please log in again.") from exc

        subject = payload.get("sub") if isinstance(payload, dict) else None
        if not isinstance(subject, int) or isinstance(subject, bool):
            raise AuthenticationError("Invalid or expired token. Please log in again.")
        return subject
