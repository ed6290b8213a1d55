import pytest
from itsdangerous import URLSafeTimedSerializer
from itsdangerous.timed import TimestampSigner

from app.core.exceptions import AuthenticationError
from app.core.security import PasswordHasher, TokenService

SECRET = "test-secret"


@pytest.fixture
def clock(monkeypatch):
    now = {"value": 1_750_000_000}
    monkeypatch.setattr(TimestampSigner, "get_timestamp", lambda self: now["value"])
    return now


def test_password_hash_is_salted_and_verifies():
    first = PasswordHasher.hash("s3cret-password")
    second = PasswordHasher.hash("s3cret-password")

    assert first != second
    assert "s3cret-password" not in first
    assert PasswordHasher.verify("s3cret-password", first)
    assert PasswordHasher.verify("s3cret-password", second)


@pytest.mark.parametrize("attempt", ["s3cret-passwore", "S3cret-password", "s3cret-passwor", "s3cret-password!"])
def test_password_single_character_mutation_fails(attempt):
    hashed = PasswordHasher.hash("s3cret-password")
    assert not PasswordHasher.verify(attempt, hashed)


def test_token_round_trip_returns_subject():
    tokens = TokenService(SECRET, expires_in_seconds=3600)
    assert tokens.verify(tokens.issue(42)) == 42


def test_token_valid_until_expiry_then_rejected(clock):
    tokens = TokenService(SECRET, expires_in_seconds=90 * 24 * 3600)
    token = tokens.issue(7)

    clock["value"] += 90 * 24 * 3600 - 1
    assert tokens.verify(token) == 7

    clock["value"] += 2
    with pytest.raises(AuthenticationError):
        tokens.verify(token)


def test_token_signed_with_other_secret_rejected():
    forged = TokenService("another-secret", expires_in_seconds=3600).issue(1)
    with pytest.raises(AuthenticationError):
        TokenService(SECRET, expires_in_seconds=3600).verify(forged)


def test_token_with_altered_signature_rejected():
    tokens = TokenService(SECRET, expires_in_seconds=3600)
    payload, signature = tokens.issue(1).rsplit(".", 1)
    altered = ("B" if signature[0] != "B" else "C") + signature[1:]
    with pytest.raises(AuthenticationError):
        tokens.verify(f"{payload}.{altered}")


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c", "not base64 at all!!"])
def test_malformed_token_rejected(token):
    with pytest.raises(AuthenticationError):
        TokenService(SECRET, expires_in_seconds=3600).verify(token)


@pytest.mark.parametrize("payload", [{"sub": "1"}, {"sub": None}, {"id": 1}, ["sub", 1], {"sub": True}])
def test_token_without_integer_subject_rejected(payload):
    token = URLSafeTimedSerializer(SECRET, salt="booking-auth").dumps(payload)
    with pytest.raises(AuthenticationError):
        TokenService(SECRET, expires_in_seconds=3600).verify(token)


def test_token_salt_separates_tokens():
    token = TokenService(SECRET, expires_in_seconds=3600, salt="reset-password").issue(1)
    with pytest.raises(AuthenticationError):
        TokenService(SECRET, expires_in_seconds=3600).verify(token)
