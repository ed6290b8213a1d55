import asyncio
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.db import session as db_session
from app.db.base import Base
from app.main import app
from app.models.user import UserRole
from app.schemas.service import ServiceCreate
from app.services.catalog import create_service
from app.services.users import create_user

PASSWORD = "correct-horse-42"


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"


@pytest.fixture
def run_db(database_url):
    """Run ``fn(session)`` against the test database and commit."""

    def _run(fn):
        async def runner():
            engine = create_async_engine(database_url, future=True)
            try:
                async with engine.begin() as conn:
                    await conn.run_sync(Base.metadata.create_all)
                factory = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)
                async with factory() as session:
                    result = await fn(session)
                    await session.commit()
                    return result
            finally:
                await engine.dispose()

        return asyncio.run(runner())

    return _run


@pytest.fixture
def client(database_url, monkeypatch):
    engine = create_async_engine(database_url, future=True)
    monkeypatch.setattr(db_session, "engine", engine)
    monkeypatch.setattr(
        db_session,
        "async_session_factory",
        async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession),
    )
    with TestClient(app) as test_client:
        yield test_client


def signup(client, username, email=None, password=PASSWORD):
    response = client.post(
        "/api/auth/signup",
        json={
            "username": username,
            "email": email or f"{username}@example.com",
            "password": password,
            "passwordConfirm": password,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user(client):
    body = signup(client, "alice")
    return {"id": body["data"]["user"]["_id"], "token": body["token"], "headers": auth_header(body["token"])}


@pytest.fixture
def other_user(client):
    body = signup(client, "bob")
    return {"id": body["data"]["user"]["_id"], "token": body["token"], "headers": auth_header(body["token"])}


@pytest.fixture
def admin(client, run_db):
    created = run_db(lambda session: create_user(session, "admin", "admin@example.com", PASSWORD, role=UserRole.ADMIN))
    response = client.post("/api/auth/login", json={"email": "admin@example.com", "password": PASSWORD})
    assert response.status_code == 200, response.text
    token = response.json()["token"]
    return {"id": created.id, "token": token, "headers": auth_header(token)}


@pytest.fixture
def service_id(client, run_db):
    service = run_db(
        lambda session: create_service(
            session, ServiceCreate(name="Deep Clean", description="Whole home", price=120, duration=180)
        )
    )
    return service.id


@pytest.fixture
def booking(client, user, service_id):
    response = client.post(
        "/api/bookings",
        headers=user["headers"],
        json={
            "customerName": "Alice Smith",
            "address": "1 Main St",
            "dateTime": "2025-06-01T10:00:00Z",
            "serviceId": service_id,
            "specialInstructions": "Ring twice",
        },
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]["booking"]


def parse_ts(value):
    """Parse an API timestamp; ``fromisoformat`` only accepts ``Z`` from 3.11."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))
