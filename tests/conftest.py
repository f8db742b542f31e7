from __future__ import annotations

import asyncio
import os

# Settings are read at import time; point them at a throwaway configuration first
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"
os.environ["PASSWORD_HASH_ROUNDS"] = "4"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["AUTH_ENABLED"] = "true"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool

from app.core.config import settings
from app.core.database import Base, build_engine, get_async_session
from app.main import app


@pytest.fixture()
def engine(tmp_path):
    # A file per test; NullPool keeps connections from outliving the event loop that opened them
    test_engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)

    async def create_schema():
        async with test_engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(create_schema())
    yield test_engine
    asyncio.run(test_engine.dispose())


@pytest.fixture()
def client(engine):
    session_factory = async_sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)

    async def override_get_async_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_get_async_session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def signup(client):
    def _signup(name="Alice", email="alice@example.com", password="secret123"):
        return client.post("/user", json={"name": name, "email": email, "password": password})

    return _signup


@pytest.fixture()
def auth_client(client, signup):
    """Client carrying a bearer token for a freshly registered user (id 1)."""
    assert signup().status_code == 201
    login = client.post("/auth/login", json={"email": "alice@example.com", "password": "secret123"})
    assert login.status_code == 200
    client.headers["Authorization"] = f"Bearer {login.json()['accessToken']}"
    return client


@pytest.fixture()
def open_client(client, monkeypatch):
    """Client against the API with AUTH_ENABLED switched off."""
    monkeypatch.setattr(settings, "AUTH_ENABLED", False)
    return client


@pytest.fixture()
def make_currency(auth_client):
    def _make(code="USD", name="US Dollar"):
        response = auth_client.post("/currency", json={"code": code, "name": name})
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture()
def make_category(auth_client):
    def _make(name="Food"):
        response = auth_client.post("/category", json={"name": name})
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture()
def make_user(auth_client, signup):
    def _make(name="Bob", email="bob@example.com", password="secret123"):
        response = signup(name=name, email=email, password=password)
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture()
def make_record(auth_client):
    def _make(**payload):
        response = auth_client.post("/record", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make
