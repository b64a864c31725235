"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from lerncasino.config import Settings
from lerncasino.main import create_app, prepare_database

TEST_JWT_SECRET = "test-only-signing-secret-0123456789abcdef"
TEST_PASSWORD = "geheim1"


def make_settings(tmp_path: Path, **overrides: object) -> Settings:
    """Settings pointing at a throwaway SQLite file, ignoring any .env."""
    values: dict[str, object] = {
        "jwt_secret": TEST_JWT_SECRET,
        "database_url": f"sqlite+aiosqlite:///{tmp_path / 'test.sqlite'}",
        "log_format": "console",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return make_settings(tmp_path)


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncGenerator[FastAPI, None]:
    """Application with tables created and questions seeded."""
    application = create_app(settings)
    await prepare_database(application.state.db)
    yield application
    await application.state.db.dispose()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP test client bound to the app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def db_session(app: FastAPI) -> AsyncGenerator[AsyncSession, None]:
    """Direct database session for test assertions."""
    async for session in app.state.db.session():
        yield session


async def register_user(client: AsyncClient, username: str = "alice", password: str = TEST_PASSWORD) -> dict:
    """Register through the API and return the response body."""
    response = await client.post("/api/auth/register", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return response.json()


@pytest_asyncio.fixture
async def registered_user(client: AsyncClient) -> dict:
    """Registered user 'alice'. Returns the register response plus the password."""
    data = await register_user(client)
    return {**data, "password": TEST_PASSWORD}


@pytest_asyncio.fixture
async def authed_client(client: AsyncClient, registered_user: dict) -> AsyncClient:
    """Client carrying alice's bearer token."""
    client.headers["Authorization"] = f"Bearer {registered_user['token']}"
    return client
