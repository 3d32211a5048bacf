# tests/routes/conftest.py
"""Pytest fixtures for route tests."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from blogapi.db import get_session
from blogapi.main import app
from blogapi.managers.rate_limiter import limiter


@pytest.fixture
async def client(
    session_maker: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client bound to the per-test database."""

    async def override_get_session() -> AsyncGenerator[AsyncSession]:
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session
    limiter.enabled = False
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    limiter.enabled = True
    app.dependency_overrides = {}


@pytest.fixture
async def alice(client: AsyncClient) -> dict:
    """Register user 'alice' with no blogs."""
    response = await client.post("/users", params={"userName": "alice"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
async def bob(client: AsyncClient) -> dict:
    """Register user 'bob' with no blogs."""
    response = await client.post("/users", params={"userName": "bob"})
    assert response.status_code == 201
    return response.json()
