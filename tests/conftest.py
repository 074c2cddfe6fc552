"""
Pytest configuration and fixtures for SmartPark tests.
"""
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import smartpark.models  # noqa: F401
from smartpark.config import Settings, get_settings
from smartpark.database import Base, get_db
from smartpark.main import create_app
from tests.helpers import API, user_data


def get_test_settings() -> Settings:
    """Return settings configured for testing."""
    return Settings(
        database_url="sqlite+aiosqlite://",
        bcrypt_rounds=4,
        log_level="WARNING",
        log_requests=False,
    )


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def async_engine():
    """In-memory database shared by every session of one test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(async_engine):
    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


# =============================================================================
# Application Fixtures
# =============================================================================

@pytest.fixture
def settings() -> Settings:
    return get_test_settings()


@pytest_asyncio.fixture
async def app(session_factory, settings):
    """Create FastAPI application for testing."""
    application = create_app(settings)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    application.dependency_overrides[get_settings] = lambda: settings
    application.dependency_overrides[get_db] = override_get_db

    yield application

    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client without a session."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def auth_client(client) -> AsyncClient:
    """Client logged in as a freshly registered user."""
    response = await client.post(f"{API}/auth/register", json=user_data())
    assert response.status_code == 201
    response = await client.post(
        f"{API}/auth/login",
        json={"username": "alice", "password": "abc123"},
    )
    assert response.status_code == 200
    return client

