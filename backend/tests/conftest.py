"""
Resource API - Test Configuration (conftest.py)
================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_store: AsyncMock standing in for ResourceStore (service unit tests)
    ├── mock_db_session: AsyncMock standing in for AsyncSession (store error paths)
    ├── database: real Database handle on a fresh SQLite file (tables created)
    ├── db_session: AsyncSession from that handle
    ├── store: ResourceStore bound to db_session
    └── test_client: HTTPX AsyncClient talking to an app wired to `database`
"""

import os
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["DB_CREATE_TABLES"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["BUILD"] = "test-build"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from resource_api.database import Database
from resource_api.models.resource import Resource, ResourceStatus
from resource_api.store.resource_store import ResourceStore


# ══════════════════════════════════════════════════════════════════════════
# Mocks (no database)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_store():
    """
    Provides a mock ResourceStore.

    Usage:
        async def test_get(mock_store):
            mock_store.find_active_by_id.return_value = resource
            result = await resource_service.get_resource(mock_store, 1)
    """
    store = AsyncMock(spec=ResourceStore)
    store.insert.side_effect = _assign_id
    store.save.side_effect = lambda resource: resource
    return store


async def _assign_id(resource: Resource) -> Resource:
    resource.id = 1
    return resource


@pytest.fixture
def mock_db_session():
    """Provides a mock async database session."""
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_resource():
    """An Active record as the store would return it."""
    ts = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
    return Resource(
        id=7,
        name="foo",
        description="a description",
        value1="one",
        value2=True,
        value3=3,
        value4=4.5,
        status=ResourceStatus.ACTIVE,
        created_at=ts,
        updated_at=ts,
    )


# ══════════════════════════════════════════════════════════════════════════
# Real database (SQLite via aiosqlite)
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def database(tmp_path):
    """A Database handle on an empty SQLite file, disposed after the test."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'resources.db'}")
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def db_session(database):
    async with database.session_factory() as session:
        yield session


@pytest.fixture
def store(db_session):
    return ResourceStore(db_session)


@pytest_asyncio.fixture
async def test_client(database):
    """
    Provides an async HTTP test client for endpoint testing.

    ASGITransport does not run the lifespan, so the app is handed the test
    Database directly.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/healthcheck")
            assert response.status_code == 200
    """
    from resource_api.main import create_app

    app = create_app(database=database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
