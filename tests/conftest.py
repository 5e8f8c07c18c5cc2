"""
Shared test fixtures.

Route tests run the real FastAPI app through httpx with the database
session dependency replaced by a mock, so no PostgreSQL or Redis is needed.
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from mou_tracker.core.database import get_db
from mou_tracker.core.rate_limit import reset_memory_store
from mou_tracker.core.security import create_access_token
from mou_tracker.main import app


@pytest.fixture(autouse=True)
def clear_rate_limits():
    """Each test starts with an empty in-memory rate limit window."""
    reset_memory_store()
    yield
    reset_memory_store()


@pytest.fixture
def mock_db():
    """Create a mock database session."""
    db = AsyncMock()
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    db.refresh = AsyncMock()
    db.flush = AsyncMock()
    db.get = AsyncMock()
    db.execute = AsyncMock()
    db.scalars = AsyncMock()
    db.add = MagicMock()
    return db


@pytest.fixture
def admin_identity():
    """Claims of the admin used for authenticated requests."""
    return {"id": uuid4(), "email": "admin@university.edu", "name": "Ada Admin"}


@pytest.fixture
def auth_headers(admin_identity):
    """Authorization header carrying a valid access token."""
    token = create_access_token(
        subject=str(admin_identity["id"]),
        additional_claims={"email": admin_identity["email"], "name": admin_identity["name"]},
    )
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def client(mock_db):
    """HTTP client bound to the app, with get_db yielding mock_db."""

    async def override_get_db():
        yield mock_db

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def now():
    return datetime.now(UTC)
