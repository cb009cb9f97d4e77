"""Shared test configuration and fixtures.

Uses a transactional rollback strategy per test for full isolation:
- Each test runs inside an outer transaction that rolls back after the test.
- ``TEST_DATABASE_URL`` selects the database; by default an in-memory SQLite
  database (aiosqlite) shared through a static pool is used, so no server is
  needed. Point it at PostgreSQL (``postgresql+asyncpg://...``) to run the
  suite against the production dialect.
"""

import os
import uuid
from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from looncamp.auth.jwt import create_access_token
from looncamp.auth.passwords import hash_password
from looncamp.database import Base, get_db
from looncamp.main import app
from looncamp.models.admin import Admin

TEST_PASSWORD = "adminpass123"

_test_db_url = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


def _make_engine():
    if _test_db_url.startswith("sqlite"):
        return create_async_engine(
            _test_db_url,
            echo=False,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    return create_async_engine(_test_db_url, echo=False, pool_pre_ping=True)


# ---------------------------------------------------------------------------
# Session-scoped: create / drop all tables once per test session
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def test_engine():
    """Create a session-scoped engine tied to the session event loop."""
    engine = _make_engine()
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def setup_test_db(test_engine):
    """Create all tables at the start of the session and drop them at the end."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


# ---------------------------------------------------------------------------
# Per-test: transactional rollback for isolation
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def db_session(test_engine, setup_test_db) -> AsyncGenerator[AsyncSession, None]:
    """Yield an async session wrapped in a transaction that always rolls back."""
    async with test_engine.connect() as connection:
        transaction = await connection.begin()
        session = AsyncSession(bind=connection, expire_on_commit=False)

        try:
            yield session
        finally:
            await session.close()
            await transaction.rollback()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Provide an httpx AsyncClient wired to use the test DB session."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Convenience fixtures: authenticated admin
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def test_admin(db_session: AsyncSession) -> Admin:
    """Create and return an administrator directly in the DB."""
    unique = uuid.uuid4().hex[:8]
    admin = Admin(
        email=f"admin-{unique}@looncamp.com",
        password_hash=hash_password(TEST_PASSWORD),
    )
    db_session.add(admin)
    await db_session.flush()
    return admin


@pytest_asyncio.fixture
async def auth_headers(test_admin: Admin) -> dict[str, str]:
    """Return Authorization headers for the test admin."""
    token = create_access_token(test_admin.id, test_admin.email)
    return {"Authorization": f"Bearer {token}"}


# ---------------------------------------------------------------------------
# Convenience fixtures: property helpers
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def test_property(client: AsyncClient, auth_headers: dict) -> dict:
    """Create a property via the API and return its full record."""
    response = await client.post(
        "/api/properties/create",
        json={
            "title": "Pawna Lake Camping",
            "category": "camping",
            "location": "Pawna Lake",
            "price": "₹1,499",
            "price_note": "per person",
            "capacity": 4,
            "max_capacity": 6,
            "rating": 4.7,
            "is_top_selling": False,
            "contact": "+91 98765 43210",
            "address": "Near Thakursai village",
            "amenities": ["tents", "bonfire"],
            "highlights": ["Lakeside"],
            "activities": ["Kayaking"],
            "policies": ["No loud music after 11 PM"],
            "images": ["https://img.test/a.jpg", "https://img.test/b.jpg"],
        },
        headers=auth_headers,
    )
    assert response.status_code == 201, f"Failed to create test property: {response.text}"
    prop_id = response.json()["data"]["id"]

    detail = await client.get(f"/api/properties/{prop_id}", headers=auth_headers)
    assert detail.status_code == 200
    return detail.json()["data"]
