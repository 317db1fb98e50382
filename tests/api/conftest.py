"""API test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - db_manager patched so readiness checks hit the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - ASGITransport does not run the lifespan, so tables are created here
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

import exercise_tracker.models  # noqa: F401
from exercise_tracker.db.base import Base
from exercise_tracker.infrastructure.database import get_db, DatabaseSessionManager
import exercise_tracker.infrastructure.database as db_module
from exercise_tracker.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory

    async def override_get_db():
        async with fake_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    original_manager = db_module.db_manager
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def make_user(client):
    """Create a user through the API and return its JSON body."""

    async def _make(username: str) -> dict:
        res = await client.post("/api/users", json={"username": username})
        assert res.status_code == 200, res.text
        return res.json()

    return _make


@pytest.fixture
async def log_exercise(client):
    """Log an exercise through the API and return the response."""

    async def _log(user_id: str, **fields):
        fields.setdefault("description", "run")
        fields.setdefault("duration", 30)
        return await client.post(f"/api/users/{user_id}/exercises", json=fields)

    return _log
