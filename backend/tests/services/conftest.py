"""Service test fixtures - async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (unique constraints behave the same as PostgreSQL for our purposes)
    - Low PBKDF2 iteration count comes from tests/conftest.py env defaults
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from signup.db.base import Base
from signup.infrastructure.database import get_db, DatabaseSessionManager
from signup.infrastructure.password_hasher import PasswordHasher
import signup.infrastructure.database as db_module
import signup.models  # noqa: F401
from signup.main import app
from signup.models.user import User


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
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def count_users(test_db):
    """Async callable returning the number of rows in users."""
    async def _count() -> int:
        result = await test_db.execute(select(func.count()).select_from(User))
        return result.scalar_one()
    return _count


@pytest.fixture
def hasher():
    return PasswordHasher(iterations=1000)


@pytest.fixture
def sign_up_params():
    """Valid raw sign-up parameters (Scenario A input)."""
    return {
        "first_name": "A",
        "last_name": "B",
        "email": "a@b.com",
        "password": "secret",
        "password_confirmation": "secret",
    }
