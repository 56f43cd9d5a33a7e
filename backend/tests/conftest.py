"""Root conftest — shared async DB + FastAPI test client fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - db_manager patched so readiness probes hit the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency; the partial unique
      index is declared for SQLite too, so schema invariants still hold
"""

import os

os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.db.base import Base  # noqa: E402
from app.db.session import create_session_factory  # noqa: E402
from app.infrastructure.database import get_db, DatabaseSessionManager  # noqa: E402
from app.models.user import User as UserModel  # noqa: E402
import app.infrastructure.database as db_module  # noqa: E402
from app.main import app  # noqa: E402

SEED_USERS = [
    {"id": 1, "email": "john@example.com", "username": "johndoe"},
    {"id": 2, "email": "jane@example.com", "username": None},
    {"id": 3, "email": "bob@example.com", "username": "bobsmith"},
]


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
async def unreachable_session_factory(tmp_path):
    """Session factory whose database file cannot be opened."""
    factory = create_session_factory(
        f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'users.db'}",
    )
    yield factory
    await factory.kw["bind"].dispose()


def _override_db(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session
    return override_get_db


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    app.dependency_overrides[get_db] = _override_db(test_session_factory)

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
async def unreachable_client(unreachable_session_factory):
    """FastAPI test client whose store cannot be reached."""
    app.dependency_overrides[get_db] = _override_db(unreachable_session_factory)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def seed_users(test_db):
    """Insert the three reference users into the test DB."""
    test_db.add_all([UserModel(**fields) for fields in SEED_USERS])
    await test_db.commit()
    return SEED_USERS
