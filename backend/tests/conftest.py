"""
Mobile API Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_db_session:   AsyncMock session for fault-injection tests
    ├── db_engine:         aiosqlite engine on a file under tmp_path, tables created
    ├── session_factory:   async_sessionmaker bound to db_engine
    ├── db_session:        one open AsyncSession
    ├── hasher:            PasswordHasher at the bcrypt minimum cost
    ├── token_issuer:      TokenIssuer with a test secret
    ├── account_service:   AccountService wired to db_session
    └── test_client:       HTTPX AsyncClient talking to the app in-process
"""

import os

# Settings are read at import time; set the test environment first
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["JWT_SECRET"] = "test-secret-that-is-long-enough-for-hs256-signing"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["RATE_LIMIT_REQUESTS"] = "10000"
os.environ["AUTH_RATE_LIMIT_REQUESTS"] = "10000"
os.environ["BCRYPT_ROUNDS"] = "4"

from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from mobile_api.database import Base
from mobile_api.models import account, feedback, notification, profile  # noqa: F401
from mobile_api.repositories.account_repository import AccountRepository
from mobile_api.services.account_service import AccountService
from mobile_api.services.password_hasher import PasswordHasher
from mobile_api.services.token_service import TokenIssuer

TEST_SECRET = os.environ["JWT_SECRET"]


# ══════════════════════════════════════════════════════════════════════════
# Mocks
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.flush.side_effect = OperationalError("...", {}, Exception())
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.get = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# Real Database (aiosqlite)
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """
    A fresh SQLite database file per test with every table created.

    A file (not :memory:) so separate connections see the same data,
    which the concurrent-registration tests depend on.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'mobile.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def hasher():
    # bcrypt's minimum cost keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_issuer():
    return TokenIssuer(secret=TEST_SECRET, ttl_seconds=3600)


@pytest.fixture
def account_service(db_session, hasher, token_issuer):
    return AccountService(AccountRepository(db_session), hasher, token_issuer)


# ══════════════════════════════════════════════════════════════════════════
# HTTP Client
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(session_factory, hasher, token_issuer):
    """
    HTTPX AsyncClient routed directly to the FastAPI app.

    ASGITransport does not run the lifespan, so the collaborators it would
    build are placed on app.state here and get_db_session is overridden to
    use the per-test database.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
    """
    from mobile_api.database import get_db_session
    from mobile_api.main import app

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.state.password_hasher = hasher
    app.state.token_issuer = token_issuer

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
