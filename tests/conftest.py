"""Test config and shared fixtures."""
import os
import tempfile
from pathlib import Path

# In-memory SQLite for tests; must be set before core.config is imported
os.environ["DB_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["APP_ENV"] = "testing"
os.environ["REDIS_ENABLED"] = "false"
os.environ.setdefault("LOG_DIR", str(Path(tempfile.gettempdir()) / "boot-check-test-logs"))

import pytest
from typing import AsyncGenerator
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from core.application import create_app, reset_application
from core.database.manager import DatabaseManager

TEST_DATABASE_URL = os.environ["DB_URL"]


@pytest.fixture(autouse=True)
def reset_singletons():
    """Each test starts without a registered application or database manager."""
    reset_application()
    DatabaseManager.reset_instance()
    yield
    reset_application()
    DatabaseManager.reset_instance()


@pytest.fixture
def app() -> FastAPI:
    """Create (and register) the application."""
    return create_app()


@pytest.fixture
async def db_manager() -> AsyncGenerator[DatabaseManager, None]:
    """Connected database manager on a fresh in-memory database."""
    manager = DatabaseManager.get_instance()
    await manager.connect_all()
    yield manager
    await manager.disconnect_all()


@pytest.fixture
async def async_session(db_manager: DatabaseManager) -> AsyncGenerator[AsyncSession, None]:
    """Create async test database session with all tables created."""
    async with db_manager.sql.engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async for session in db_manager.sql.get_session():
        yield session
        await session.rollback()

    async with db_manager.sql.engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)


@pytest.fixture
async def client(app: FastAPI, db_manager: DatabaseManager) -> AsyncGenerator[AsyncClient, None]:
    """Create test client; ASGITransport skips the lifespan, so db_manager connects instead."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
