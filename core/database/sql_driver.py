import asyncio
from typing import Optional
from loguru import logger
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel.ext.asyncio.session import AsyncSession
from .base import BaseDatabaseDriver

class SQLDriver(BaseDatabaseDriver):
    """Primary relational connection: async SQLAlchemy engine plus SQLModel session factory."""

    def __init__(
        self,
        url: str,
        echo: bool = False,
        pool_size: int = 5,
        max_overflow: int = 10,
        pool_pre_ping: bool = True,
    ):
        self.url = url
        self.engine = create_async_engine(
            url,
            echo=echo,
            future=True,
            pool_pre_ping=pool_pre_ping,
            **self._pool_options(url, pool_size, max_overflow),
        )
        self.session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )
        self._connected = False

    @staticmethod
    def _pool_options(url: str, pool_size: int, max_overflow: int) -> dict:
        # SQLite (tests, local dev) shares one connection; in-memory DBs vanish otherwise
        if url.startswith("sqlite"):
            return {
                "poolclass": StaticPool,
                "connect_args": {"check_same_thread": False},
            }
        return {"pool_size": pool_size, "max_overflow": max_overflow}

    @property
    def connected(self) -> bool:
        return self._connected

    async def connect(self):
        """Open the engine and verify it with SELECT 1; raises on failure."""
        await self._ping()
        self._connected = True
        logger.info(f"Database connected | Dialect: {self.engine.dialect.name}")

    async def disconnect(self):
        """Dispose every pooled connection."""
        self._connected = False
        await self.engine.dispose()
        logger.info("Database disconnected")

    async def is_active(self, timeout: Optional[float] = None) -> bool:
        if not self._connected:
            return False
        try:
            await asyncio.wait_for(self._ping(), timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Database ping timed out after {timeout}s")
            return False
        except (SQLAlchemyError, OSError) as e:
            logger.warning(f"Database ping failed: {str(e)}")
            return False
        return True

    async def _ping(self):
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def get_session(self):
        async with self.session_factory() as session:
            yield session
