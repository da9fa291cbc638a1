from typing import Dict, Optional
from loguru import logger
from .base import BaseDatabaseDriver
from .redis_driver import RedisDriver
from .sql_driver import SQLDriver

class DatabaseManager:
    """Process-wide owner of the database (and optional cache) connections."""
    _instance = None

    def __init__(self, settings):
        self.settings = settings
        self.sql = SQLDriver(
            settings.DATABASE_URL,
            echo=settings.DB_ECHO,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_pre_ping=settings.DB_POOL_PRE_PING,
        )
        self.redis: Optional[RedisDriver] = RedisDriver(settings.REDIS_URL) if settings.REDIS_ENABLED else None

    @classmethod
    def get_instance(cls, settings=None):
        if cls._instance is None:
            if settings is None:
                from core.config import settings as app_settings
                settings = app_settings
            cls._instance = cls(settings)
        elif settings is not None and settings != cls._instance.settings:
            logger.warning(
                "DatabaseManager already initialized with different settings; "
                "ignoring the new ones (call reset_instance first)"
            )
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Forget the singleton (does not disconnect it)."""
        cls._instance = None

    def drivers(self) -> Dict[str, BaseDatabaseDriver]:
        drivers: Dict[str, BaseDatabaseDriver] = {"database": self.sql}
        if self.redis is not None:
            drivers["cache"] = self.redis
        return drivers

    async def connect_all(self):
        for name, driver in self.drivers().items():
            logger.info(f"Connecting {name}")
            await driver.connect()

    async def disconnect_all(self):
        for name, driver in self.drivers().items():
            try:
                await driver.disconnect()
            except Exception as e:
                logger.error(f"Failed to disconnect {name}: {str(e)}")


def get_connection() -> SQLDriver:
    """The primary database connection handle."""
    return DatabaseManager.get_instance().sql
