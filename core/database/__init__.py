"""
Database layer: connection drivers, their process-wide manager and the model base.
"""

from .base import BaseDatabaseDriver
from .manager import DatabaseManager, get_connection
from .record import ApplicationRecord
from .redis_driver import RedisDriver
from .sql_driver import SQLDriver

__all__ = [
    "ApplicationRecord",
    "BaseDatabaseDriver",
    "DatabaseManager",
    "RedisDriver",
    "SQLDriver",
    "get_connection",
]
