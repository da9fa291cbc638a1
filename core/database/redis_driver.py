import asyncio
from typing import Optional
import redis.asyncio as redis
from loguru import logger
from redis.exceptions import RedisError
from .base import BaseDatabaseDriver

class RedisDriver(BaseDatabaseDriver):
    def __init__(self, url: str):
        self.url = url
        self.client = None

    async def connect(self):
        self.client = redis.from_url(self.url, decode_responses=True)
        await self.client.ping()
        logger.info(f"Redis connected | URL: {self.url}")

    async def disconnect(self):
        if self.client:
            await self.client.aclose()
            self.client = None
            logger.info("Redis disconnected")

    async def is_active(self, timeout: Optional[float] = None) -> bool:
        if self.client is None:
            return False
        try:
            return bool(await asyncio.wait_for(self.client.ping(), timeout))
        except asyncio.TimeoutError:
            logger.warning(f"Redis ping timed out after {timeout}s")
            return False
        except (RedisError, OSError) as e:
            logger.warning(f"Redis ping failed: {str(e)}")
            return False

    def get_client(self):
        return self.client
