"""Redis backed code storage."""

from typing import Optional

from loguru import logger
from redis.asyncio import Redis
from redis.exceptions import RedisError

from signup_verification.cache.base import CodeStorage
from signup_verification.core.exceptions import CacheOperationError


class RedisCodeStorage(CodeStorage):
    """Code storage on top of a redis connection."""

    name = "redis"

    def __init__(self, redis: Redis) -> None:
        self.redis = redis

    async def get(self, key: str) -> Optional[str]:
        """Get value from cache."""
        try:
            value = await self.redis.get(key)
        except RedisError as e:
            logger.error(f"Cache get failed for key '{key}': {e.__class__.__name__}: {e!s}")
            raise CacheOperationError(detail=str(e)) from e
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set(self, key: str, value: str, expire: Optional[int] = None) -> None:
        """Set value in cache."""
        try:
            await self.redis.set(key, value, ex=expire)
        except RedisError as e:
            logger.error(f"Cache set failed for key '{key}': {e.__class__.__name__}: {e!s}")
            raise CacheOperationError(detail=str(e)) from e

    async def delete(self, key: str) -> None:
        """Delete value from cache."""
        try:
            await self.redis.delete(key)
        except RedisError as e:
            logger.error(
                f"Cache delete failed for key '{key}': {e.__class__.__name__}: {e!s}",
            )
            raise CacheOperationError(detail=str(e)) from e

    async def ping(self) -> bool:
        return bool(await self.redis.ping())

    async def close(self) -> None:
        await self.redis.aclose()
