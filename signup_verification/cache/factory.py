"""Storage factories."""

from typing import Optional

from redis.asyncio import ConnectionPool, Redis

from signup_verification.cache.base import CodeStorage
from signup_verification.cache.cache_service import RedisCodeStorage
from signup_verification.cache.memory import MemoryCodeStorage
from signup_verification.core.constants import AppConfig
from signup_verification.settings import CodeStorageBackend, Settings


class RedisFactory:
    """Redis factory."""

    def __init__(self, redis_url: str) -> None:
        self.pool = ConnectionPool.from_url(
            url=redis_url,
            max_connections=AppConfig.REDIS_MAX_CONNECTIONS,
            socket_connect_timeout=AppConfig.REDIS_SOCKET_CONNECT_TIMEOUT,
            socket_keepalive=AppConfig.REDIS_SOCKET_KEEPALIVE,
            retry_on_timeout=AppConfig.REDIS_RETRY_ON_TIMEOUT,
            health_check_interval=AppConfig.REDIS_HEALTH_CHECK_INTERVAL,
            decode_responses=AppConfig.REDIS_DECODE_RESPONSES,
        )

    def get_connection(self) -> Redis:
        """Get connection."""
        return Redis(connection_pool=self.pool)

    async def close(self) -> None:
        """Close connection."""
        await self.pool.disconnect()


def build_code_storage(
    app_settings: Settings,
    redis_factory: Optional[RedisFactory] = None,
) -> CodeStorage:
    """Create the code storage selected in settings."""
    if app_settings.code_storage == CodeStorageBackend.REDIS:
        if redis_factory is None:
            raise ValueError("Redis code storage requires a redis factory")
        return RedisCodeStorage(redis_factory.get_connection())
    return MemoryCodeStorage()
