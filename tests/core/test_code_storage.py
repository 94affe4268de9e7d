from unittest.mock import AsyncMock

import pytest
from fakeredis.aioredis import FakeRedis
from redis.exceptions import ConnectionError as RedisConnectionError

from signup_verification.cache.cache_service import RedisCodeStorage
from signup_verification.cache.factory import build_code_storage
from signup_verification.cache.memory import MemoryCodeStorage
from signup_verification.core.exceptions import CacheOperationError
from signup_verification.services.verification import VerificationCodeStore
from signup_verification.settings import CodeStorageBackend, Settings
from tests.conftest import FakeClock, code_sequence

RECIPIENT = "user@example.com"
KEY = "verification:code:user@example.com"


@pytest.mark.anyio
async def test_memory_storage_roundtrip() -> None:
    storage = MemoryCodeStorage()

    await storage.set("k", "v")
    assert await storage.get("k") == "v"

    await storage.delete("k")
    await storage.delete("k")
    assert await storage.get("k") is None


@pytest.mark.anyio
async def test_memory_storage_expires_entries() -> None:
    clock = FakeClock(now=0.0)
    storage = MemoryCodeStorage(clock=clock)
    await storage.set("k", "v", expire=10)

    clock.advance(9)
    assert await storage.get("k") == "v"

    clock.advance(1)
    assert await storage.get("k") is None
    assert len(storage) == 0


@pytest.mark.anyio
async def test_memory_storage_sweeps_abandoned_entries() -> None:
    clock = FakeClock(now=0.0)
    storage = MemoryCodeStorage(clock=clock, sweep_threshold=3)
    await storage.set("a", "1", expire=10)
    await storage.set("b", "2", expire=10)
    await storage.set("kept", "3")

    clock.advance(10)
    await storage.set("c", "4", expire=10)

    assert len(storage) == 2
    assert await storage.get("kept") == "3"
    assert await storage.get("c") == "4"


@pytest.mark.anyio
async def test_memory_storage_clear() -> None:
    storage = MemoryCodeStorage()
    await storage.set("a", "1")
    await storage.set("b", "2")

    storage.clear()

    assert len(storage) == 0


@pytest.mark.anyio
async def test_redis_backed_store_issue_and_verify(fake_redis_client: FakeRedis) -> None:
    store = VerificationCodeStore(
        RedisCodeStorage(fake_redis_client),
        ttl_seconds=600,
        code_generator=code_sequence(["482913", "117650"]),
    )

    await store.issue("User@Example.com")
    assert await store.verify(RECIPIENT, "482913") is True

    await store.issue(RECIPIENT)
    assert await store.verify(RECIPIENT, "482913") is False
    assert await store.verify(RECIPIENT, "117650") is True
    assert await fake_redis_client.keys("verification:code:*") == [KEY]


@pytest.mark.anyio
async def test_redis_storage_sets_ttl(fake_redis_client: FakeRedis) -> None:
    store = VerificationCodeStore(RedisCodeStorage(fake_redis_client), ttl_seconds=600)

    await store.issue(RECIPIENT)

    ttl = await fake_redis_client.ttl(KEY)
    assert 0 < ttl <= 600


@pytest.mark.anyio
async def test_redis_storage_without_ttl_keeps_key(fake_redis_client: FakeRedis) -> None:
    store = VerificationCodeStore(RedisCodeStorage(fake_redis_client), ttl_seconds=None)

    await store.issue(RECIPIENT)

    assert await fake_redis_client.ttl(KEY) == -1


@pytest.mark.anyio
async def test_redis_storage_ping(fake_redis_client: FakeRedis) -> None:
    assert await RedisCodeStorage(fake_redis_client).ping() is True


@pytest.mark.anyio
async def test_redis_errors_become_cache_errors() -> None:
    redis = AsyncMock()
    redis.get.side_effect = RedisConnectionError("connection refused")
    redis.set.side_effect = RedisConnectionError("connection refused")
    storage = RedisCodeStorage(redis)

    with pytest.raises(CacheOperationError):
        await storage.get(KEY)
    with pytest.raises(CacheOperationError):
        await storage.set(KEY, "value", expire=10)


def test_build_code_storage_defaults_to_memory() -> None:
    storage = build_code_storage(Settings(code_storage=CodeStorageBackend.MEMORY))

    assert isinstance(storage, MemoryCodeStorage)


def test_build_code_storage_redis_requires_factory() -> None:
    with pytest.raises(ValueError):
        build_code_storage(Settings(code_storage=CodeStorageBackend.REDIS))


def test_redis_url_from_settings() -> None:
    settings = Settings(redis_host="cache", redis_port=6380, redis_base=2)

    assert str(settings.redis_url) == "redis://cache:6380/2"


def test_code_ttl_zero_disables_expiry() -> None:
    assert Settings(code_ttl_seconds=0).code_ttl is None
    assert Settings(code_ttl_seconds=300).code_ttl == 300
