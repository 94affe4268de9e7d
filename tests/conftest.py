from typing import AsyncGenerator, Callable, List
from unittest.mock import AsyncMock

import pytest
from fakeredis import FakeServer
from fakeredis.aioredis import FakeRedis
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from signup_verification.api.application import get_app
from signup_verification.api.lifespan import setup_state
from signup_verification.cache.dependencies import get_mailer
from signup_verification.cache.memory import MemoryCodeStorage
from signup_verification.services.email_sender import ActivationMailer
from signup_verification.services.verification import VerificationCodeStore


class FakeClock:
    """Manually advanced UNIX clock."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def code_sequence(codes: List[str]) -> Callable[[], str]:
    """Code generator replaying ``codes`` in order."""
    remaining = iter(codes)
    return lambda: next(remaining)


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """
    Backend for anyio pytest plugin.

    :return: backend name.
    """
    return "asyncio"


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def memory_storage() -> MemoryCodeStorage:
    return MemoryCodeStorage()


@pytest.fixture
def code_store(memory_storage: MemoryCodeStorage, clock: FakeClock) -> VerificationCodeStore:
    """Store with the default policy: 10 minute expiry, non-consuming verify."""
    return VerificationCodeStore(memory_storage, ttl_seconds=600, clock=clock)


@pytest.fixture
async def fake_redis_client() -> AsyncGenerator[FakeRedis, None]:
    """
    Get instance of a fake redis client.

    :yield: FakeRedis instance.
    """
    client = FakeRedis(server=FakeServer(), decode_responses=True)
    await client.flushall()

    yield client

    await client.aclose()


@pytest.fixture
def fastapi_app() -> FastAPI:
    """
    Fixture for creating FastAPI app.

    The lifespan does not run under ASGITransport, state is set up here.

    :return: fastapi app.
    """
    application = get_app()
    setup_state(application)
    return application


@pytest.fixture
def mock_mailer(fastapi_app: FastAPI) -> AsyncMock:
    """Mailer double, records the codes that would have been emailed."""
    mailer = AsyncMock(spec=ActivationMailer)
    fastapi_app.dependency_overrides[get_mailer] = lambda: mailer
    return mailer


@pytest.fixture
async def client(
    fastapi_app: FastAPI,
    mock_mailer: AsyncMock,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Fixture that creates client for requesting server.

    :param fastapi_app: the application.
    :yield: client for the app.
    """
    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url="http://test", timeout=2.0) as ac:
        yield ac
    fastapi_app.dependency_overrides.clear()
