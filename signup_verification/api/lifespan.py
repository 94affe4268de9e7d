from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from loguru import logger

from signup_verification.cache.factory import RedisFactory, build_code_storage
from signup_verification.services.email_sender import ActivationMailer
from signup_verification.services.users import UserRegistry
from signup_verification.services.verification import VerificationCodeStore
from signup_verification.settings import CodeStorageBackend, settings


def setup_state(app: FastAPI) -> None:
    """
    Populate ``app.state`` with the storage, code store, mailer and registry.

    :param app: the fastAPI application.
    """
    redis_factory = None
    if settings.code_storage == CodeStorageBackend.REDIS:
        redis_factory = RedisFactory(str(settings.redis_url))
    app.state.redis_factory = redis_factory
    app.state.code_storage = build_code_storage(settings, redis_factory)
    app.state.code_store = VerificationCodeStore(
        storage=app.state.code_storage,
        ttl_seconds=settings.code_ttl,
        consume_on_success=settings.consume_on_success,
    )
    app.state.mailer = ActivationMailer(settings)
    app.state.user_registry = UserRegistry()
    logger.info(
        f"Verification codes kept in {app.state.code_storage.name} storage "
        f"(ttl={settings.code_ttl}, consume_on_success={settings.consume_on_success})",
    )


@asynccontextmanager
async def lifespan_setup(
    app: FastAPI,
) -> AsyncGenerator[None, None]:  # pragma: no cover
    """
    Actions to run on application startup.

    This function uses fastAPI app to store data
    in the state, such as the code storage.

    :param app: the fastAPI application.
    :return: function that actually performs actions.
    """
    setup_state(app)

    try:
        yield
    finally:
        await app.state.code_storage.close()
        if app.state.redis_factory is not None:
            await app.state.redis_factory.close()
