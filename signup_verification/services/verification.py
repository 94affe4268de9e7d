"""One-time verification codes for sign-up email confirmation."""

import asyncio
import secrets
import time
from typing import Callable, Optional

from loguru import logger
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from signup_verification.cache.base import CodeStorage, build_cache_key
from signup_verification.core.constants import CacheKeyTemplates, VerificationConfig


class PendingVerification(BaseModel):
    """Code currently outstanding for a recipient."""

    recipient: str
    code: str
    issued_at: float
    expires_at: Optional[float] = None

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and now >= self.expires_at


def normalize_recipient(recipient: str) -> str:
    """Lookup key for a recipient: trimmed and lowercased."""
    return recipient.strip().lower()


def generate_code() -> str:
    """Uniformly random 6 digit code in [100000, 999999]."""
    span = VerificationConfig.CODE_MAX - VerificationConfig.CODE_MIN + 1
    return str(VerificationConfig.CODE_MIN + secrets.randbelow(span))


def mask_code(code: str) -> str:
    return "***" + code[-2:]


class VerificationCodeStore:
    """
    Maps a normalized recipient to its single outstanding code.

    Issuing replaces whatever code the recipient had. Verifying does not
    change state unless ``consume_on_success`` is set, so a correct code
    keeps verifying until it is replaced or expires.

    :param storage: backend holding the serialized pending verifications.
    :param ttl_seconds: code lifetime, None keeps codes valid until replaced.
    :param consume_on_success: drop the code after its first successful match.
    :param clock: source of UNIX timestamps.
    :param code_generator: produces new codes.
    """

    def __init__(
        self,
        storage: CodeStorage,
        ttl_seconds: Optional[int] = None,
        consume_on_success: bool = False,
        clock: Callable[[], float] = time.time,
        code_generator: Callable[[], str] = generate_code,
    ) -> None:
        self.storage = storage
        self.ttl_seconds = ttl_seconds
        self.consume_on_success = consume_on_success
        self._clock = clock
        self._generate = code_generator
        self._lock = asyncio.Lock()

    @staticmethod
    def _key(recipient: str) -> str:
        return build_cache_key(CacheKeyTemplates.VERIFICATION_CODE, recipient=recipient)

    async def issue(self, recipient: str) -> str:
        """
        Generate a new code for ``recipient`` and store it.

        Any previous code for the same recipient is discarded. The code is
        returned for dispatch; nothing is sent from here.
        """
        normalized = normalize_recipient(recipient)
        code = self._generate()
        now = self._clock()
        pending = PendingVerification(
            recipient=normalized,
            code=code,
            issued_at=now,
            expires_at=now + self.ttl_seconds if self.ttl_seconds else None,
        )
        key = self._key(normalized)
        async with self._lock:
            await self.storage.delete(key)
            await self.storage.set(
                key,
                pending.model_dump_json(),
                expire=self.ttl_seconds,
            )
        logger.info(f"Verification code issued for {normalized} ({mask_code(code)})")
        return code

    async def verify(self, recipient: str, submitted_code: str) -> bool:
        """
        Check ``submitted_code`` against the active code of ``recipient``.

        Unknown recipients, expired codes and wrong codes all yield False.
        """
        normalized = normalize_recipient(recipient)
        key = self._key(normalized)
        async with self._lock:
            pending = await self._load(key)
            if pending is None:
                logger.debug(f"No pending verification for {normalized}")
                return False
            if pending.is_expired(self._clock()):
                await self.storage.delete(key)
                logger.info(f"Verification code for {normalized} expired")
                return False
            matched = pending.code.strip() == str(submitted_code).strip()
            if matched and self.consume_on_success:
                await self.storage.delete(key)
        logger.info(f"Verification for {normalized}: matched={matched}")
        return matched

    async def _load(self, key: str) -> Optional[PendingVerification]:
        raw = await self.storage.get(key)
        if raw is None:
            return None
        try:
            return PendingVerification.model_validate_json(raw)
        except PydanticValidationError:
            logger.warning(f"Discarding unreadable verification entry '{key}'")
            await self.storage.delete(key)
            return None
