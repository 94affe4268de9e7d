"""In-memory registry of signed-up users."""

import threading
from datetime import date
from typing import Dict, Optional

import bcrypt
from loguru import logger
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool

from signup_verification.core.exceptions import UserAlreadyExists


class RegisteredUser(BaseModel):
    """User record kept after a completed sign-up."""

    email_or_phone: str
    username: str
    first_name: str
    last_name: str
    phone_number: str
    birthdate: date
    profile_picture: Optional[str] = None
    password_hash: str

    def public_view(self) -> Dict[str, object]:
        return self.model_dump(mode="json", exclude={"password_hash"})


def normalize_identifier(email_or_phone: str) -> str:
    identifier = email_or_phone.strip()
    if "@" in identifier:
        return identifier.lower()
    return identifier


def get_hashed_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def check_password(password: str, hashed_password: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))


class UserRegistry:
    """Users indexed by email/phone and by username."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._by_identifier: Dict[str, RegisteredUser] = {}
        self._by_username: Dict[str, RegisteredUser] = {}

    async def register(
        self,
        *,
        email_or_phone: str,
        password: str,
        username: str,
        first_name: str,
        last_name: str,
        phone_number: str,
        birthdate: date,
        profile_picture: Optional[str] = None,
    ) -> RegisteredUser:
        """Store a new user, rejecting a taken email/phone or username."""
        identifier = normalize_identifier(email_or_phone)
        username = username.strip()
        password_hash = await run_in_threadpool(get_hashed_password, password)
        user = RegisteredUser(
            email_or_phone=identifier,
            username=username,
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            phone_number=phone_number.strip(),
            birthdate=birthdate,
            profile_picture=profile_picture,
            password_hash=password_hash,
        )
        with self._lock:
            if identifier in self._by_identifier or username in self._by_username:
                logger.info(f"Registration rejected, {identifier} or {username} taken")
                raise UserAlreadyExists()
            self._by_identifier[identifier] = user
            self._by_username[username] = user
        logger.info(f"User registered: {username}")
        return user

    def get(self, identifier: str) -> Optional[RegisteredUser]:
        """Look a user up by email/phone or username."""
        with self._lock:
            return self._by_identifier.get(
                normalize_identifier(identifier),
            ) or self._by_username.get(identifier.strip())

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_identifier)
