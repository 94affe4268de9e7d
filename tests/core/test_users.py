from datetime import date

import pytest

from signup_verification.core.exceptions import UserAlreadyExists
from signup_verification.services.users import UserRegistry, check_password


async def register(registry: UserRegistry, **overrides: object):
    fields = {
        "email_or_phone": "Ada@Example.com ",
        "password": "Password123",
        "username": "ada_l",
        "first_name": "Ada",
        "last_name": "Lovelace",
        "phone_number": "+44 20 7946 0958",
        "birthdate": date(1990, 1, 1),
    }
    fields.update(overrides)
    return await registry.register(**fields)


@pytest.mark.anyio
async def test_register_and_lookup() -> None:
    registry = UserRegistry()

    user = await register(registry)

    assert user.email_or_phone == "ada@example.com"
    assert registry.get("ADA@example.com") is user
    assert registry.get("ada_l") is user
    assert registry.get("nobody") is None
    assert len(registry) == 1


@pytest.mark.anyio
async def test_password_is_hashed() -> None:
    user = await register(UserRegistry())

    assert user.password_hash != "Password123"
    assert check_password("Password123", user.password_hash)
    assert not check_password("Password124", user.password_hash)


@pytest.mark.anyio
async def test_duplicate_identifier_rejected() -> None:
    registry = UserRegistry()
    await register(registry)

    with pytest.raises(UserAlreadyExists):
        await register(registry, email_or_phone="ada@example.com", username="someone")
    assert len(registry) == 1


@pytest.mark.anyio
async def test_duplicate_username_rejected() -> None:
    registry = UserRegistry()
    await register(registry)

    with pytest.raises(UserAlreadyExists):
        await register(registry, email_or_phone="other@example.com")


@pytest.mark.anyio
async def test_phone_identifier_kept_verbatim() -> None:
    user = await register(UserRegistry(), email_or_phone=" +1 555 010 9999 ")

    assert user.email_or_phone == "+1 555 010 9999"
