import re
from datetime import date
from typing import Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel
from typing_extensions import Annotated

from signup_verification.core.constants import (
    Description,
    ValidationMessages,
    ValidationPatterns,
)

RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

_EMAIL_RE = re.compile(ValidationPatterns.EMAIL)
_PHONE_RE = re.compile(ValidationPatterns.PHONE)
_USERNAME_RE = re.compile(ValidationPatterns.USERNAME)
_PASSWORD_STRENGTH_RE = re.compile(ValidationPatterns.PASSWORD_STRENGTH)


def _check_email(value: str) -> str:
    if not _EMAIL_RE.match(value):
        raise ValueError(ValidationMessages.EMAIL_INVALID)
    return value


EmailText = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1),
    AfterValidator(_check_email),
]


def age_on(birthdate: date, today: date) -> int:
    """Whole years between ``birthdate`` and ``today``."""
    age = today.year - birthdate.year
    if (today.month, today.day) < (birthdate.month, birthdate.day):
        age -= 1
    return age


# ==================== REQUEST SCHEMAS ====================


class SendEmailRequest(BaseModel):
    """Request schema for /api/sendEmail."""

    to: EmailText = Field(..., description=Description.TO)


class VerifyCodeRequest(BaseModel):
    """Request schema for /api/verifyCode."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    email: EmailText = Field(..., description=Description.EMAIL)
    code: RequiredText = Field(..., description=Description.CODE)


class RegisterRequest(BaseModel):
    """Request schema for /api/register, the complete sign-up form."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    email_or_phone: RequiredText = Field(..., description=Description.EMAIL_OR_PHONE)
    password: str = Field(..., min_length=1, description=Description.PASSWORD)
    confirm_password: str = Field(
        ...,
        min_length=1,
        description=Description.CONFIRM_PASSWORD,
    )
    first_name: RequiredText = Field(..., description=Description.FIRST_NAME)
    last_name: RequiredText = Field(..., description=Description.LAST_NAME)
    username: RequiredText = Field(..., description=Description.USERNAME)
    phone_number: RequiredText = Field(..., description=Description.PHONE_NUMBER)
    birthdate: date = Field(..., description=Description.BIRTH_DATE)
    profile_picture: Optional[str] = Field(
        None,
        description=Description.PROFILE_PICTURE,
    )

    @field_validator("email_or_phone")
    @classmethod
    def validate_email_or_phone(cls, value: str) -> str:
        pattern = _EMAIL_RE if "@" in value else _PHONE_RE
        if not pattern.match(value):
            raise ValueError(ValidationMessages.EMAIL_OR_PHONE_INVALID)
        return value

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if len(value) < ValidationPatterns.MIN_PASSWORD_LENGTH:
            raise ValueError(ValidationMessages.PASSWORD_TOO_SHORT)
        if len(value.encode("utf-8")) > ValidationPatterns.MAX_PASSWORD_BYTES:
            raise ValueError(ValidationMessages.PASSWORD_TOO_LONG)
        if not _PASSWORD_STRENGTH_RE.match(value):
            raise ValueError(ValidationMessages.PASSWORD_WEAK)
        return value

    @field_validator("confirm_password")
    @classmethod
    def validate_confirm_password(cls, value: str, info: ValidationInfo) -> str:
        # password is absent from info.data when it failed its own checks
        password = info.data.get("password")
        if password is not None and value != password:
            raise ValueError(ValidationMessages.PASSWORDS_DONT_MATCH)
        return value

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_name(cls, value: str, info: ValidationInfo) -> str:
        if len(value) < ValidationPatterns.MIN_NAME_LENGTH:
            label = "First name" if info.field_name == "first_name" else "Last name"
            raise ValueError(ValidationMessages.NAME_TOO_SHORT.format(field=label))
        return value

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        if not _USERNAME_RE.match(value):
            raise ValueError(ValidationMessages.USERNAME_INVALID)
        return value

    @field_validator("phone_number")
    @classmethod
    def validate_phone_number(cls, value: str) -> str:
        if not _PHONE_RE.match(value):
            raise ValueError(ValidationMessages.PHONE_INVALID)
        return value

    @field_validator("birthdate")
    @classmethod
    def validate_birthdate(cls, value: date) -> date:
        age = age_on(value, date.today())
        if not ValidationPatterns.MIN_AGE <= age <= ValidationPatterns.MAX_AGE:
            raise ValueError(ValidationMessages.AGE_OUT_OF_RANGE)
        return value
