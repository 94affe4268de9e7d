"""Request scoped accessors for objects created in the lifespan."""

from starlette.requests import Request

from signup_verification.cache.base import CodeStorage
from signup_verification.services.email_sender import ActivationMailer
from signup_verification.services.users import UserRegistry
from signup_verification.services.verification import VerificationCodeStore


def get_code_storage(request: Request) -> CodeStorage:
    """Get code storage backend."""
    return request.app.state.code_storage


def get_code_store(request: Request) -> VerificationCodeStore:
    """Get verification code store."""
    return request.app.state.code_store


def get_mailer(request: Request) -> ActivationMailer:
    """Get activation mailer."""
    return request.app.state.mailer


def get_user_registry(request: Request) -> UserRegistry:
    """Get user registry."""
    return request.app.state.user_registry
