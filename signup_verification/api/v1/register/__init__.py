"""User registration API."""

from signup_verification.api.v1.register.views import router

__all__ = ["router"]
