"""Verification code API."""

from signup_verification.api.v1.verification.views import router

__all__ = ["router"]
