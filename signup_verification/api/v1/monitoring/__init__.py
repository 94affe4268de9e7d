"""Health probes."""

from signup_verification.api.v1.monitoring.views import router

__all__ = ["router"]
