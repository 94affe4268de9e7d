from .exceptions import (
    AppError,
    CacheError,
    CacheOperationError,
    CodeMismatch,
    HealthCheckError,
    InternalServerError,
    MissingInput,
    TransportFailure,
    UserAlreadyExists,
    ValidationError,
)

__all__ = [
    "AppError",
    "CacheError",
    "CacheOperationError",
    "CodeMismatch",
    "HealthCheckError",
    "InternalServerError",
    "MissingInput",
    "TransportFailure",
    "UserAlreadyExists",
    "ValidationError",
]
