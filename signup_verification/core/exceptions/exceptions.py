"""Custom exceptions for the application."""

from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse
from starlette import status

from signup_verification.core.constants import (
    ErrorCodes,
    ErrorMessages,
    ResponseParams,
)


class AppError(Exception):
    """Base application exception."""

    http_code: int = status.HTTP_400_BAD_REQUEST
    message: str = ErrorMessages.INTERNAL_SERVER_ERROR
    error_code: str = ErrorCodes.GENERAL_ERROR_CODE

    def __init__(
        self,
        detail: Optional[str] = None,
        http_code: Optional[int] = None,
        message: Optional[str] = None,
        error_code: Optional[str] = None,
        fields: Optional[Dict[str, str]] = None,
    ) -> None:
        if http_code is not None:
            self.http_code = http_code
        if message is not None:
            self.message = message
        if error_code is not None:
            self.error_code = error_code
        self.detail = detail or self.message
        self.fields = fields or {}
        super().__init__(self.detail)

    def to_response(self) -> JSONResponse:
        """Convert the error to a FastAPI JSONResponse.

        Returns:
            JSONResponse: A formatted error response with status code and error details.
        """
        content: Dict[str, Any] = {
            ResponseParams.SUCCESS: False,
            ResponseParams.MESSAGE: self.message,
            ResponseParams.ERROR: self.detail,
            ResponseParams.ERROR_CODE: self.error_code,
            ResponseParams.DATA: {},
            ResponseParams.META: {"type": self.__class__.__name__},
        }
        if self.fields:
            content[ResponseParams.FIELDS] = self.fields
        return JSONResponse(status_code=self.http_code, content=content)


class InternalServerError(AppError):
    """Raised for failures nobody anticipated."""

    http_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = ErrorMessages.INTERNAL_SERVER_ERROR
    error_code = ErrorCodes.INTERNAL_SERVER_ERROR_CODE


# Cache Exceptions
class CacheError(AppError):
    """Base exception for code storage errors."""

    http_code = status.HTTP_503_SERVICE_UNAVAILABLE
    message = ErrorMessages.CACHE_OPERATION_ERROR
    error_code = ErrorCodes.CACHE_OPERATION_ERROR_CODE


class CacheOperationError(CacheError):
    """Raised when a storage read/write operation fails."""


class HealthCheckError(AppError):
    """Raised when health check fails."""

    http_code = status.HTTP_503_SERVICE_UNAVAILABLE
    message = ErrorMessages.HEALTH_CHECK_FAILED
    error_code = ErrorCodes.HEALTH_CHECK_FAILED_CODE


class MissingInput(AppError):
    """Recipient or code absent from the request."""

    http_code = status.HTTP_400_BAD_REQUEST
    message = ErrorMessages.FIELD_REQUIRED
    error_code = ErrorCodes.MISSING_INPUT_CODE


class ValidationError(AppError):
    """Raised when request data is present but malformed."""

    http_code = status.HTTP_400_BAD_REQUEST
    message = ErrorMessages.DATA_VALIDATION_ERROR
    error_code = ErrorCodes.DATA_VALIDATION_ERROR_CODE


class TransportFailure(AppError):
    """Activation email could not be dispatched."""

    http_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = ErrorMessages.TRANSPORT_FAILURE
    error_code = ErrorCodes.TRANSPORT_FAILURE_CODE


class CodeMismatch(AppError):
    """Submitted code does not match an active code for the recipient."""

    http_code = status.HTTP_200_OK
    message = ErrorMessages.CODE_MISMATCH
    error_code = ErrorCodes.CODE_MISMATCH_CODE


class UserAlreadyExists(AppError):
    """Email, phone or username is already registered."""

    http_code = status.HTTP_400_BAD_REQUEST
    message = ErrorMessages.USER_ALREADY_EXISTS
    error_code = ErrorCodes.USER_ALREADY_EXISTS_CODE
