from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import Request
from fastapi.responses import JSONResponse

from signup_verification.core.constants import ResponseParams
from signup_verification.settings import settings

API_VERSION = settings.api_version


def build_meta(request: Request) -> Dict[str, Any]:
    """Build a standardized meta object for API responses.

    Args:
        request: The FastAPI request object.

    Returns:
        Dictionary containing standardized metadata.
    """
    return {
        ResponseParams.API_VERSION: API_VERSION,
        ResponseParams.TIMESTAMP: datetime.now(timezone.utc)
        .isoformat()
        .replace("+00:00", "Z"),
        ResponseParams.REQUEST_ID: request.headers.get("x-request-id"),
    }


def standard_response(
    message: str,
    request: Request,
    data: Dict[str, Any],
) -> JSONResponse:
    """Standardized JSON success response for all APIs.

    Args:
        message: Response message.
        request: The FastAPI request object.
        data: Response data payload.

    Returns:
        JSONResponse with standardized structure.
    """
    response_body: Dict[str, Any] = {
        ResponseParams.SUCCESS: True,
        ResponseParams.MESSAGE: message,
        ResponseParams.DATA: data,
        ResponseParams.META: build_meta(request),
    }

    return JSONResponse(content=response_body, status_code=200)
