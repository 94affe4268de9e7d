from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from loguru import logger

from signup_verification.cache.base import CodeStorage
from signup_verification.cache.dependencies import get_code_storage
from signup_verification.core.constants import DataKeys, SuccessMessages
from signup_verification.core.exceptions import HealthCheckError
from signup_verification.utils.standard_response import standard_response

router = APIRouter()


@router.get("/health")
async def health(
    request: Request,
) -> JSONResponse:
    """
    Checks the health of a project.

    It returns 200 if the project is healthy.
    """

    return standard_response(
        message=SuccessMessages.HEALTH_CHECKUP,
        request=request,
        data={},
    )


@router.get("/storage_health")
async def storage_health(
    request: Request,
    storage: CodeStorage = Depends(get_code_storage),
) -> JSONResponse:
    """Checks that the verification code storage answers."""
    try:
        reachable = await storage.ping()
    except Exception as e:
        logger.error(e)
        raise HealthCheckError(detail=str(e)) from e
    if not reachable:
        raise HealthCheckError()

    return standard_response(
        message=SuccessMessages.HEALTH_CHECKUP,
        request=request,
        data={DataKeys.STORAGE: storage.name},
    )
