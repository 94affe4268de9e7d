from importlib import metadata

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, UJSONResponse
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

from signup_verification.api.lifespan import lifespan_setup
from signup_verification.api.v1.router import api_router
from signup_verification.core.constants import AppConfig
from signup_verification.core.exceptions import AppError, InternalServerError
from signup_verification.core.logging.log import configure_logging
from signup_verification.core.middleware.logging_middleware import logging_middleware
from signup_verification.settings import settings
from signup_verification.utils.validation import error_from_validation


def get_app() -> FastAPI:
    """
    Get FastAPI application.

    This is the main constructor of an application.

    :return: application.
    """
    configure_logging()
    app = FastAPI(
        title=AppConfig.NAME,
        version=metadata.version(AppConfig.NAME),
        lifespan=lifespan_setup,
        docs_url=None,
        redoc_url=None,
        openapi_url=f"{settings.api_prefix}/openapi.json",
        default_response_class=UJSONResponse,
    )

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        return exc.to_response()

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        return error_from_validation(exc.errors()).to_response()

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.opt(exception=exc).error(
            f"Unhandled error on {request.method} {request.url.path}",
        )
        return InternalServerError().to_response()

    app.add_middleware(BaseHTTPMiddleware, dispatch=logging_middleware)

    # Main router for the API.
    app.include_router(router=api_router, prefix=settings.api_prefix)

    return app
