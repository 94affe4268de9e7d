import time
from typing import Awaitable, Callable

from fastapi import Request
from loguru import logger
from starlette.responses import Response


async def logging_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Logging middleware."""
    started = time.perf_counter()

    response = await call_next(request)

    process_time = (time.perf_counter() - started) * 1000  # ms
    client_ip = request.client.host if request.client else "unknown"

    # Request bodies carry codes and passwords, only the envelope is logged.
    logger.bind(
        client_ip=client_ip,
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        process_time=f"{process_time:.2f}ms",
    ).info("access")

    return response
