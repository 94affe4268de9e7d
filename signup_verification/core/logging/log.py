import logging
import sys
from typing import Any, Union

from loguru import logger

from signup_verification.core.constants import LoggerConfigs
from signup_verification.settings import settings


class InterceptHandler(logging.Handler):
    """
    Default handler from examples in loguru documentation.

    This handler intercepts all log requests and
    passes them to loguru.

    For more info see:
    https://loguru.readthedocs.io/en/stable/overview.html#entirely-compatible-with-standard-logging
    """

    def emit(self, record: logging.LogRecord) -> None:  # pragma: no cover
        """
        Propagates logs to loguru.

        :param record: record to log.
        """
        try:
            level: Union[str, int] = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level,
            record.getMessage(),
        )


def is_access_log(record: Any) -> bool:
    """Filter for access logs."""
    return record["message"] == "access"


def configure_logging() -> None:  # pragma: no cover
    """Configures logging."""
    intercept_handler = InterceptHandler()

    logging.basicConfig(handlers=[intercept_handler], level=logging.NOTSET)

    for logger_name in logging.root.manager.loggerDict:
        if logger_name.startswith("uvicorn."):
            logging.getLogger(logger_name).handlers = []

    # change handler for default uvicorn logger
    logging.getLogger("uvicorn").handlers = [intercept_handler]

    log_dir = settings.log_dir

    # set logs output, level and format
    logger.remove()
    logger.add(
        sys.stdout,
        level=settings.log_level.value,
        filter=lambda r: not is_access_log(r),
    )
    logger.add(
        log_dir / "error.log",
        level=LoggerConfigs.LOG_LEVEL_ERROR,
        rotation=LoggerConfigs.ROTATION_PERIOD,
        retention=LoggerConfigs.RETENTION_PERIOD,
    )
    access_log_format = (
        "{extra[client_ip]} - "
        '"{extra[method]} {extra[path]} HTTP/1.1" '
        "{extra[status_code]} - "
        "Process Time: {extra[process_time]}"
    )

    logger.add(
        log_dir / "access.log",
        filter=is_access_log,
        rotation=LoggerConfigs.ROTATION_PERIOD,
        retention=LoggerConfigs.RETENTION_PERIOD,
        format=access_log_format,
    )
    if settings.debug:
        logger.add(
            log_dir / "debug.log",
            level=LoggerConfigs.LOG_LEVEL_DEBUG,
            rotation=LoggerConfigs.ROTATION_PERIOD,
            retention=LoggerConfigs.RETENTION_PERIOD,
        )
