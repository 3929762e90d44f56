"""Logging configuration for the sales order service."""

import sys
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[service]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# Records logged before setup_service_logger runs still carry a service field
logger.configure(extra={"service": "sales-order-service"})


def setup_service_logger(
    service_name: str,
    log_level: str = "INFO",
    log_file: Optional[str] = None,
):
    """Route every module's records to stderr and, optionally, a JSON log file.

    The service name is installed as default `extra`, so records from any
    module importing `logger` are tagged with it.

    Args:
        service_name: Name stamped on every record (e.g., 'sales-order-service')
        log_level: Minimum level for all sinks (default: INFO)
        log_file: Optional path for a rotating file of JSON-serialized records

    Returns:
        logger: The shared loguru logger
    """
    logger.remove()
    logger.configure(extra={"service": service_name})

    logger.add(
        sys.stderr,
        level=log_level,
        format=CONSOLE_FORMAT,
        colorize=True,
        enqueue=True,
        backtrace=True,
        diagnose=False,
    )

    if log_file:
        logger.add(
            log_file,
            level=log_level,
            serialize=True,
            rotation="10 MB",
            retention=5,
        )

    return logger


__all__ = ["logger", "setup_service_logger"]
