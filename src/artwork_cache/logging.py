"""Centralized logging configuration using loguru.

Call :func:`setup_logging` once from the process entry point; library modules
only ever import ``from loguru import logger`` and never add sinks themselves.

Example:
    from artwork_cache.logging import setup_logging

    setup_logging(level="DEBUG")

"""

import sys
from typing import Any

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
    "<level>{message}</level>"
)


def setup_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: str | None = None,
) -> Any:
    """Configure loguru sinks for the cache.

    Args:
        level: Minimum log level to capture. One of: DEBUG, INFO, WARNING, ERROR, CRITICAL.
        json_output: If True, serialize records as JSON on stderr.
        log_file: Optional file path; written with rotation and compression.

    Returns:
        The configured loguru logger instance.

    """
    logger.remove()

    if json_output:
        logger.add(sys.stderr, format="{message}", serialize=True, level=level)
    else:
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        # Thumbnail generation is chatty at DEBUG; keep the file bounded.
        logger.add(
            log_file,
            format=CONSOLE_FORMAT,
            level=level,
            rotation="5 MB",
            retention=3,
            compression="gz",
        )

    logger.debug("Logging configured: level={}, json={}, file={}", level, json_output, log_file)
    return logger
