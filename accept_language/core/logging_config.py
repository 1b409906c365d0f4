"""
Loguru logging configuration.

Features:
- Console logging for development
- Structured JSON logging for production
- Optional rotating log file
"""

import sys
from pathlib import Path

from loguru import logger


def configure_logging(
    environment: str = "development",
    level: str = "INFO",
    log_file: str | None = None,
) -> None:
    """
    Configure Loguru for the application.

    Args:
        environment: "development" for console, anything else for JSON.
        level: Minimum level for the console sink.
        log_file: Optional path of a rotating log file.
    """
    # Remove default handler
    logger.remove()

    log_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )

    if environment == "development":
        # Human-readable format for development
        logger.add(
            sys.stderr,
            format=log_format,
            level=level,
            colorize=True,
        )
    else:
        # JSON format for production (machine-parseable)
        logger.add(
            sys.stderr,
            format="{message}",
            level=level,
            serialize=True,
        )

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format=log_format if environment == "development" else "{message}",
            level=level,
            rotation="10 MB",
            retention="7 days",
            serialize=(environment != "development"),
        )
