"""Logging configuration for the application."""

import logging
import sys

from council.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure application logging.

    Sets up plain-text logging with the level chosen by environment.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    # Configure root logger
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # Set third-party loggers to WARNING to reduce noise
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )

    # Our application loggers stay at the configured level
    logging.getLogger("council").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
