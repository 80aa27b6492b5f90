"""
Logging configuration for the application.

Level and line format come from Settings (LOG_LEVEL, LOG_FORMAT,
LOG_DATE_FORMAT). Logging must not change program behavior.
Never logs sensitive data (request bodies, identity handles, secrets).
"""

import logging
import sys

from app.core.config import Settings

NOISY_LOGGERS = ("uvicorn.access", "aiosqlite")


def configure_logging(config: Settings) -> None:
    """Configure stdout logging for the LinkyLink service.

    Unknown level names fall back to INFO. Third-party loggers listed in
    ``NOISY_LOGGERS`` are held at WARNING unless the service itself runs
    at DEBUG.

    Args:
        config: Application settings.
    """
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format=config.log_format,
        datefmt=config.log_date_format,
        stream=sys.stdout,
        force=True,
    )

    noisy_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)
