"""
Utility functions and helpers for the logger broadcast demo.
"""

import logging
import sys

from config.settings import settings


def setup_logging():
    """Set up diagnostic logging for the application."""
    # stderr only, stdout belongs to ConsoleLogger
    handlers = [logging.StreamHandler(sys.stderr)]
    if settings.LOG_FILE:
        handlers.append(logging.FileHandler(settings.LOG_FILE, encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format=settings.LOG_FORMAT,
        datefmt=settings.LOG_DATE_FORMAT,
        handlers=handlers
    )

    logger = logging.getLogger(__name__)
    logger.debug("Logging system initialized")
