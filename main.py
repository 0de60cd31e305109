#!/usr/bin/env python3
"""
Entry point for the logger broadcast demo.
Discovers the logger plugins and broadcasts a greeting through all of them.
"""

import logging

from config.settings import settings
from di.factories import ComponentFactory
from utils.helpers import setup_logging

logger = logging.getLogger(__name__)

GREETING = "Hello, World!"


def main():
    """Main entry point."""
    # Validate before setup_logging, an unknown LOG_LEVEL would break basicConfig
    try:
        settings.validate()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return

    setup_logging()

    broadcaster = ComponentFactory().create_broadcaster()
    logger.info(f"Broadcasting to: {[type(target).__name__ for target in broadcaster.loggers]}")
    broadcaster.log(GREETING)

    if settings.PAUSE_ON_EXIT:
        try:
            input()
        except EOFError:
            pass

if __name__ == "__main__":
    main()
