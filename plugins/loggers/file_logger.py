"""
File logger plugin.
"""

import logging
from interfaces import ILogger

logger = logging.getLogger(__name__)


class FileLogger(ILogger):
    """Plugin placeholder for writing messages to a file."""

    def __init__(self):
        """Initialize file logger."""
        self.name = "file"
        self.description = "File sink (not implemented, accepts and drops messages)"

    def log(self, message: str) -> None:
        """Accept the message without persisting it."""
        logger.debug(f"File logger received {len(message)} chars, nothing written")
