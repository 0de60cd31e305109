"""
Broadcaster that fans a message out to every discovered logger.
"""

import logging
from typing import List, Optional, Tuple

from config.settings import settings
from interfaces import ILogger
from plugins.registry import LoggerRegistry

logger = logging.getLogger(__name__)


class LogBroadcaster:
    """Holds the discovered loggers and dispatches each message to all of them."""

    def __init__(self, registry: Optional[LoggerRegistry] = None,
                 fail_fast: Optional[bool] = None):
        """
        Initialize the broadcaster and run discovery.

        Args:
            registry: Registry used for discovery, a default one if None
            fail_fast: Propagate the first logger error instead of continuing,
                uses the configured policy if None
        """
        self.registry = registry or LoggerRegistry()
        self.fail_fast = settings.fail_fast() if fail_fast is None else fail_fast

        self._loggers: List[ILogger] = []
        self._ready = False

        self.discover()

    @property
    def loggers(self) -> Tuple[ILogger, ...]:
        """Discovered loggers in dispatch order."""
        return tuple(self._loggers)

    @property
    def is_ready(self) -> bool:
        """True once discovery has populated the loggers."""
        return self._ready

    def discover(self) -> None:
        """
        Populate the logger collection from the registry.

        Raises:
            RuntimeError: If discovery already ran
        """
        if self._ready:
            raise RuntimeError("Loggers already discovered for this broadcaster")

        self._loggers.extend(self.registry.discover())
        self._ready = True
        logger.debug(f"Broadcaster ready with {len(self._loggers)} loggers")

    def log(self, message: str) -> None:
        """
        Send a message to every logger, in discovery order.

        Args:
            message: Text to broadcast
        """
        for target in self._loggers:
            try:
                target.log(message)
            except Exception as e:
                if self.fail_fast:
                    raise
                logger.error(f"Logger {type(target).__name__} failed: {e}", exc_info=True)
