"""
Plugin registry for logger discovery.
"""

from typing import List, Optional, Sequence, Type
import logging

from interfaces import ILogger
from plugins.loggers import ConsoleLogger, FileLogger, EmailLogger

logger = logging.getLogger(__name__)

# Fixed candidate set, discovered in this order
DEFAULT_CANDIDATES = (ConsoleLogger, FileLogger, EmailLogger)


class LoggerRegistry:
    """Registry that turns a fixed set of candidate types into logger instances."""

    def __init__(self, candidates: Optional[Sequence[Type]] = None):
        """
        Initialize logger registry.

        Args:
            candidates: Candidate classes to scan, defaults to the built-in loggers
        """
        self._candidates: tuple = tuple(DEFAULT_CANDIDATES if candidates is None else candidates)

    def discover(self) -> List[ILogger]:
        """
        Instantiate every candidate that implements ILogger.

        Candidates that are not ILogger subclasses are skipped. Candidates whose
        no-argument construction fails are excluded with a warning. Each type is
        instantiated at most once, in candidate order.

        Returns:
            Freshly created logger instances
        """
        discovered: List[ILogger] = []
        seen = set()

        for candidate in self._candidates:
            if not (isinstance(candidate, type) and issubclass(candidate, ILogger)):
                logger.debug(f"Skipping candidate that does not implement ILogger: {candidate!r}")
                continue
            if candidate in seen:
                continue
            seen.add(candidate)

            try:
                instance = candidate()
            except Exception as e:
                logger.warning(f"Failed to load logger plugin {candidate.__name__}: {e}")
                continue

            discovered.append(instance)
            logger.debug(f"Loaded logger plugin: {candidate.__name__}")

        logger.info(f"Logger discovery completed: {len(discovered)} of {len(self._candidates)} candidates loaded")
        return discovered

    def list_candidates(self) -> List[str]:
        """
        List candidate type names.

        Returns:
            List of candidate names
        """
        return [getattr(candidate, '__name__', repr(candidate)) for candidate in self._candidates]
