"""
Abstract interface for logger components.
"""

from abc import ABC, abstractmethod


class ILogger(ABC):
    """Abstract interface for anything that can receive a broadcast message."""

    @abstractmethod
    def log(self, message: str) -> None:
        """
        Deliver a message.

        Args:
            message: Text to deliver
        """
        pass
