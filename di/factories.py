"""
Component factories for wiring the logger broadcaster.
"""

from typing import Optional

from config.settings import settings
from core.broadcaster import LogBroadcaster
from plugins.registry import LoggerRegistry


class ComponentFactory:
    """Factory for creating component implementations."""

    def __init__(self, registry: Optional[LoggerRegistry] = None):
        """
        Initialize component factory.

        Args:
            registry: Logger registry used for discovery
        """
        self.registry = registry or self.create_registry()

    def create_registry(self) -> LoggerRegistry:
        """Create registry over the built-in logger plugins."""
        return LoggerRegistry()

    def create_broadcaster(self) -> LogBroadcaster:
        """Create a broadcaster populated from the factory's registry."""
        return LogBroadcaster(registry=self.registry, fail_fast=settings.fail_fast())
