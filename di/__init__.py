"""
Factories for assembling the broadcaster and its plugins.
"""

from .factories import ComponentFactory

__all__ = ['ComponentFactory']
