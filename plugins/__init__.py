"""
Plugin system for logger discovery.
"""

from .registry import LoggerRegistry, DEFAULT_CANDIDATES

__all__ = ['LoggerRegistry', 'DEFAULT_CANDIDATES']
