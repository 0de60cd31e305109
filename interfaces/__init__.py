"""
Abstract interfaces for pluggable components.
Provides contracts for the plugin system.
"""

from .ilogger import ILogger

__all__ = [
    'ILogger'
]
