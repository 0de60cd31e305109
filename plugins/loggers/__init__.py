"""
Logger plugins.
"""

from .console_logger import ConsoleLogger
from .file_logger import FileLogger
from .email_logger import EmailLogger

__all__ = ['ConsoleLogger', 'FileLogger', 'EmailLogger']
