"""
Test suite for the logger broadcast demo.
Shared fake loggers used across test modules.
"""

from typing import List

from interfaces import ILogger


class RecordingLogger(ILogger):
    """Logger that remembers every message it receives."""

    def __init__(self):
        self.messages: List[str] = []

    def log(self, message: str) -> None:
        self.messages.append(message)


class FailingLogger(ILogger):
    """Logger whose log call always raises."""

    def __init__(self):
        self.calls = 0

    def log(self, message: str) -> None:
        self.calls += 1
        raise IOError(f"cannot deliver {message!r}")


class NeedsArgsLogger(ILogger):
    """Logger that cannot be built without arguments."""

    def __init__(self, destination: str):
        self.destination = destination

    def log(self, message: str) -> None:
        pass
