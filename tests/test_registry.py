"""
Tests for logger plugin discovery.
"""

import logging

from plugins.registry import LoggerRegistry, DEFAULT_CANDIDATES
from plugins.loggers import ConsoleLogger, FileLogger, EmailLogger
from tests import RecordingLogger, NeedsArgsLogger


class TestLoggerRegistry:
    """Test logger registry discovery."""

    def test_default_discovery_order(self):
        """Test built-in loggers are discovered in declaration order."""
        registry = LoggerRegistry()

        loggers = registry.discover()

        assert [type(p) for p in loggers] == [ConsoleLogger, FileLogger, EmailLogger]

    def test_discovery_is_idempotent(self):
        """Test repeated discovery yields the same types with fresh instances."""
        registry = LoggerRegistry()

        first = registry.discover()
        second = registry.discover()

        assert len(first) == len(second)
        assert [type(p) for p in first] == [type(p) for p in second]
        assert all(a is not b for a, b in zip(first, second))

    def test_one_instance_per_type(self):
        """Test duplicate candidates are instantiated once."""
        registry = LoggerRegistry([RecordingLogger, ConsoleLogger, RecordingLogger])

        loggers = registry.discover()

        assert [type(p) for p in loggers] == [RecordingLogger, ConsoleLogger]

    def test_skips_non_logger_candidates(self):
        """Test candidates not implementing ILogger are ignored."""
        registry = LoggerRegistry([dict, RecordingLogger, "not a class"])

        loggers = registry.discover()

        assert len(loggers) == 1
        assert isinstance(loggers[0], RecordingLogger)

    def test_excludes_candidate_that_cannot_be_built(self, caplog):
        """Test a candidate needing constructor args is excluded with a warning."""
        registry = LoggerRegistry([NeedsArgsLogger, RecordingLogger])

        with caplog.at_level(logging.WARNING, logger="plugins.registry"):
            loggers = registry.discover()

        assert [type(p) for p in loggers] == [RecordingLogger]
        assert "NeedsArgsLogger" in caplog.text

    def test_empty_candidates(self):
        """Test an empty candidate set discovers nothing."""
        assert LoggerRegistry([]).discover() == []

    def test_list_candidates(self):
        """Test candidate names are listed in order."""
        registry = LoggerRegistry()

        assert registry.list_candidates() == ['ConsoleLogger', 'FileLogger', 'EmailLogger']
        assert len(DEFAULT_CANDIDATES) == 3
