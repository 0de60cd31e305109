"""
Console logger plugin.
"""

import sys
from interfaces import ILogger


class ConsoleLogger(ILogger):
    """Plugin that writes messages to standard output."""

    def __init__(self):
        """Initialize console logger."""
        self.name = "console"
        self.description = "Writes each message as a line on stdout"

    def log(self, message: str) -> None:
        """
        Write the message followed by a newline.

        Characters the stream cannot encode are replaced rather than dropping
        the whole line.

        Args:
            message: Text to write
        """
        # Looked up per call so redirected or captured stdout is honoured
        stream = sys.stdout
        line = f"{message}\n"
        try:
            stream.write(line)
        except UnicodeEncodeError:
            encoding = getattr(stream, 'encoding', None) or 'utf-8'
            stream.write(line.encode(encoding, errors='replace').decode(encoding))
        stream.flush()
