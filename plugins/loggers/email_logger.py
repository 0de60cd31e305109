"""
Email logger plugin.
"""

from interfaces import ILogger


class EmailLogger(ILogger):
    """Plugin placeholder for mailing messages."""

    def __init__(self):
        self.name = "email"
        self.description = "Email sink (not implemented, accepts and drops messages)"

    def log(self, message: str) -> None:
        # Delivery is not implemented
        pass
