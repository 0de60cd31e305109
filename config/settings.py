"""
Centralized configuration management for the logger broadcast demo.
Loads environment variables and provides default configurations.
"""

import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

BROADCAST_POLICIES = ("continue", "fail_fast")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings and configuration."""

    # Logging (diagnostics only, never the broadcast output)
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")
    LOG_FORMAT: str = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
    LOG_DATE_FORMAT: str = '%Y-%m-%d %H:%M:%S'
    LOG_FILE: Optional[str] = os.getenv("LOG_FILE")

    # Broadcast behaviour when a logger raises
    BROADCAST_POLICY: str = os.getenv("BROADCAST_POLICY", "continue")

    # Wait for a line on stdin before the entry point returns
    PAUSE_ON_EXIT: bool = _as_bool(os.getenv("PAUSE_ON_EXIT", "true"))

    @classmethod
    def validate(cls) -> None:
        """Validate that configured values are recognised."""
        if cls.BROADCAST_POLICY not in BROADCAST_POLICIES:
            raise ValueError(
                f"Unknown BROADCAST_POLICY '{cls.BROADCAST_POLICY}', "
                f"expected one of: {', '.join(BROADCAST_POLICIES)}"
            )
        if cls.LOG_LEVEL.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown LOG_LEVEL '{cls.LOG_LEVEL}'")

    @classmethod
    def fail_fast(cls) -> bool:
        """Return True when a failing logger should abort the broadcast."""
        return cls.BROADCAST_POLICY == "fail_fast"

# Global settings instance
settings = Settings()
