# config.py
"""
Default parameters for the transform buttons and the batch CLI.
Values can be overridden from the environment (PIXEL_* variables).
"""

from __future__ import annotations
import os
from dataclasses import dataclass, field


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_log_level(name: str, default: str) -> str:
    level = os.getenv(name, default).strip().upper() or default
    if level not in LOG_LEVELS:
        raise ValueError(f"{name} must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    return level


@dataclass
class Settings:
    """Parameters the UI binds to; range checks happen in transforms."""

    # Threshold Method 1
    threshold_level: int = 128

    # Threshold Method 2
    block_size: int = 16

    log_level: str = "INFO"
    initial_dir: str = field(default_factory=os.getcwd)

    @classmethod
    def from_env(cls) -> "Settings":
        base = cls()
        return cls(
            threshold_level=_env_int("PIXEL_THRESHOLD_LEVEL", base.threshold_level),
            block_size=_env_int("PIXEL_BLOCK_SIZE", base.block_size),
            log_level=_env_log_level("PIXEL_LOG_LEVEL", base.log_level),
            initial_dir=os.getenv("PIXEL_INITIAL_DIR", base.initial_dir),
        )


# Shared instance for callers that don't pass their own
default_settings = Settings()
