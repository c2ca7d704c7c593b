"""
CLI Configuration

Centralized configuration for the unistr CLI subsystem.
"""

import os
from typing import Optional


class CLIConfig:
    """Configuration for CLI commands"""

    # Operations accepted by `unistr convert`
    CONVERT_OPERATIONS = (
        "upper",
        "lower",
        "upper-first",
        "lower-first",
        "upper-words",
        "trim",
        "trim-left",
        "trim-right",
        "html",
        "md5",
        "sha1",
        "crc32",
    )

    # Machine mode (plain text / JSON output)
    _machine_mode: Optional[bool] = None

    @classmethod
    def set_machine_mode(cls, enabled: bool) -> None:
        """Set machine mode (pure data output, no presentation)"""
        cls._machine_mode = enabled

    @classmethod
    def is_machine_mode(cls) -> bool:
        """
        Check if machine mode is active.

        Machine mode is the default. Returns False only if human mode is
        explicitly requested via --human or UNISTR_HUMAN_MODE.
        """
        if cls._machine_mode is not None:
            return cls._machine_mode
        if os.getenv("UNISTR_HUMAN_MODE", "").lower() in ("1", "true", "yes"):
            return False
        return True

    @classmethod
    def reset(cls) -> None:
        """Forget any explicit mode (used between CLI invocations in tests)."""
        cls._machine_mode = None
