"""
Base error and system-level failures.

System failures stop the program; they are reported once and mapped to a
non-zero exit status by the CLI.
"""

from typing import Any, Optional


class SportsTerminalError(Exception):
    """Base class for all sportsterminal errors."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class TerminalError(SportsTerminalError):
    """No usable interactive terminal, or curses failed to drive it."""

    def __init__(self, message: str, stream: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.stream = stream


class ConfigError(SportsTerminalError):
    """Configuration could not be loaded or failed validation."""

    def __init__(self, message: str, path: Optional[str] = None,
                 errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path
        self.errors = errors or []
