"""
Release verification failures.

All of these fail closed: a release that cannot be verified is treated as
not installable.
"""

from typing import Optional

from .system import SportsTerminalError


class ReleaseError(SportsTerminalError):
    """Base class for release recipe and verification failures."""


class RecipeError(ReleaseError):
    """Recipe file is missing fields or does not match the package version."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field


class ChecksumError(ReleaseError):
    """Archive checksum is unset or does not match the declared value."""

    def __init__(self, message: str, expected: Optional[str] = None,
                 actual: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.expected = expected
        self.actual = actual


class SmokeTestError(ReleaseError):
    """Installed command did not fail the expected way when run bare."""

    def __init__(self, message: str, exit_code: Optional[int] = None,
                 output: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.exit_code = exit_code
        self.output = output
