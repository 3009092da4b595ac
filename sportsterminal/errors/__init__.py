"""
Error classification for sportsterminal.

This module provides a structured exception hierarchy for the failures the
application distinguishes: API access, terminal setup, configuration and
release verification.
"""

from .api import (
    ApiError,
    ApiParseError,
    ApiRequestError,
    ApiResponseError,
)
from .system import (
    ConfigError,
    SportsTerminalError,
    TerminalError,
)
from .release import (
    ChecksumError,
    RecipeError,
    ReleaseError,
    SmokeTestError,
)

__all__ = [
    # Base
    "SportsTerminalError",
    # API
    "ApiError",
    "ApiRequestError",
    "ApiResponseError",
    "ApiParseError",
    # System
    "TerminalError",
    "ConfigError",
    # Release
    "ReleaseError",
    "ChecksumError",
    "RecipeError",
    "SmokeTestError",
]
