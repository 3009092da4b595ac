"""
API error classifications.

Request errors (network failures, timeouts, server errors) are transient and
retried by the client. Response and parse errors are permanent.
"""

from typing import Optional

from .system import SportsTerminalError


class ApiError(SportsTerminalError):
    """Base class for ESPN API failures."""

    def __init__(self, message: str, url: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.url = url


class ApiRequestError(ApiError):
    """Transient failure: network error, timeout or HTTP 5xx."""

    def __init__(self, message: str, status_code: Optional[int] = None,
                 attempts: int = 1, **kwargs):
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.attempts = attempts
        self.recoverable = True


class ApiResponseError(ApiError):
    """Permanent HTTP failure (4xx)."""

    def __init__(self, message: str, status_code: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.status_code = status_code


class ApiParseError(ApiError):
    """Response body is not valid JSON or not the expected shape."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format
