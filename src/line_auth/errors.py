"""
Errors raised by the LINE adapter.

Transport and parse failures are kept apart so the host can tell a LINE outage
from a malformed profile payload. Underlying causes are chained with `raise ... from`.
"""

from typing import Optional


class LineAuthError(Exception):
    """Base class for LINE adapter errors."""


class ConfigurationError(LineAuthError, ValueError):
    """Raised when the channel credentials or endpoint URLs are unusable."""


class ProfileFetchError(LineAuthError):
    """Raised when the profile endpoint could not be reached or answered non-2xx."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ProfileParseError(LineAuthError):
    """Raised when the profile body is not a JSON object."""

    def __init__(self, message: str, body: Optional[str] = None):
        super().__init__(message)
        self.body = body


TransportError = ProfileFetchError
ParseError = ProfileParseError
