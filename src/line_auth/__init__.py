"""
LINE Login adapter.

Exposes the channel config (LineConfig), the Authlib-backed strategy
(LineStrategy), profile normalization (LineProfile, parse_profile,
fetch_profile) and the error types raised along the way.
"""

from .config import (
    DEFAULT_AUTHORIZATION_URL,
    DEFAULT_PROFILE_URL,
    DEFAULT_TOKEN_URL,
    LineConfig,
)
from .errors import (
    ConfigurationError,
    LineAuthError,
    ParseError,
    ProfileFetchError,
    ProfileParseError,
    TransportError,
)
from .line import LineStrategy
from .profile import LineProfile, fetch_profile, parse_profile
from .protocol import OAuthProvider, ProfileHTTPClient

__all__ = [
    "LineConfig",
    "DEFAULT_AUTHORIZATION_URL",
    "DEFAULT_TOKEN_URL",
    "DEFAULT_PROFILE_URL",
    "LineStrategy",
    "LineProfile",
    "parse_profile",
    "fetch_profile",
    "OAuthProvider",
    "ProfileHTTPClient",
    "LineAuthError",
    "ConfigurationError",
    "ProfileFetchError",
    "ProfileParseError",
    "TransportError",
    "ParseError",
]
