"""
Channel configuration for the LINE adapter.

Hosts pass the LINE channel credentials and callback URL; the authorization,
token and profile endpoints fall back to LINE Login v2.1 defaults when omitted.
Options can come from a mapping using LINE's field names (channelID, channelSecret,
callbackURL, ...) or from LINE_* environment variables.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional
from urllib.parse import urlsplit

from line_auth.errors import ConfigurationError

DEFAULT_AUTHORIZATION_URL = "https://access.line.me/oauth2/v2.1/authorize"
DEFAULT_TOKEN_URL = "https://api.line.me/oauth2/v2.1/token"
DEFAULT_PROFILE_URL = "https://api.line.me/v2/profile"
DEFAULT_SCOPE = "profile"


def _is_absolute_url(url: str) -> bool:
    parts = urlsplit(url or "")
    return bool(parts.scheme and parts.netloc)


@dataclass(frozen=True)
class LineConfig:
    """Immutable channel settings handed to the OAuth2 client."""

    channel_id: str
    channel_secret: str
    callback_url: str
    authorization_url: str = DEFAULT_AUTHORIZATION_URL
    token_url: str = DEFAULT_TOKEN_URL
    profile_url: str = DEFAULT_PROFILE_URL
    scope: Optional[str] = DEFAULT_SCOPE

    def __post_init__(self):
        if not self.channel_id:
            raise ConfigurationError("LINE channel ID is required")
        if not self.channel_secret:
            raise ConfigurationError("LINE channel secret is required")
        for field_name in ("callback_url", "authorization_url", "token_url", "profile_url"):
            if not _is_absolute_url(getattr(self, field_name)):
                raise ConfigurationError(f"{field_name} must be an absolute URL")

    @property
    def client_id(self) -> str:
        return self.channel_id

    @property
    def client_secret(self) -> str:
        return self.channel_secret

    @classmethod
    def from_options(cls, options: Mapping) -> "LineConfig":
        """
        Build a config from host options keyed the way LINE names them.

        Endpoint URLs that are missing (or empty) take the LINE defaults; any
        value the host supplies is kept as-is.
        """
        return cls(
            channel_id=options.get("channelID", ""),
            channel_secret=options.get("channelSecret", ""),
            callback_url=options.get("callbackURL", ""),
            authorization_url=options.get("authorizationURL") or DEFAULT_AUTHORIZATION_URL,
            token_url=options.get("tokenURL") or DEFAULT_TOKEN_URL,
            profile_url=options.get("profileURL") or DEFAULT_PROFILE_URL,
            scope=options.get("scope", DEFAULT_SCOPE),
        )

    @classmethod
    def from_env(cls, prefix: str = "LINE_") -> "LineConfig":
        """Build a config from LINE_CHANNEL_ID, LINE_CHANNEL_SECRET, LINE_CALLBACK_URL and friends."""
        return cls.from_options(
            {
                "channelID": os.getenv(f"{prefix}CHANNEL_ID", ""),
                "channelSecret": os.getenv(f"{prefix}CHANNEL_SECRET", ""),
                "callbackURL": os.getenv(f"{prefix}CALLBACK_URL", ""),
                "authorizationURL": os.getenv(f"{prefix}AUTHORIZATION_URL"),
                "tokenURL": os.getenv(f"{prefix}TOKEN_URL"),
                "profileURL": os.getenv(f"{prefix}PROFILE_URL"),
                "scope": os.getenv(f"{prefix}SCOPE", DEFAULT_SCOPE),
            }
        )
