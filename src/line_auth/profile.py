"""
LINE profile normalization.

fetch_profile issues one authenticated GET to the profile endpoint and
parse_profile maps LINE's payload (userId, displayName, pictureUrl,
statusMessage) onto a provider-agnostic LineProfile. Missing fields stay None.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Union

import httpx
from authlib.integrations.base_client import OAuthError

from line_auth.errors import ProfileFetchError, ProfileParseError
from line_auth.protocol import ProfileHTTPClient

logger = logging.getLogger(__name__)

PROVIDER_NAME = "line"


@dataclass
class LineProfile:
    """Normalized LINE user profile, with the raw body and parsed JSON kept for diagnostics."""

    id: Optional[str] = None
    display_name: Optional[str] = None
    picture_url: Optional[str] = None
    status_message: Optional[str] = None
    raw: str = ""
    parsed: dict = field(default_factory=dict)
    provider: str = PROVIDER_NAME

    def to_dict(self, include_raw: bool = False) -> dict[str, Any]:
        """Render the normalized shape (camelCase keys); raw fields only on request."""
        data = {
            "provider": self.provider,
            "id": self.id,
            "displayName": self.display_name,
            "pictureUrl": self.picture_url,
            "statusMessage": self.status_message,
        }
        if include_raw:
            data["rawBody"] = self.raw
            data["rawParsed"] = self.parsed
        return data


def parse_profile(body: str) -> LineProfile:
    """
    Parse a profile response body into a LineProfile.

    Raises ProfileParseError if the body is not JSON or not a JSON object.
    """
    try:
        payload = json.loads(body)
    except (TypeError, ValueError) as e:
        raise ProfileParseError("failed to parse user profile", body=body) from e

    if not isinstance(payload, dict):
        raise ProfileParseError(
            f"user profile must be a JSON object, got {type(payload).__name__}", body=body
        )

    return LineProfile(
        id=payload.get("userId"),
        display_name=payload.get("displayName"),
        picture_url=payload.get("pictureUrl"),
        status_message=payload.get("statusMessage"),
        raw=body,
        parsed=payload,
    )


def _as_token(access_token: Union[str, dict]) -> dict:
    if isinstance(access_token, dict):
        return access_token
    return {"access_token": access_token, "token_type": "Bearer"}


async def fetch_profile(
    access_token: Union[str, dict], profile_url: str, http_client: ProfileHTTPClient
) -> LineProfile:
    """
    GET the profile endpoint once with the access token and normalize the result.

    Network errors, token errors from the OAuth2 client and non-2xx answers raise
    ProfileFetchError without touching the body; a body that is not a JSON
    object raises ProfileParseError.
    """
    try:
        response = await http_client.get(profile_url, token=_as_token(access_token))
    except (httpx.HTTPError, OAuthError) as e:
        logger.warning(f"Profile request failed | url={profile_url} error={e.__class__.__name__}")
        raise ProfileFetchError("failed to fetch user profile") from e

    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.warning(f"Profile request rejected | url={profile_url} status={response.status_code}")
        raise ProfileFetchError(
            "failed to fetch user profile",
            status_code=response.status_code,
            body=response.text,
        ) from e

    try:
        profile = parse_profile(response.text)
    except ProfileParseError:
        logger.warning(f"Profile response is not a JSON object | url={profile_url}")
        raise

    logger.debug(f"Fetched LINE profile | user_id={profile.id}")
    return profile
