"""Tests for LINE profile parsing and the single profile GET."""

import json

import httpx
import pytest

from line_auth import (
    LineProfile,
    ParseError,
    ProfileFetchError,
    ProfileParseError,
    TransportError,
    fetch_profile,
    parse_profile,
)

PROFILE_URL = "https://api.line.me/v2/profile"
FULL_BODY = '{"userId":"U1","displayName":"Ada","pictureUrl":"http://x/p.png","statusMessage":"hi"}'


class FakeHTTPClient:
    """Stands in for the OAuth2 client: records calls and answers with a canned response or error."""

    def __init__(self, status_code: int = 200, body: str = "{}", error: Exception = None):
        self.status_code = status_code
        self.body = body
        self.error = error
        self.calls = []

    async def get(self, url, token, **kwargs):
        self.calls.append((url, token))
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.body, request=httpx.Request("GET", url))


def test_parse_full_profile():
    profile = parse_profile(FULL_BODY)

    assert profile.provider == "line"
    assert profile.id == "U1"
    assert profile.display_name == "Ada"
    assert profile.picture_url == "http://x/p.png"
    assert profile.status_message == "hi"
    assert profile.raw == FULL_BODY
    assert profile.parsed == json.loads(FULL_BODY)


def test_parse_partial_profile_leaves_missing_fields_absent():
    profile = parse_profile('{"userId":"U2"}')

    assert profile.id == "U2"
    assert profile.display_name is None
    assert profile.picture_url is None
    assert profile.status_message is None


def test_unknown_fields_only_kept_in_parsed():
    profile = parse_profile('{"userId":"U3","language":"ja"}')

    assert profile.parsed["language"] == "ja"
    assert "language" not in profile.to_dict(include_raw=False)


@pytest.mark.parametrize("body", ["not json", "", "<html>oops</html>"])
def test_parse_rejects_non_json(body):
    with pytest.raises(ProfileParseError) as exc_info:
        parse_profile(body)

    assert isinstance(exc_info.value.__cause__, ValueError)
    assert exc_info.value.body == body


@pytest.mark.parametrize("body", ["null", "[]", '"U1"', "42"])
def test_parse_rejects_non_object(body):
    with pytest.raises(ProfileParseError):
        parse_profile(body)


def test_to_dict_matches_normalized_shape():
    profile = parse_profile(FULL_BODY)

    assert profile.to_dict(include_raw=True) == {
        "provider": "line",
        "id": "U1",
        "displayName": "Ada",
        "pictureUrl": "http://x/p.png",
        "statusMessage": "hi",
        "rawBody": FULL_BODY,
        "rawParsed": json.loads(FULL_BODY),
    }


def test_error_aliases():
    assert TransportError is ProfileFetchError
    assert ParseError is ProfileParseError


@pytest.mark.asyncio
async def test_fetch_profile_success():
    client = FakeHTTPClient(body=FULL_BODY)

    profile = await fetch_profile("access-token", PROFILE_URL, client)

    assert isinstance(profile, LineProfile)
    assert profile.id == "U1"
    assert client.calls == [(PROFILE_URL, {"access_token": "access-token", "token_type": "Bearer"})]


@pytest.mark.asyncio
async def test_fetch_profile_passes_token_dict_through():
    client = FakeHTTPClient(body=FULL_BODY)
    token = {"access_token": "abc", "token_type": "Bearer", "refresh_token": "r"}

    await fetch_profile(token, PROFILE_URL, client)

    assert client.calls[0][1] is token


@pytest.mark.asyncio
async def test_fetch_profile_network_error():
    cause = httpx.ConnectError("connection refused")
    client = FakeHTTPClient(error=cause)

    with pytest.raises(ProfileFetchError, match="failed to fetch user profile") as exc_info:
        await fetch_profile("access-token", PROFILE_URL, client)

    assert exc_info.value.__cause__ is cause
    assert exc_info.value.status_code is None
    assert len(client.calls) == 1


@pytest.mark.asyncio
async def test_fetch_profile_http_error_does_not_parse_body():
    client = FakeHTTPClient(status_code=401, body='{"message":"invalid token"}')

    with pytest.raises(ProfileFetchError) as exc_info:
        await fetch_profile("expired", PROFILE_URL, client)

    assert exc_info.value.status_code == 401
    assert exc_info.value.body == '{"message":"invalid token"}'
    assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)
    assert len(client.calls) == 1


@pytest.mark.asyncio
async def test_fetch_profile_non_json_body():
    client = FakeHTTPClient(body="<html>maintenance</html>")

    with pytest.raises(ProfileParseError):
        await fetch_profile("access-token", PROFILE_URL, client)

    assert len(client.calls) == 1
