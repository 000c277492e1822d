import os

import httpx
import pytest

# main.py builds its app from the environment at import time.
os.environ.setdefault("LINE_CHANNEL_ID", "1234567890")
os.environ.setdefault("LINE_CHANNEL_SECRET", "channel-secret")
os.environ.setdefault("LINE_CALLBACK_URL", "https://app.example.com/auth/line/callback")

from line_auth import LineConfig  # noqa: E402


@pytest.fixture()
def line_config() -> LineConfig:
    return LineConfig(
        channel_id="1234567890",
        channel_secret="channel-secret",
        callback_url="https://app.example.com/auth/line/callback",
    )


@pytest.fixture()
def profile_requests():
    """Requests seen by the mocked LINE profile endpoint."""
    return []


@pytest.fixture()
def profile_transport(profile_requests):
    """Build an httpx MockTransport answering every request with the given status/body."""

    def _build(status_code: int = 200, body: str = "{}"):
        def handler(request: httpx.Request) -> httpx.Response:
            profile_requests.append(request)
            return httpx.Response(status_code, text=body)

        return httpx.MockTransport(handler)

    return _build
