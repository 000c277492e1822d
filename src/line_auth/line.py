"""
LINE Login OAuth provider.

Uses Authlib for the OAuth2 authorization-code flow (redirect, state check,
token exchange) and LINE's profile API for user data. The strategy holds an
Authlib OAuth registry rather than extending it: configure() registers the
"line" client with LINE's endpoints, and user_profile() issues the profile GET
through that client with the token in an Authorization: Bearer header.
"""

import inspect
import logging
from typing import Any, Optional, Union

from authlib.integrations.starlette_client import OAuth

from line_auth.config import LineConfig
from line_auth.profile import PROVIDER_NAME, LineProfile, fetch_profile
from line_auth.protocol import OAuthProvider, VerifyCallback

logger = logging.getLogger(__name__)


class LineStrategy(OAuthProvider):
    """OAuth provider that authenticates through LINE Login and normalizes the LINE profile."""

    name: str = PROVIDER_NAME

    def __init__(
        self,
        config: LineConfig,
        verify: Optional[VerifyCallback] = None,
        oauth: Optional[OAuth] = None,
        client_kwargs: Optional[dict] = None,
    ):
        """
        Store the channel config and register the LINE client on the Authlib registry.

        verify(access_token, refresh_token, profile) is the host's hook for mapping a
        LINE profile to an application user; client_kwargs are passed through to the
        httpx-based OAuth2 client (timeout, transport, ...).
        """
        self.name = PROVIDER_NAME
        self.config = config
        self.verify = verify
        self.oauth = oauth or OAuth()
        self.client_kwargs = dict(client_kwargs or {})
        self.client = None
        self.configure()

    def configure(self):
        """
        Register the LINE client on the Authlib registry and return it.

        Authlib caches clients by name, so a client left by an earlier registration
        (e.g. another channel on a shared registry) is dropped first.
        """
        kwargs = {
            # LINE's profile API only accepts the token as a Bearer header
            "token_placement": "header",
            # LINE's token endpoint expects client_id/client_secret in the form body
            "token_endpoint_auth_method": "client_secret_post",
        }
        if self.config.scope:
            kwargs["scope"] = self.config.scope
        kwargs.update(self.client_kwargs)

        self.oauth._clients.pop(self.name, None)
        self.client = self.oauth.register(
            name=self.name,
            client_id=self.config.client_id,
            client_secret=self.config.client_secret,
            authorize_url=self.config.authorization_url,
            access_token_url=self.config.token_url,
            client_kwargs=kwargs,
        )
        return self.client

    async def login_redirect(self, request, redirect_uri: Optional[str] = None):
        """Return RedirectResponse to LINE's authorization page."""
        return await self.client.authorize_redirect(request, redirect_uri or self.config.callback_url)

    async def user_profile(self, access_token: Union[str, dict]) -> LineProfile:
        """Fetch the LINE profile for access_token and return it normalized."""
        return await fetch_profile(access_token, self.config.profile_url, self.client)

    async def authenticate(self, request) -> Any:
        """
        Finish the login on the callback request.

        Exchanges the authorization code (Authlib validates state and raises
        OAuthError on failure), fetches the profile and hands it to verify.
        Returns what verify returns, or the profile when no verify was given.
        """
        token = await self.client.authorize_access_token(request)
        profile = await self.user_profile(token["access_token"])

        if self.verify is None:
            return profile

        user = self.verify(token["access_token"], token.get("refresh_token"), profile)
        if inspect.isawaitable(user):
            user = await user
        if not user:
            logger.info(f"LINE user rejected by verify callback | user_id={profile.id}")
        return user
