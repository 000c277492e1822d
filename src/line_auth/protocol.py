"""
Protocols shared by the LINE adapter.

OAuthProvider is what a host application talks to (redirect to the IdP, handle
the callback, fetch a profile). ProfileHTTPClient is the slice of the OAuth2
client used for the profile request: an authenticated GET returning an httpx response.
"""

from typing import TYPE_CHECKING, Any, Awaitable, Callable, Optional, Protocol, Union, runtime_checkable

import httpx

if TYPE_CHECKING:
    from line_auth.profile import LineProfile

# verify(access_token, refresh_token, profile) -> user (falsy to reject), sync or async
VerifyCallback = Callable[[str, Optional[str], "LineProfile"], Union[Any, Awaitable[Any]]]


@runtime_checkable
class ProfileHTTPClient(Protocol):
    """Anything that can issue a GET carrying an OAuth2 token (e.g. an Authlib client app)."""

    async def get(self, url: str, token: dict, **kwargs) -> httpx.Response:
        ...


@runtime_checkable
class OAuthProvider(Protocol):
    """Protocol for an OAuth provider strategy (e.g. LINE)."""

    name: str

    async def login_redirect(self, request, redirect_uri: Optional[str] = None):
        """Redirect the user to the identity provider login page."""
        ...

    async def authenticate(self, request) -> Any:
        """Handle the OAuth callback: exchange code for token, fetch the profile, run verify."""
        ...

    async def user_profile(self, access_token: Union[str, dict]) -> "LineProfile":
        """Fetch and normalize the user's profile with an access token."""
        ...
