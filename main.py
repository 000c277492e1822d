"""
FastAPI demo host: LINE Login through the line_auth adapter.

Decisions:
- .env is loaded before importing line_auth so LINE_* and SESSION_SECRET are
  available when the strategy is created (Ruff E402 suppressed for that).
- The adapter owns nothing web-facing; routes and the session live here.
  Authlib keeps its OAuth state in the same Starlette session.
- Session secret from SESSION_SECRET env; default "change-me" is for dev only.
"""

import os

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.middleware.sessions import SessionMiddleware

load_dotenv()

# Load .env before line_auth so LINE_* and SESSION_SECRET are set; Ruff E402.
from authlib.integrations.starlette_client import OAuthError  # noqa: E402

from line_auth import LineAuthError, LineConfig, LineProfile, LineStrategy  # noqa: E402

SESSION_SECRET = os.getenv("SESSION_SECRET", "change-me")


def verify(access_token: str, refresh_token, profile: LineProfile):
    """Accept every LINE user; a real host would look up or create its own user here."""
    return profile.to_dict()


def create_app(strategy: LineStrategy) -> FastAPI:
    """Build the demo app around a configured LINE strategy."""
    app = FastAPI()
    app.add_middleware(SessionMiddleware, secret_key=SESSION_SECRET)

    @app.get("/")
    async def home(request: Request):
        user = request.session.get("user")
        return {"logged_in": bool(user), "user": user}

    @app.get("/login")
    async def login(request: Request):
        """Redirect the user to LINE's login page."""
        return await strategy.login_redirect(request)

    @app.get("/auth/line/callback", name="line_callback")
    async def line_callback(request: Request):
        """Finish the LINE login and keep the normalized profile in the session."""
        try:
            user = await strategy.authenticate(request)
        except (OAuthError, LineAuthError) as e:
            return JSONResponse({"error": str(e)}, status_code=400)

        if not user:
            return JSONResponse({"error": "LINE user rejected"}, status_code=401)

        request.session["user"] = user
        return RedirectResponse(url="/")

    @app.get("/logout")
    async def logout(request: Request):
        """Clear session and redirect to home."""
        request.session.clear()
        return RedirectResponse(url="/")

    return app


# Raises ConfigurationError naming the missing LINE_* setting.
app = create_app(LineStrategy(LineConfig.from_env(), verify))
