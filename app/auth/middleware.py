# =============================================================================
# app/auth/middleware.py - Session Refresh Gate
# =============================================================================
# Runs in front of every admin path. When the access token in the cookies
# is missing or about to expire and a refresh token is present, the session
# is refreshed through Supabase and the new tokens are written back as
# cookies on the response.
#
# The gate never blocks a request. Authorization is left to each route's
# session check and to Row Level Security in Supabase.
# =============================================================================

import logging
import re

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.config import settings
from app.session import (
    ACCESS_TOKEN_COOKIE,
    REFRESH_TOKEN_COOKIE,
    read_session_tokens,
    set_session_cookies,
    token_expires_soon,
)
from core.models.auth import AuthSession
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)


def _gated_path_pattern(locales: list[str]) -> re.Pattern:
    """/admin..., /{locale}/admin... and /api/admin..."""
    locale_group = "|".join(re.escape(loc) for loc in locales)
    return re.compile(rf"^(?:/(?:{locale_group}))?(?:/api)?/admin(?:/|$)", re.IGNORECASE)


def refresh_if_needed(request: Request) -> AuthSession | None:
    """
    Refresh the request's session when its access token is stale.

    Returns:
        The new session, or None if no refresh was needed or possible
    """
    access_token, refresh_token = read_session_tokens(request)

    if not refresh_token:
        return None

    if access_token and not token_expires_soon(access_token, settings.SESSION_REFRESH_MARGIN_SECONDS):
        return None

    db = SupabaseClient(access_token=access_token, refresh_token=refresh_token)
    session = db.refresh_session(refresh_token)
    logger.info(f"Refreshed session for user {session.user_id}")
    return session


def _forward_session(request: Request, session: AuthSession) -> None:
    """Rewrite the request's cookie header so the route sees the new tokens."""
    cookies = dict(request.cookies)
    cookies[ACCESS_TOKEN_COOKIE] = session.access_token
    if session.refresh_token:
        cookies[REFRESH_TOKEN_COOKIE] = session.refresh_token

    cookie_header = "; ".join(f"{name}={value}" for name, value in cookies.items())
    headers = [(k, v) for k, v in request.scope["headers"] if k != b"cookie"]
    headers.append((b"cookie", cookie_header.encode("latin-1")))
    request.scope["headers"] = headers


class AuthGateMiddleware(BaseHTTPMiddleware):
    """
    Keeps admin sessions fresh.

    Errors while refreshing are logged and the request continues with
    whatever cookies it came with.
    """

    def __init__(self, app, locales: list[str] | None = None):
        super().__init__(app)
        self.pattern = _gated_path_pattern(locales or settings.supported_locales_list)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if not self.pattern.match(request.url.path):
            return await call_next(request)

        session = None
        try:
            session = refresh_if_needed(request)
            if session is not None:
                _forward_session(request, session)
        except Exception as e:
            logger.warning(f"Session refresh failed for {request.url.path}: {e}")

        response = await call_next(request)

        if session is not None:
            set_session_cookies(response, session)
        return response
