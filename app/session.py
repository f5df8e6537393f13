# =============================================================================
# app/session.py - Session Cookie Handling
# =============================================================================
# The session travels as two cookies (access + refresh token). API clients
# that don't use cookies may send the access token as a Bearer header
# instead.
# =============================================================================

import logging
import time

from fastapi import Request, Response
from jose import JWTError, jwt

from app.config import settings
from core.models.auth import AuthSession

logger = logging.getLogger(__name__)

ACCESS_TOKEN_COOKIE = "sb-access-token"
REFRESH_TOKEN_COOKIE = "sb-refresh-token"


def read_session_tokens(request: Request) -> tuple[str | None, str | None]:
    """
    Get (access_token, refresh_token) for a request.

    The session cookie wins over the Authorization header.
    """
    access_token = request.cookies.get(ACCESS_TOKEN_COOKIE)
    refresh_token = request.cookies.get(REFRESH_TOKEN_COOKIE)

    if not access_token:
        authorization = request.headers.get("Authorization", "")
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() == "bearer" and token:
            access_token = token.strip()

    return access_token, refresh_token


def token_expires_soon(access_token: str, margin_seconds: int) -> bool:
    """
    Check whether a JWT expires within `margin_seconds`.

    The signature is not checked here; Supabase verifies the token on every
    call. Unreadable tokens count as expired.
    """
    try:
        claims = jwt.get_unverified_claims(access_token)
    except JWTError:
        return True

    exp = claims.get("exp")
    if not isinstance(exp, (int, float)):
        return True
    return exp - time.time() <= margin_seconds


def set_session_cookies(response: Response, session: AuthSession) -> None:
    """Write the session token pair onto a response."""
    options = {
        "max_age": settings.SESSION_COOKIE_MAX_AGE,
        "path": "/",
        "httponly": True,
        "samesite": "lax",
        "secure": settings.SESSION_COOKIE_SECURE,
    }
    response.set_cookie(ACCESS_TOKEN_COOKIE, session.access_token, **options)
    if session.refresh_token:
        response.set_cookie(REFRESH_TOKEN_COOKIE, session.refresh_token, **options)


def clear_session_cookies(response: Response) -> None:
    """Remove the session cookies."""
    response.delete_cookie(ACCESS_TOKEN_COOKIE, path="/")
    response.delete_cookie(REFRESH_TOKEN_COOKIE, path="/")
