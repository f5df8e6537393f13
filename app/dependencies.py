# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

import logging
from typing import Annotated

from fastapi import Depends, Request, Response

from app.config import settings
from app.session import read_session_tokens, set_session_cookies, token_expires_soon
from core.models.auth import AuthSession
from lib.supabase_client import SupabaseClient, SupabaseClientError

logger = logging.getLogger(__name__)


def _renew_session(refresh_token: str | None) -> AuthSession | None:
    """Exchange a refresh token for a new session, or None if that's not possible."""
    if not refresh_token:
        return None

    try:
        return SupabaseClient(refresh_token=refresh_token).refresh_session(refresh_token)
    except SupabaseClientError as e:
        logger.info(f"Could not renew stale session: {e.message}")
        return None


def get_supabase_client(request: Request, response: Response) -> SupabaseClient:
    """
    Get a Supabase client scoped to the current request.

    The client carries the caller's session tokens, so every query runs
    with their permissions. A stale access token is renewed with the
    refresh token (and the new cookies are sent back); when it can't be
    renewed the request continues anonymously, so public reads still work.
    """
    access_token, refresh_token = read_session_tokens(request)

    if access_token and token_expires_soon(access_token, settings.SESSION_REFRESH_MARGIN_SECONDS):
        session = _renew_session(refresh_token)
        if session is None:
            return SupabaseClient()

        set_session_cookies(response, session)
        return SupabaseClient(access_token=session.access_token, refresh_token=session.refresh_token)

    return SupabaseClient(access_token=access_token, refresh_token=refresh_token)


SupabaseDep = Annotated[SupabaseClient, Depends(get_supabase_client)]
