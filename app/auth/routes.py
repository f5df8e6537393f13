# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# API endpoints for the admin session: who am I, sign in, sign out.
# Sign-in exchanges email/password for a Supabase session and stores the
# token pair in cookies; every later request is authenticated from them.
# =============================================================================

import logging

from fastapi import APIRouter, Response, status
from fastapi.responses import JSONResponse

from app.auth.models import AuthStatusResponse, LoginRequest
from app.dependencies import SupabaseDep
from app.exceptions import InvalidCredentialsError
from app.session import clear_session_cookies, set_session_cookies
from lib.supabase_client import SupabaseClientError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user_info(db: SupabaseDep):
    """
    Get the current user.

    Returns:
        {"user": {...}, "authenticated": true}

    Raises:
        401: With {"user": null, "authenticated": false} if not signed in
    """
    session = db.get_session()

    if session is None:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={
                "user": None,
                "authenticated": False,
                "message": "User not authenticated",
            },
        )

    return AuthStatusResponse(user=session.user, authenticated=True)


@router.post("/login", response_model=AuthStatusResponse)
async def login(request: LoginRequest, response: Response, db: SupabaseDep):
    """
    Sign in with email and password.

    Sets the session cookies on success.

    Raises:
        401: If Supabase rejects the credentials
    """
    try:
        session = db.sign_in(request.email, request.password)
    except SupabaseClientError as e:
        logger.warning(f"Sign-in failed for {request.email}: {e.message}")
        raise InvalidCredentialsError(e.message)

    set_session_cookies(response, session)
    return AuthStatusResponse(user=session.user, authenticated=True)


@router.post("/logout", response_model=AuthStatusResponse)
async def logout(response: Response, db: SupabaseDep):
    """
    Sign out.

    The session cookies are cleared even if Supabase can't be reached to
    revoke the session.
    """
    try:
        db.sign_out()
    except SupabaseClientError as e:
        logger.warning(f"Could not revoke session on sign-out: {e.message}")

    clear_session_cookies(response)
    return AuthStatusResponse(user=None, authenticated=False)
