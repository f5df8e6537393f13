# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication requests and responses.
# =============================================================================

from typing import Any, Optional

from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    """Email/password sign-in submitted by the admin login form."""
    email: EmailStr
    password: str = Field(..., min_length=1)


class AuthStatusResponse(BaseModel):
    """
    Response of /auth/me, /auth/login and /auth/logout.

    `user` is the Supabase user record, or None when signed out.
    """
    user: Optional[dict[str, Any]] = None
    authenticated: bool
    message: Optional[str] = None
