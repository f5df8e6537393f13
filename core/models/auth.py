# =============================================================================
# core/models/auth.py - Session Schemas
# =============================================================================
# A Supabase Auth session reduced to what the API needs: who the user is
# and the token pair that goes back into the session cookies.
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AuthSession(BaseModel):
    """
    An authenticated Supabase session.

    Built by the data client from the SDK's Session object so route code
    never touches SDK types directly.
    """

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., description="Supabase auth user id")
    email: str | None = Field(default=None, description="User email, if any")
    access_token: str = Field(..., description="JWT sent with every backend call")
    refresh_token: str | None = Field(default=None, description="Token used to renew the access token")
    expires_at: int | None = Field(default=None, description="Access token expiry (unix seconds)")

    # Full user record as returned by Supabase (serialized for JSON responses)
    user: dict[str, Any] = Field(default_factory=dict)
