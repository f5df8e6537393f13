# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Cookie-based sessions backed by Supabase Auth.
#
# Usage:
#   from app.auth import get_current_session
#
#   @router.post("/protected")
#   async def protected(session: AuthSession = Depends(get_current_session)):
#       return {"user_id": session.user_id}
# =============================================================================

from app.auth.dependencies import get_current_session
from app.auth.models import AuthStatusResponse, LoginRequest

__all__ = [
    "get_current_session",
    "AuthStatusResponse",
    "LoginRequest",
]
