# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Provides dependency injection for authentication.
#
# The session is looked up through Supabase Auth with the request's tokens
# (see app/session.py). Write routes depend on get_current_session and
# get a 401 before any database work happens.
#
# Usage:
#   from app.auth import get_current_session
#
#   @router.post("")
#   async def create(session: AuthSession = Depends(get_current_session)):
#       ...
# =============================================================================

import logging
from app.dependencies import SupabaseDep
from app.exceptions import UnauthorizedError
from core.models.auth import AuthSession

logger = logging.getLogger(__name__)


async def get_current_session(db: SupabaseDep) -> AuthSession:
    """
    Require an authenticated Supabase session.

    Returns:
        AuthSession: The caller's session

    Raises:
        UnauthorizedError: 401 if there is no valid session
    """
    session = db.get_session()

    if session is None:
        logger.debug("Rejected request without a session")
        raise UnauthorizedError()

    return session

