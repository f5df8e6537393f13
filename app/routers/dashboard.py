# =============================================================================
# app/routers/dashboard.py - Admin Dashboard Endpoints
# =============================================================================
# Summary numbers for the admin dashboard.
# =============================================================================

from fastapi import APIRouter, Depends

from app.auth import get_current_session
from app.dependencies import SupabaseDep
from core.models.auth import AuthSession
from core.services.content_service import ContentService

router = APIRouter()


@router.get("/stats")
async def get_stats(
    db: SupabaseDep,
    session: AuthSession = Depends(get_current_session),
):
    """
    Row counts for each content table.

    Counts include unpublished (draft) rows.
    """
    counts = ContentService.counts(db)
    return {
        "newsCount": counts["news"],
        "achievementsCount": counts["achievements"],
        "teachersCount": counts["teachers"],
        "coursesCount": counts["courses"],
    }
