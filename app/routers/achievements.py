# =============================================================================
# app/routers/achievements.py - Achievement Endpoints
# =============================================================================
# List (paginated, filterable by category), read, create, update and
# delete student achievements.
# Reads are public; writes require a signed-in admin.
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, status

from app.auth import get_current_session
from app.dependencies import SupabaseDep
from core.models.auth import AuthSession
from core.models.content import AchievementCreate, AchievementUpdate
from core.services.content_service import ACHIEVEMENTS, ContentService

router = APIRouter()


@router.get("")
async def list_achievements(
    db: SupabaseDep,
    limit: Annotated[int, Query(ge=1, le=100, description="Items per page")] = 10,
    page: Annotated[int, Query(ge=1, description="Page number")] = 1,
    published_only: Annotated[bool, Query(alias="publishedOnly", description="Only published achievements")] = False,
    category: Annotated[str | None, Query(description="Filter by category")] = None,
):
    """
    List achievements, most recent first.

    Returns {data, count, pagination: {page, limit, totalPages}}.
    """
    return ContentService.list_page(
        db,
        ACHIEVEMENTS,
        page=page,
        limit=limit,
        published_only=published_only,
        category=category,
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_achievement(
    request: AchievementCreate,
    db: SupabaseDep,
    session: AuthSession = Depends(get_current_session),
):
    """Create an achievement. Returns the stored row."""
    return ContentService.create(db, ACHIEVEMENTS, request.to_row())


@router.get("/{achievement_id}")
async def get_achievement(
    achievement_id: Annotated[UUID, Path(description="Achievement UUID")],
    db: SupabaseDep,
):
    """Get a single achievement."""
    return ContentService.get(db, ACHIEVEMENTS, achievement_id)


@router.patch("/{achievement_id}")
async def update_achievement(
    achievement_id: Annotated[UUID, Path(description="Achievement UUID")],
    request: AchievementUpdate,
    db: SupabaseDep,
    session: AuthSession = Depends(get_current_session),
):
    """Update the submitted fields of an achievement."""
    return ContentService.update(db, ACHIEVEMENTS, achievement_id, request.to_row())


@router.delete("/{achievement_id}")
async def delete_achievement(
    achievement_id: Annotated[UUID, Path(description="Achievement UUID")],
    db: SupabaseDep,
    session: AuthSession = Depends(get_current_session),
):
    """Delete an achievement."""
    ContentService.delete(db, ACHIEVEMENTS, achievement_id)
    return {"message": "Achievement deleted successfully"}
