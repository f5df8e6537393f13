# =============================================================================
# app/routers/news.py - News Endpoints
# =============================================================================
# List (paginated), read, create, update and delete news items.
# Reads are public; writes require a signed-in admin.
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, status

from app.auth import get_current_session
from app.dependencies import SupabaseDep
from core.models.auth import AuthSession
from core.models.content import NewsCreate, NewsUpdate
from core.services.content_service import NEWS, ContentService

router = APIRouter()


@router.get("")
async def list_news(
    db: SupabaseDep,
    limit: Annotated[int, Query(ge=1, le=100, description="Items per page")] = 10,
    page: Annotated[int, Query(ge=1, description="Page number")] = 1,
    published_only: Annotated[bool, Query(alias="publishedOnly", description="Only published items")] = False,
    category: Annotated[str | None, Query(description="Filter by category")] = None,
):
    """
    List news items, newest first.

    Returns {data, count, pagination: {page, limit, totalPages}}.
    """
    return ContentService.list_page(
        db,
        NEWS,
        page=page,
        limit=limit,
        published_only=published_only,
        category=category,
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_news(
    request: NewsCreate,
    db: SupabaseDep,
    session: AuthSession = Depends(get_current_session),
):
    """Create a news item. Returns the stored row."""
    return ContentService.create(db, NEWS, request.to_row())


@router.get("/{news_id}")
async def get_news(
    news_id: Annotated[UUID, Path(description="News item UUID")],
    db: SupabaseDep,
):
    """Get a single news item."""
    return ContentService.get(db, NEWS, news_id)


@router.patch("/{news_id}")
async def update_news(
    news_id: Annotated[UUID, Path(description="News item UUID")],
    request: NewsUpdate,
    db: SupabaseDep,
    session: AuthSession = Depends(get_current_session),
):
    """Update the submitted fields of a news item."""
    return ContentService.update(db, NEWS, news_id, request.to_row())


@router.delete("/{news_id}")
async def delete_news(
    news_id: Annotated[UUID, Path(description="News item UUID")],
    db: SupabaseDep,
    session: AuthSession = Depends(get_current_session),
):
    """Delete a news item."""
    ContentService.delete(db, NEWS, news_id)
    return {"message": "News item deleted successfully"}
