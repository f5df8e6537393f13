# =============================================================================
# app/routers/courses.py - Course Endpoints
# =============================================================================
# Courses offered by the school, grouped by category and ordered by
# sort_order. Returned whole (no pagination).
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, status

from app.auth import get_current_session
from app.dependencies import SupabaseDep
from core.models.auth import AuthSession
from core.models.content import CourseCreate, CourseUpdate
from core.services.content_service import COURSES, ContentService

router = APIRouter()


@router.get("")
async def list_courses(
    db: SupabaseDep,
    published_only: Annotated[bool, Query(alias="publishedOnly", description="Only published courses")] = False,
    category: Annotated[str | None, Query(description="Filter by category")] = None,
):
    """
    List courses by sort_order.

    Returns {data}.
    """
    rows = ContentService.list_all(
        db,
        COURSES,
        published_only=published_only,
        category=category,
    )
    return {"data": rows}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_course(
    request: CourseCreate,
    db: SupabaseDep,
    session: AuthSession = Depends(get_current_session),
):
    """Create a course. Returns the stored row."""
    return ContentService.create(db, COURSES, request.to_row())


@router.get("/{course_id}")
async def get_course(
    course_id: Annotated[UUID, Path(description="Course UUID")],
    db: SupabaseDep,
):
    """Get a single course."""
    return ContentService.get(db, COURSES, course_id)


@router.patch("/{course_id}")
async def update_course(
    course_id: Annotated[UUID, Path(description="Course UUID")],
    request: CourseUpdate,
    db: SupabaseDep,
    session: AuthSession = Depends(get_current_session),
):
    """Update the submitted fields of a course."""
    return ContentService.update(db, COURSES, course_id, request.to_row())


@router.delete("/{course_id}")
async def delete_course(
    course_id: Annotated[UUID, Path(description="Course UUID")],
    db: SupabaseDep,
    session: AuthSession = Depends(get_current_session),
):
    """Delete a course."""
    ContentService.delete(db, COURSES, course_id)
    return {"message": "Course deleted successfully"}
