# =============================================================================
# app/routers/teachers.py - Teacher Endpoints
# =============================================================================
# Teacher profiles shown on the staff page, ordered by sort_order.
# The list is short, so it's returned whole (no pagination).
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, status

from app.auth import get_current_session
from app.dependencies import SupabaseDep
from core.models.auth import AuthSession
from core.models.content import TeacherCreate, TeacherUpdate
from core.services.content_service import TEACHERS, ContentService

router = APIRouter()


@router.get("")
async def list_teachers(
    db: SupabaseDep,
    published_only: Annotated[bool, Query(alias="publishedOnly", description="Only published profiles")] = False,
):
    """List teachers by sort_order. Returns {data}."""
    return {"data": ContentService.list_all(db, TEACHERS, published_only=published_only)}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_teacher(
    request: TeacherCreate,
    db: SupabaseDep,
    session: AuthSession = Depends(get_current_session),
):
    return ContentService.create(db, TEACHERS, request.to_row())


@router.get("/{teacher_id}")
async def get_teacher(
    teacher_id: Annotated[UUID, Path(description="Teacher UUID")],
    db: SupabaseDep,
):
    return ContentService.get(db, TEACHERS, teacher_id)


@router.patch("/{teacher_id}")
async def update_teacher(
    teacher_id: Annotated[UUID, Path(description="Teacher UUID")],
    request: TeacherUpdate,
    db: SupabaseDep,
    session: AuthSession = Depends(get_current_session),
):
    return ContentService.update(db, TEACHERS, teacher_id, request.to_row())


@router.delete("/{teacher_id}")
async def delete_teacher(
    teacher_id: Annotated[UUID, Path(description="Teacher UUID")],
    db: SupabaseDep,
    session: AuthSession = Depends(get_current_session),
):
    ContentService.delete(db, TEACHERS, teacher_id)
    return {"message": "Teacher deleted successfully"}
