# =============================================================================
# app/routers/contacts.py - Contact Message Endpoints
# =============================================================================
# POST is the public contact form; everything else is the admin inbox and
# requires a signed-in admin.
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, status

from app.auth import get_current_session
from app.dependencies import SupabaseDep
from core.models.auth import AuthSession
from core.models.contact import (
    ContactBulkDelete,
    ContactBulkUpdate,
    ContactMessageCreate,
    ContactStatusUpdate,
)
from core.services.contact_service import ContactService, StatusFilter

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
async def submit_message(request: ContactMessageCreate, db: SupabaseDep):
    """
    Submit the public contact form.

    No session needed. The stored row is not returned.
    """
    ContactService.submit(db, request)
    return {"message": "Message sent successfully"}


@router.get("")
async def list_messages(
    db: SupabaseDep,
    session: AuthSession = Depends(get_current_session),
    status_filter: Annotated[StatusFilter, Query(alias="status", description="all, responded or pending")] = "all",
):
    """List messages, newest first. Returns {data}."""
    return {"data": ContactService.list_messages(db, status_filter)}


@router.post("/bulk-update")
async def bulk_update_messages(
    request: ContactBulkUpdate,
    db: SupabaseDep,
    session: AuthSession = Depends(get_current_session),
):
    """Mark the selected messages as responded or pending."""
    updated = ContactService.bulk_set_responded(db, request.ids, request.responded)
    return {"updated": updated}


@router.post("/bulk-delete")
async def bulk_delete_messages(
    request: ContactBulkDelete,
    db: SupabaseDep,
    session: AuthSession = Depends(get_current_session),
):
    deleted = ContactService.bulk_delete(db, request.ids)
    return {"deleted": deleted, "message": f"{deleted} message(s) deleted successfully"}


@router.patch("/{message_id}")
async def update_message_status(
    message_id: Annotated[UUID, Path(description="Message UUID")],
    request: ContactStatusUpdate,
    db: SupabaseDep,
    session: AuthSession = Depends(get_current_session),
):
    """Mark one message as responded or pending."""
    return ContactService.set_responded(db, message_id, request.responded)


@router.delete("/{message_id}")
async def delete_message(
    message_id: Annotated[UUID, Path(description="Message UUID")],
    db: SupabaseDep,
    session: AuthSession = Depends(get_current_session),
):
    ContactService.delete(db, message_id)
    return {"message": "Message deleted successfully"}
