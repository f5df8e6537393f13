# =============================================================================
# core/services/contact_service.py - Contact Message Logic
# =============================================================================
# Anyone may submit a message; reading and managing the inbox needs an
# admin session (enforced by the router and by RLS on contact_messages).
# =============================================================================

import logging
from typing import Any, Literal
from uuid import UUID

from app.exceptions import ContentNotFoundError
from core.models.contact import ContactMessageCreate
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)

CONTACT_TABLE = "contact_messages"

StatusFilter = Literal["all", "responded", "pending"]


class ContactService:
    """Service for the contact_messages table."""

    @staticmethod
    def submit(db: SupabaseClient, message: ContactMessageCreate) -> None:
        """Store a contact form submission."""
        db.append_row(CONTACT_TABLE, message.to_row())
        logger.info(f"Contact message received from {message.email}")

    @staticmethod
    def list_messages(db: SupabaseClient, status: StatusFilter = "all") -> list[dict[str, Any]]:
        """Messages newest first, optionally only responded or pending ones."""
        filters = {}
        if status != "all":
            filters["responded"] = status == "responded"

        rows, _ = db.select_rows(
            CONTACT_TABLE,
            filters=filters,
            order_by="created_at",
            ascending=False,
        )
        return rows

    @staticmethod
    def set_responded(db: SupabaseClient, message_id: str | UUID, responded: bool) -> dict[str, Any]:
        """
        Mark one message as responded or pending.

        Raises:
            ContentNotFoundError: If no message has that ID
        """
        message_id = str(message_id)
        row = db.update_row(CONTACT_TABLE, message_id, {"responded": responded})
        if not row:
            raise ContentNotFoundError("Message", message_id)
        return row

    @staticmethod
    def delete(db: SupabaseClient, message_id: str | UUID) -> None:
        db.delete_row(CONTACT_TABLE, str(message_id))

    @staticmethod
    def bulk_set_responded(db: SupabaseClient, message_ids: list[UUID], responded: bool) -> int:
        """Returns the number of messages actually updated."""
        rows = db.update_rows(CONTACT_TABLE, [str(i) for i in message_ids], {"responded": responded})
        return len(rows)

    @staticmethod
    def bulk_delete(db: SupabaseClient, message_ids: list[UUID]) -> int:
        ids = [str(i) for i in message_ids]
        db.delete_rows(CONTACT_TABLE, ids)
        return len(ids)
