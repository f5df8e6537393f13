# =============================================================================
# core/models/contact.py - Contact Message Schemas
# =============================================================================
# The public contact form and the admin inbox actions on its messages.
# The subject has no column of its own; it is folded into the stored
# message text.
# =============================================================================

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ContactMessageCreate(BaseModel):
    """
    Public contact form submission.

    Example:
        {
            "name": "Ivan Petrov",
            "email": "ivan@example.com",
            "subject": "Admissions",
            "message": "When does enrolment for 8th grade open?"
        }
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    subject: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1, max_length=5000)

    def to_row(self) -> dict[str, Any]:
        """Row for the contact_messages table."""
        return {
            "name": self.name,
            "email": self.email,
            "message": f"Subject: {self.subject}\n\n{self.message}",
            "responded": False,
        }


class ContactStatusUpdate(BaseModel):
    """Mark one message as responded or pending."""
    responded: bool


class ContactBulkDelete(BaseModel):
    """Messages selected in the admin inbox."""
    ids: list[UUID] = Field(..., min_length=1, max_length=100)


class ContactBulkUpdate(ContactBulkDelete):
    """Mark the selected messages as responded or pending."""
    responded: bool
