"""
Contact Response DTOs

DTOs for contact-related API responses.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from uuid import UUID

from domain.entities.contact import Contact


class ContactResponse(BaseModel):
    """
    Response DTO for a registered contact.

    Derived 1:1 from a Contact entity.
    """

    id: UUID = Field(description="Contact ID")
    name: str = Field(description="Contact name")
    email: str = Field(description="Contact email address")
    created_at: datetime = Field(alias="createdAt", description="Creation timestamp (UTC)")

    class Config:
        """Pydantic configuration."""
        frozen = True
        populate_by_name = True

    @classmethod
    def from_contact(cls, contact: Contact) -> "ContactResponse":
        """Build the response DTO for a contact entity."""
        return cls(
            id=contact.id.value,
            name=contact.name,
            email=contact.email,
            created_at=contact.created_at,
        )

    def to_body(self) -> dict:
        """JSON-ready body using the public field names."""
        return self.model_dump(mode="json", by_alias=True)


class ErrorResponse(BaseModel):
    """Response DTO for error bodies."""

    error: str = Field(description="Error message")
