"""
Contact Request DTOs

DTOs for contact-related API requests.
"""

from pydantic import BaseModel, Field
from typing import Optional


class ContactRequest(BaseModel):
    """
    Request DTO for registering a contact.

    Fields are optional at the wire level so missing values reach the
    request validator and are reported with its messages.
    """

    name: Optional[str] = Field(None, description="Contact name")
    email: Optional[str] = Field(None, description="Contact email address")

    class Config:
        """Pydantic configuration."""
        frozen = True
        json_schema_extra = {
            "example": {
                "name": "John Doe",
                "email": "john.doe@example.com"
            }
        }
