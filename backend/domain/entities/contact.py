"""
Contact Entity

The persisted contact record and its creation factory.
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from constants import EMAIL_PATTERN
from domain.value_objects.contact_id import ContactId
from exceptions import ValidationError


@dataclass(frozen=True)
class Contact:
    """
    Immutable contact entity.

    Instances built through ``create`` have passed the entity's own
    checks; the plain constructor is used when rehydrating stored records.
    """

    id: ContactId
    name: str
    email: str
    created_at: datetime

    @classmethod
    def create(cls, name: str, email: str) -> "Contact":
        """
        Create a new contact with a fresh identifier and UTC timestamp.

        Args:
            name: Contact name
            email: Contact email address

        Returns:
            New Contact instance

        Raises:
            ValidationError: If name or email is empty, or email is malformed
        """
        if name is None or not name.strip():
            raise ValidationError(
                "Name cannot be null or whitespace",
                invalid_fields={"name": "empty"}
            )

        if email is None or not email.strip():
            raise ValidationError(
                "Email cannot be null or whitespace",
                invalid_fields={"email": "empty"}
            )

        if not EMAIL_PATTERN.fullmatch(email):
            raise ValidationError(
                "Email must be a valid email address",
                invalid_fields={"email": "malformed"}
            )

        return cls(
            id=ContactId.new(),
            name=name,
            email=email,
            created_at=datetime.now(timezone.utc),
        )
