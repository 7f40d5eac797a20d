"""
ContactId Value Object

Immutable identifier of a contact record.
"""

import uuid
from dataclasses import dataclass

from exceptions import ValidationError
from utils.uuid_helper import generate_uuid


@dataclass(frozen=True)
class ContactId:
    """
    Immutable contact identifier.

    Wraps a UUID so identifiers cannot be confused with other strings.
    Compared by value.
    """

    value: uuid.UUID

    def __post_init__(self):
        """Validate the wrapped value."""
        if not isinstance(self.value, uuid.UUID):
            raise TypeError(f"ContactId requires a UUID, got {type(self.value).__name__}")

    @classmethod
    def new(cls) -> "ContactId":
        """Create a freshly generated identifier."""
        return cls(generate_uuid())

    @classmethod
    def parse(cls, value: str) -> "ContactId":
        """
        Create ContactId from its string form.

        Args:
            value: UUID string

        Returns:
            ContactId instance

        Raises:
            ValidationError: If value is not a valid UUID
        """
        try:
            return cls(uuid.UUID(str(value)))
        except ValueError:
            raise ValidationError(
                f"Invalid contact id: {value}",
                invalid_fields={"id": "malformed"}
            )

    def __str__(self) -> str:
        """String representation."""
        return str(self.value)
