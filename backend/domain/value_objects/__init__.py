"""
Domain Value Objects

Value objects are immutable types that represent descriptive aspects of the domain.
They have no conceptual identity and are compared by their values, not by ID.

Examples:
- ContactId: Opaque 128-bit identifier of a contact
"""

from .contact_id import ContactId

__all__ = ["ContactId"]
