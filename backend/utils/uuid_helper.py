"""
UUID generation helper for the application.

Provides consistent UUID generation for contact identifiers.
"""
import uuid


def generate_uuid() -> uuid.UUID:
    """
    Generate a new random UUID.

    Returns:
        uuid.UUID: A new version 4 UUID
    """
    return uuid.uuid4()
