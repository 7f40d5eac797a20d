"""
Domain Entities

Entities are business objects with identity and lifecycle.
They carry a unique identifier that persists through their lifetime.

Examples:
- Contact entity: A registered name/email pair
"""

from .contact import Contact

__all__ = ["Contact"]
