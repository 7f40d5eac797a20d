"""
Request DTOs

DTOs for incoming API requests. These decouple the API from the domain
entities and provide a clear contract for what data the API expects.
"""

from .contact_request import ContactRequest

__all__ = ["ContactRequest"]
