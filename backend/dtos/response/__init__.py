"""
Response DTOs

DTOs for outgoing API responses. These control exactly what data is exposed
and keep the wire format independent of the domain entities.
"""

from .contact_response import ContactResponse, ErrorResponse

__all__ = ["ContactResponse", "ErrorResponse"]
