"""
Application-wide constants and configuration keys.

This module centralizes all magic strings and numbers used throughout the application
to improve maintainability and reduce duplication.
"""
import re


class ContactLimits:
    """Field limits enforced on incoming contact data"""

    NAME_MAX_LENGTH = 100
    EMAIL_MAX_LENGTH = 320


# local@domain.tld shape, shared by the request validator and the entity factory.
# Apply with fullmatch: "$" alone would accept a trailing newline.
EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$",
    re.IGNORECASE,
)


class StoreKeys:
    """Key layout of the contact table"""

    CONTACT_PREFIX = "CONTACT#"

    PARTITION_KEY = "PK"
    SORT_KEY = "SK"
    ID = "Id"
    NAME = "Name"
    EMAIL = "Email"
    CREATED_AT = "CreatedAt"
    TTL = "TTL"


class ValidationMessages:
    """Human-readable validation reasons"""

    NAME_REQUIRED = "Name is required"
    NAME_TOO_LONG = f"Name cannot exceed {ContactLimits.NAME_MAX_LENGTH} characters"
    EMAIL_REQUIRED = "Email is required"
    EMAIL_INVALID = "Email must be a valid email address"
    EMAIL_TOO_LONG = f"Email cannot exceed {ContactLimits.EMAIL_MAX_LENGTH} characters"


class ErrorMessages:
    """Error strings surfaced through results and HTTP bodies"""

    VALIDATION_FAILED = "Validation failed"
    REGISTRATION_FAILED = "Failed to register contact"
    RETRIEVAL_FAILED = "Failed to retrieve contact"
    REQUEST_BODY_REQUIRED = "Request body is required"
    INTERNAL_ERROR = "An internal error occurred"
    CONTACT_NOT_FOUND = "Contact not found"
    INVALID_CONTACT_ID = "Invalid contact id"


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404
    CONFLICT = 409

    # Server Errors
    INTERNAL_SERVER_ERROR = 500


SERVICE_NAME = "Contact Manager API"
SERVICE_VERSION = "1.0.0"

DEFAULT_TABLE_NAME = "Contacts"
DEFAULT_DATABASE_URL = "sqlite:///./contacts.db"
DEFAULT_RETENTION_YEARS = 7

REQUEST_ID_HEADER = "X-Request-ID"
