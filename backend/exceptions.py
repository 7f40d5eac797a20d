"""
Custom exception classes for the application.

This module defines domain-specific exceptions that provide better error handling
and clearer error messages throughout the application.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when there's a configuration issue"""

    def __init__(self, message: str, missing_keys: list[str] | None = None):
        details = {"missing_keys": missing_keys} if missing_keys else {}
        super().__init__(message, details)


class ValidationError(ApplicationError):
    """Raised when validation fails"""

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)

    @property
    def invalid_fields(self) -> dict:
        return self.details.get("invalid_fields", {})


class ContactAlreadyExistsError(ApplicationError):
    """Raised when a conditional insert finds a record with the same key"""

    def __init__(self, contact_id):
        details = {"contact_id": str(contact_id)}
        super().__init__(f"Contact with ID {contact_id} already exists", details)
        self.contact_id = contact_id


class StoreError(ApplicationError):
    """Raised when the contact store backend fails"""

    def __init__(self, operation: str, message: str, cause: BaseException | None = None):
        details = {"operation": operation}
        super().__init__(message, details)
        self.operation = operation
        self.cause = cause
