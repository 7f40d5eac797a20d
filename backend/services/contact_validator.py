"""
Contact Request Validator

Rule set applied to incoming contact requests before any entity is built.
Each field stops at its first violated rule, so an empty email reports only
"Email is required" rather than also failing the format rule.
"""
import logging

from constants import EMAIL_PATTERN, ContactLimits, ValidationMessages
from dtos.request.contact_request import ContactRequest
from services.interfaces import IContactRequestValidator, ValidationFailure, ValidationResult

logger = logging.getLogger(__name__)


class ContactRequestValidator(IContactRequestValidator):
    """Validator for contact registration requests"""

    async def validate(self, request: ContactRequest) -> ValidationResult:
        errors = []

        name_error = self._check_name(request.name)
        if name_error:
            errors.append(ValidationFailure("name", name_error))

        email_error = self._check_email(request.email)
        if email_error:
            errors.append(ValidationFailure("email", email_error))

        if errors:
            logger.debug(f"Contact request rejected: {[e.message for e in errors]}")
        return ValidationResult(errors)

    @staticmethod
    def _check_name(name):
        if name is None or not name.strip():
            return ValidationMessages.NAME_REQUIRED
        if len(name) > ContactLimits.NAME_MAX_LENGTH:
            return ValidationMessages.NAME_TOO_LONG
        return None

    @staticmethod
    def _check_email(email):
        if email is None or not email.strip():
            return ValidationMessages.EMAIL_REQUIRED
        if not EMAIL_PATTERN.fullmatch(email):
            return ValidationMessages.EMAIL_INVALID
        if len(email) > ContactLimits.EMAIL_MAX_LENGTH:
            return ValidationMessages.EMAIL_TOO_LONG
        return None
