"""
Contact Service

Handles the contact registration workflow: request validation, entity
creation and persistence, with every expected outcome returned as a Result.

No retries happen here. A store failure is surfaced on the first attempt and
retry policy is left to the caller.
"""

from typing import Optional
import logging

from constants import ErrorMessages
from domain.entities.contact import Contact
from domain.result import Failure, Result, Success
from domain.value_objects.contact_id import ContactId
from dtos.request.contact_request import ContactRequest
from dtos.response.contact_response import ContactResponse
from exceptions import ContactAlreadyExistsError, ValidationError
from services.interfaces import IContactRepository, IContactRequestValidator, IContactService
from services.registration_events import IRegistrationEvents, LoggingRegistrationEvents

logger = logging.getLogger(__name__)


class ContactService(IContactService):
    """Service for contact registration business logic."""

    def __init__(
        self,
        repository: IContactRepository,
        validator: IContactRequestValidator,
        events: Optional[IRegistrationEvents] = None
    ):
        """
        Initialize ContactService.

        Args:
            repository: Contact store
            validator: Request validator
            events: Sink for registration events (logs by default)
        """
        if repository is None:
            raise ValueError("repository is required")
        if validator is None:
            raise ValueError("validator is required")
        self.repository = repository
        self.validator = validator
        self.events = events or LoggingRegistrationEvents()

    async def register_contact(self, request: ContactRequest) -> Result[ContactResponse]:
        """
        Register a new contact.

        Steps:
        1. Validate the request (store untouched on failure)
        2. Build the Contact entity, which re-checks its own invariants
        3. Conditionally insert it into the store
        4. Return the ContactResponse

        Args:
            request: Incoming contact request

        Returns:
            Success(ContactResponse) or Failure with one of:
                - "Validation failed: <reasons>"
                - "Contact with ID <id> already exists"
                - "Failed to register contact" (cause attached)

        Raises:
            ValidationError: If request is None
        """
        if request is None:
            raise ValidationError("Contact request is required", invalid_fields={"request": "missing"})

        self.events.started()

        validation = await self.validator.validate(request)
        if not validation.is_valid:
            self.events.validation_failed(validation.messages)
            return Failure(
                f"{ErrorMessages.VALIDATION_FAILED}: {', '.join(validation.messages)}",
                ValidationError(
                    ErrorMessages.VALIDATION_FAILED,
                    invalid_fields={e.field: e.message for e in validation.errors}
                )
            )

        try:
            contact = Contact.create(request.name, request.email)
        except ValidationError as e:
            self.events.validation_failed([e.message])
            return Failure(f"{ErrorMessages.VALIDATION_FAILED}: {e.message}", e)

        try:
            await self.repository.add(contact)
        except ContactAlreadyExistsError as e:
            self.events.store_failed(e, contact)
            return Failure(f"Contact with ID {contact.id} already exists", e)
        except Exception as e:
            self.events.store_failed(e, contact)
            return Failure(ErrorMessages.REGISTRATION_FAILED, e)

        self.events.registered(contact)
        return Success(ContactResponse.from_contact(contact))

    async def get_contact(self, contact_id: ContactId) -> Result[Optional[ContactResponse]]:
        """
        Look up a registered contact.

        Args:
            contact_id: Contact identifier

        Returns:
            Success(ContactResponse), Success(None) if unknown, or Failure
            if the store fails
        """
        try:
            contact = await self.repository.get_by_id(contact_id)
        except Exception as e:
            logger.error(f"Failed to retrieve contact {contact_id}: {e}", exc_info=True)
            return Failure(ErrorMessages.RETRIEVAL_FAILED, e)

        if contact is None:
            return Success(None)
        return Success(ContactResponse.from_contact(contact))
