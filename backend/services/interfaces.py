"""
Service Interfaces

Abstract base classes for the contact workflow and its collaborators,
following the Dependency Inversion Principle. Concrete implementations are
passed in through constructors, which keeps them swappable for tests.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from domain.entities.contact import Contact
from domain.result import Result
from domain.value_objects.contact_id import ContactId
from dtos.request.contact_request import ContactRequest
from dtos.response.contact_response import ContactResponse


class IContactRepository(ABC):
    """
    Interface for contact persistence.

    Every operation is a coroutine. Cancelling the awaiting task stops the
    caller from waiting, but work already handed to the backend is not
    interrupted: a cancelled add may still commit its record.
    """

    @abstractmethod
    async def add(self, contact: Contact) -> None:
        """
        Insert a new contact keyed by its id.

        Conditional insert: succeeds only if no record with that id exists.

        Raises:
            ContactAlreadyExistsError: If a record with the same id exists
            StoreError: If the backend fails
        """
        pass

    @abstractmethod
    async def get_by_id(self, contact_id: ContactId) -> Optional[Contact]:
        """
        Fetch a contact by id.

        Returns:
            Contact, or None if no record exists

        Raises:
            StoreError: If the backend fails
        """
        pass

    @abstractmethod
    async def exists(self, contact_id: ContactId) -> bool:
        """
        Check whether a record exists for the id.

        Raises:
            StoreError: If the backend fails
        """
        pass


@dataclass(frozen=True)
class ValidationFailure:
    """A single rule violation reported by a validator."""

    field: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a request."""

    errors: List[ValidationFailure] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def messages(self) -> List[str]:
        return [error.message for error in self.errors]


class IContactRequestValidator(ABC):
    """Interface for validating incoming contact requests."""

    @abstractmethod
    async def validate(self, request: ContactRequest) -> ValidationResult:
        """
        Validate a contact request.

        Returns:
            ValidationResult listing every violated rule
        """
        pass


class IContactService(ABC):
    """Interface for the contact registration use cases."""

    @abstractmethod
    async def register_contact(self, request: ContactRequest) -> Result[ContactResponse]:
        """
        Register a new contact.

        Returns:
            Success with the ContactResponse, or Failure describing why

        Raises:
            ValidationError: If request is None
        """
        pass

    @abstractmethod
    async def get_contact(self, contact_id: ContactId) -> Result[Optional[ContactResponse]]:
        """
        Look up a registered contact.

        Returns:
            Success with the ContactResponse (or None if unknown), or Failure
        """
        pass
