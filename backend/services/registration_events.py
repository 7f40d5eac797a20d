"""
Registration Events

Observation points of the registration workflow. The workflow reports to an
injected sink instead of a global logger, so callers decide where these
events go.
"""

from abc import ABC, abstractmethod
from typing import List

from domain.entities.contact import Contact
from utils.logging_utils import StructuredLogger


class IRegistrationEvents(ABC):
    """Sink notified at each step of a registration."""

    @abstractmethod
    def started(self) -> None:
        pass

    @abstractmethod
    def validation_failed(self, reasons: List[str]) -> None:
        pass

    @abstractmethod
    def store_failed(self, error: BaseException, contact: Contact | None = None) -> None:
        pass

    @abstractmethod
    def registered(self, contact: Contact) -> None:
        pass


class LoggingRegistrationEvents(IRegistrationEvents):
    """Writes registration events as structured log lines."""

    def __init__(self, logger: StructuredLogger | None = None):
        self.logger = logger or StructuredLogger(__name__)

    def started(self) -> None:
        self.logger.info("Processing contact registration", extra={"operation": "register_contact"})

    def validation_failed(self, reasons: List[str]) -> None:
        self.logger.warning(
            f"Contact registration rejected: {', '.join(reasons)}",
            extra={"operation": "register_contact", "reasons": reasons}
        )

    def store_failed(self, error: BaseException, contact: Contact | None = None) -> None:
        extra = {
            "operation": "register_contact",
            "error": str(error),
            "error_type": type(error).__name__,
        }
        if contact is not None:
            extra["contact_id"] = str(contact.id)
        self.logger.error("Failed to register contact", extra=extra, exc_info=error)

    def registered(self, contact: Contact) -> None:
        self.logger.info(
            f"Contact {contact.id} registered successfully",
            extra={"operation": "register_contact", "contact_id": str(contact.id)}
        )
