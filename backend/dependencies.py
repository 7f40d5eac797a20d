"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating repository and service instances,
following the Dependency Inversion Principle. Everything is wired by explicit
constructor arguments; the store resources live on ``app.state`` and are set up
by ``main.create_app``.
"""

from fastapi import Depends, Request
from sqlalchemy.orm import sessionmaker
from sqlalchemy.schema import Table

from config.app_config import AppConfig
from repositories.contact_repository import ContactRepository
from services.contact_service import ContactService
from services.contact_validator import ContactRequestValidator
from services.interfaces import IContactRepository, IContactRequestValidator, IContactService
from services.registration_events import IRegistrationEvents, LoggingRegistrationEvents


def get_app_config(request: Request) -> AppConfig:
    """Configuration the app was created with."""
    return request.app.state.config


def get_session_factory(request: Request) -> sessionmaker:
    """Session factory bound to the app's engine."""
    return request.app.state.session_factory


def get_contact_table(request: Request) -> Table:
    """Contact table definition for the configured table name."""
    return request.app.state.contact_table


def get_contact_repository(
    session_factory: sessionmaker = Depends(get_session_factory),
    table: Table = Depends(get_contact_table),
    config: AppConfig = Depends(get_app_config)
) -> IContactRepository:
    """
    Factory function for creating ContactRepository instances.

    Args:
        session_factory: Database session factory (injected)
        table: Contact table (injected)
        config: Application configuration (injected)

    Returns:
        IContactRepository implementation
    """
    return ContactRepository(session_factory, table, retention_years=config.retention_years)


def get_contact_validator() -> IContactRequestValidator:
    """
    Factory function for creating the request validator.

    Returns:
        IContactRequestValidator implementation
    """
    return ContactRequestValidator()


def get_registration_events() -> IRegistrationEvents:
    """Factory function for the registration event sink."""
    return LoggingRegistrationEvents()


def get_contact_service(
    repository: IContactRepository = Depends(get_contact_repository),
    validator: IContactRequestValidator = Depends(get_contact_validator),
    events: IRegistrationEvents = Depends(get_registration_events)
) -> IContactService:
    """
    Factory function for creating ContactService instances.

    Note: Override this dependency to swap in a mock for testing purposes.
    """
    return ContactService(repository, validator, events)
