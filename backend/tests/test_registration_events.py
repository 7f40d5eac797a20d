import logging

from domain.entities.contact import Contact
from services.registration_events import LoggingRegistrationEvents


def test_logs_each_registration_step(caplog):
    events = LoggingRegistrationEvents()
    contact = Contact.create("John Doe", "john.doe@example.com")

    with caplog.at_level(logging.INFO, logger="services.registration_events"):
        events.started()
        events.validation_failed(["Name is required"])
        events.store_failed(RuntimeError("backend down"), contact)
        events.registered(contact)

    messages = [record.getMessage() for record in caplog.records]
    assert messages == [
        "Processing contact registration",
        "Contact registration rejected: Name is required",
        "Failed to register contact",
        f"Contact {contact.id} registered successfully",
    ]
    failure = caplog.records[2]
    assert failure.levelno == logging.ERROR
    assert failure.contact_id == str(contact.id)
    assert failure.error_type == "RuntimeError"
