from datetime import datetime, timedelta, timezone

import pytest

from domain.entities.contact import Contact
from exceptions import ValidationError


def test_create_assigns_id_and_utc_timestamp():
    before = datetime.now(timezone.utc)
    contact = Contact.create("John Doe", "john.doe@example.com")
    after = datetime.now(timezone.utc)

    assert contact.name == "John Doe"
    assert contact.email == "john.doe@example.com"
    assert contact.created_at.tzinfo is not None
    assert before <= contact.created_at <= after + timedelta(seconds=1)


def test_create_generates_new_id_each_time():
    first = Contact.create("John Doe", "john.doe@example.com")
    second = Contact.create("John Doe", "john.doe@example.com")
    assert first.id != second.id


@pytest.mark.parametrize("name", ["", "   ", None])
def test_create_rejects_empty_name(name):
    with pytest.raises(ValidationError) as exc_info:
        Contact.create(name, "john.doe@example.com")
    assert exc_info.value.invalid_fields == {"name": "empty"}


@pytest.mark.parametrize("email", ["", "   ", None])
def test_create_rejects_empty_email(email):
    with pytest.raises(ValidationError) as exc_info:
        Contact.create("John Doe", email)
    assert exc_info.value.invalid_fields == {"email": "empty"}


@pytest.mark.parametrize("email", ["not-an-email", "invalid@", "@invalid.com", "invalid.com", "john.doe@example.com\n"])
def test_create_rejects_malformed_email(email):
    with pytest.raises(ValidationError) as exc_info:
        Contact.create("John Doe", email)
    assert exc_info.value.invalid_fields == {"email": "malformed"}
    assert exc_info.value.message == "Email must be a valid email address"


def test_contact_is_immutable():
    contact = Contact.create("John Doe", "john.doe@example.com")
    with pytest.raises(AttributeError):
        contact.name = "Jane"
