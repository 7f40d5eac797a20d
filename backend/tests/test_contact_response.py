from datetime import datetime, timezone

from domain.entities.contact import Contact
from domain.value_objects.contact_id import ContactId
from dtos.response.contact_response import ContactResponse


def test_from_contact_copies_every_field():
    contact = Contact.create("John Doe", "john.doe@example.com")

    response = ContactResponse.from_contact(contact)

    assert response.id == contact.id.value
    assert response.name == contact.name
    assert response.email == contact.email
    assert response.created_at == contact.created_at


def test_body_uses_public_field_names():
    created_at = datetime(2024, 5, 1, 12, 30, 0, tzinfo=timezone.utc)
    contact = Contact(ContactId.new(), "Jane Smith", "jane.smith@example.com", created_at)

    body = ContactResponse.from_contact(contact).to_body()

    assert set(body) == {"id", "name", "email", "createdAt"}
    assert body["id"] == str(contact.id)
    assert datetime.fromisoformat(body["createdAt"].replace("Z", "+00:00")) == created_at
