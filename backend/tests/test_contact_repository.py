from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from domain.entities.contact import Contact
from domain.value_objects.contact_id import ContactId
from exceptions import ContactAlreadyExistsError, StoreError
from models import build_contact_table
from repositories.contact_repository import ContactRepository, contact_key


@pytest.mark.asyncio
async def test_add_then_get_returns_same_contact(contact_repository):
    contact = Contact.create("John Doe", "john.doe@example.com")

    await contact_repository.add(contact)
    stored = await contact_repository.get_by_id(contact.id)

    assert stored is not None
    assert stored.id == contact.id
    assert stored.name == contact.name
    assert stored.email == contact.email
    assert abs(stored.created_at - contact.created_at) < timedelta(seconds=1)


@pytest.mark.asyncio
async def test_get_returns_none_for_unknown_id(contact_repository):
    assert await contact_repository.get_by_id(ContactId.new()) is None


@pytest.mark.asyncio
async def test_exists_after_add(contact_repository):
    contact = Contact.create("Jane Smith", "jane.smith@example.com")
    await contact_repository.add(contact)

    assert await contact_repository.exists(contact.id) is True
    assert await contact_repository.exists(ContactId.new()) is False


@pytest.mark.asyncio
async def test_add_rejects_existing_id_and_keeps_original(contact_repository):
    contact = Contact.create("Bob Wilson", "bob.wilson@example.com")
    await contact_repository.add(contact)
    duplicate = Contact(contact.id, "Different Name", "different@email.com", datetime.now(timezone.utc))

    with pytest.raises(ContactAlreadyExistsError, match="already exists"):
        await contact_repository.add(duplicate)

    stored = await contact_repository.get_by_id(contact.id)
    assert stored.name == "Bob Wilson"
    assert stored.email == "bob.wilson@example.com"


@pytest.mark.asyncio
async def test_distinct_contacts_are_independently_retrievable(contact_repository):
    first = Contact.create("John Doe", "john.doe@example.com")
    second = Contact.create("Jane Smith", "jane.smith@example.com")

    await contact_repository.add(first)
    await contact_repository.add(second)

    assert (await contact_repository.get_by_id(first.id)).name == "John Doe"
    assert (await contact_repository.get_by_id(second.id)).name == "Jane Smith"


@pytest.mark.asyncio
async def test_item_layout(session_factory, contact_table):
    now = datetime(2024, 1, 15, 9, 0, 0, tzinfo=timezone.utc)
    repository = ContactRepository(session_factory, contact_table, retention_years=7, clock=lambda: now)
    contact = Contact.create("John Doe", "john.doe@example.com")

    await repository.add(contact)

    with session_factory() as db:
        row = db.execute(select(contact_table)).mappings().one()
    key = f"CONTACT#{contact.id}"
    assert row["PK"] == key
    assert row["SK"] == key
    assert row["Id"] == str(contact.id)
    assert row["Name"] == "John Doe"
    assert row["Email"] == "john.doe@example.com"
    assert datetime.fromisoformat(row["CreatedAt"]) == contact.created_at
    assert row["TTL"] == int(datetime(2031, 1, 15, 9, 0, 0, tzinfo=timezone.utc).timestamp())


def test_contact_key_format():
    contact_id = ContactId.new()
    assert contact_key(contact_id) == f"CONTACT#{contact_id.value}"


@pytest.mark.asyncio
async def test_backend_failure_surfaces_as_store_error(session_factory):
    missing_table = build_contact_table("NoSuchTable")
    repository = ContactRepository(session_factory, missing_table)

    with pytest.raises(StoreError) as exc_info:
        await repository.get_by_id(ContactId.new())
    assert exc_info.value.operation == "get_by_id"
    assert isinstance(exc_info.value.cause, OperationalError)

    with pytest.raises(StoreError):
        await repository.add(Contact.create("John Doe", "john.doe@example.com"))

    with pytest.raises(StoreError):
        await repository.exists(ContactId.new())
