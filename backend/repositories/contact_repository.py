"""
Contact repository storing contacts as key-value items.
"""

from datetime import datetime, timezone
from typing import Callable, Optional
import logging

from sqlalchemy.orm import sessionmaker
from sqlalchemy.schema import Table

from constants import DEFAULT_RETENTION_YEARS, StoreKeys
from domain.entities.contact import Contact
from domain.value_objects.contact_id import ContactId
from exceptions import ContactAlreadyExistsError, StoreError
from services.interfaces import IContactRepository
from .base_repository import BaseRepository, Item

logger = logging.getLogger(__name__)


def contact_key(contact_id: ContactId) -> str:
    """Partition (and sort) key of a contact item."""
    return f"{StoreKeys.CONTACT_PREFIX}{contact_id.value}"


def _add_years(moment: datetime, years: int) -> datetime:
    try:
        return moment.replace(year=moment.year + years)
    except ValueError:
        # Feb 29 in a non-leap target year
        return moment.replace(year=moment.year + years, day=28)


class ContactRepository(BaseRepository, IContactRepository):
    """Repository for Contact operations."""

    def __init__(
        self,
        session_factory: sessionmaker,
        table: Table,
        retention_years: int = DEFAULT_RETENTION_YEARS,
        clock: Optional[Callable[[], datetime]] = None
    ):
        super().__init__(session_factory, table)
        self.retention_years = retention_years
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    async def add(self, contact: Contact) -> None:
        if contact is None:
            raise ValueError("contact is required")

        item = self._to_item(contact)
        try:
            inserted = await self._run("add", self.put_if_absent, item)
        except StoreError:
            logger.error(f"Failed to store contact {contact.id}", exc_info=True)
            raise

        if not inserted:
            logger.warning(f"Contact {contact.id} already exists")
            raise ContactAlreadyExistsError(contact.id)

        logger.info(f"Contact {contact.id} stored successfully")

    async def get_by_id(self, contact_id: ContactId) -> Optional[Contact]:
        key = contact_key(contact_id)
        try:
            item = await self._run("get_by_id", self.get_item, key, key)
        except StoreError:
            logger.error(f"Failed to retrieve contact {contact_id}", exc_info=True)
            raise

        if item is None:
            return None
        return self._to_contact(item)

    async def exists(self, contact_id: ContactId) -> bool:
        key = contact_key(contact_id)
        try:
            return await self._run("exists", self.item_exists, key, key)
        except StoreError:
            logger.error(f"Failed to check existence of contact {contact_id}", exc_info=True)
            raise

    def _to_item(self, contact: Contact) -> Item:
        """Convert a Contact into a table item."""
        key = contact_key(contact.id)
        expires_at = _add_years(self.clock(), self.retention_years)
        return {
            StoreKeys.PARTITION_KEY: key,
            StoreKeys.SORT_KEY: key,
            StoreKeys.ID: str(contact.id),
            StoreKeys.NAME: contact.name,
            StoreKeys.EMAIL: contact.email,
            StoreKeys.CREATED_AT: contact.created_at.isoformat(),
            StoreKeys.TTL: int(expires_at.timestamp()),
        }

    @staticmethod
    def _to_contact(item: Item) -> Contact:
        """Convert a table item back into a Contact."""
        created_at = datetime.fromisoformat(item[StoreKeys.CREATED_AT])
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return Contact(
            id=ContactId.parse(item[StoreKeys.ID]),
            name=item[StoreKeys.NAME],
            email=item[StoreKeys.EMAIL],
            created_at=created_at,
        )
