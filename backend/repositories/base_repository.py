"""
Base repository providing key-value item operations on a PK/SK table.
"""

import asyncio
from functools import partial
from typing import Any, Callable, Dict, Optional, TypeVar

from sqlalchemy import and_, insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.schema import Table

from constants import StoreKeys
from exceptions import StoreError

R = TypeVar('R')

Item = Dict[str, Any]


class BaseRepository:
    """
    Key-value base repository.

    Items are addressed by a partition/sort key pair. Each operation opens
    its own session, and the blocking work runs in the default executor so
    callers can await it without stalling the event loop.
    """

    def __init__(self, session_factory: sessionmaker, table: Table):
        """
        Initialize the repository.

        Args:
            session_factory: SQLAlchemy session factory
            table: Table holding the items
        """
        self.session_factory = session_factory
        self.table = table

    def _key_clause(self, partition_key: str, sort_key: str):
        return and_(
            self.table.c[StoreKeys.PARTITION_KEY] == partition_key,
            self.table.c[StoreKeys.SORT_KEY] == sort_key,
        )

    def put_if_absent(self, item: Item) -> bool:
        """
        Insert an item unless one with the same key already exists.

        Args:
            item: Column values, including PK and SK

        Returns:
            True if inserted, False if the key was already taken
        """
        with self.session_factory() as db:
            try:
                db.execute(insert(self.table).values(**item))
                db.commit()
                return True
            except IntegrityError:
                db.rollback()
                # Only a key collision counts as "already exists"
                if self.item_exists(item[StoreKeys.PARTITION_KEY], item[StoreKeys.SORT_KEY]):
                    return False
                raise

    def get_item(self, partition_key: str, sort_key: str) -> Optional[Item]:
        """
        Retrieve an item by its key.

        Returns:
            Column values or None if not found
        """
        with self.session_factory() as db:
            row = db.execute(
                select(self.table).where(self._key_clause(partition_key, sort_key))
            ).mappings().first()
            return dict(row) if row is not None else None

    def item_exists(self, partition_key: str, sort_key: str) -> bool:
        """
        Check if an item exists, reading only the key column.

        Returns:
            True if exists, False otherwise
        """
        with self.session_factory() as db:
            row = db.execute(
                select(self.table.c[StoreKeys.PARTITION_KEY])
                .where(self._key_clause(partition_key, sort_key))
            ).first()
            return row is not None

    async def _run(self, operation: str, func: Callable[..., R], *args: Any) -> R:
        """
        Run a blocking operation in the executor.

        Raises:
            StoreError: If the database raises
        """
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, partial(func, *args))
        except SQLAlchemyError as e:
            raise StoreError(operation, f"Store operation '{operation}' failed: {e}", cause=e) from e
