from sqlalchemy import Column, Integer, MetaData, PrimaryKeyConstraint, String, Table, CheckConstraint

from constants import StoreKeys


def build_contact_table(table_name: str, metadata: MetaData | None = None) -> Table:
    """
    Define the contact table under a configurable name.

    Layout (one row per contact):
    - PK / SK: both "CONTACT#{id}"; together they form the primary key,
      which is what makes inserts conditional
    - Id, Name, Email: contact fields
    - CreatedAt: ISO-8601 UTC string
    - TTL: epoch seconds after which the record may be expired by retention
    """
    metadata = metadata if metadata is not None else MetaData()
    return Table(
        table_name,
        metadata,
        Column(StoreKeys.PARTITION_KEY, String, nullable=False),
        Column(StoreKeys.SORT_KEY, String, nullable=False),
        Column(StoreKeys.ID, String(36), nullable=False),
        Column(StoreKeys.NAME, String, nullable=False),
        Column(StoreKeys.EMAIL, String, nullable=False),
        Column(StoreKeys.CREATED_AT, String, nullable=False),
        Column(StoreKeys.TTL, Integer, nullable=False),
        PrimaryKeyConstraint(StoreKeys.PARTITION_KEY, StoreKeys.SORT_KEY, name=f"pk_{table_name.lower()}"),
        CheckConstraint(f'"{StoreKeys.NAME}" != \'\'', name=f"ck_{table_name.lower()}_name"),
    )
