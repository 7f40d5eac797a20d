from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlalchemy.schema import Table
import logging

from models import build_contact_table

logger = logging.getLogger(__name__)


def init_database(engine: Engine, table_name: str) -> Table:
    """
    Create the contact table if it does not exist yet.

    Args:
        engine: SQLAlchemy engine
        table_name: Configured contact table name

    Returns:
        The contact Table definition
    """
    table = build_contact_table(table_name)
    inspector = inspect(engine)

    if inspector.has_table(table_name):
        logger.info(f"Contact table '{table_name}' already present")
    else:
        logger.info(f"Creating contact table '{table_name}'...")
        table.metadata.create_all(engine, tables=[table])
        logger.info(f"✅ Contact table '{table_name}' created")

    return table
