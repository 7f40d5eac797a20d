from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
import logging

logger = logging.getLogger(__name__)


def _set_sqlite_pragma(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA synchronous=NORMAL")
    cursor.execute("PRAGMA busy_timeout=5000")  # Wait up to 5s for locks instead of failing immediately
    cursor.close()


def build_engine(database_url: str) -> Engine:
    """
    Create the SQLAlchemy engine for the contact store.

    SQLite connections are shared with executor threads and get WAL mode.
    """
    connect_args = {}
    is_sqlite = database_url.startswith("sqlite")
    if is_sqlite:
        connect_args['check_same_thread'] = False

    engine = create_engine(
        database_url,
        connect_args=connect_args,
        echo=False,
        pool_pre_ping=True,  # Verify connections are alive before using
    )

    if is_sqlite:
        event.listen(engine, "connect", _set_sqlite_pragma)

    logger.info(f"Database engine created for {engine.url.render_as_string(hide_password=True)}")
    return engine


def build_session_factory(engine: Engine) -> sessionmaker:
    """Session factory used by repositories (one session per operation)."""
    return sessionmaker(bind=engine, expire_on_commit=False)
