import sys
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Now import after path is set
import pytest
from fastapi.testclient import TestClient

from config.app_config import AppConfig
from database import build_engine, build_session_factory
from init_db import init_database
from main import create_app
from repositories.contact_repository import ContactRepository

TEST_TABLE = "ContactsTest"


@pytest.fixture
def app_config(tmp_path):
    """Configuration pointing at a throwaway SQLite file"""
    return AppConfig(
        table_name=TEST_TABLE,
        database_url=f"sqlite:///{tmp_path / 'contacts.db'}",
        log_level="DEBUG",
    )


@pytest.fixture
def engine(app_config):
    engine = build_engine(app_config.database_url)
    yield engine
    engine.dispose()


@pytest.fixture
def contact_table(engine, app_config):
    return init_database(engine, app_config.table_name)


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def contact_repository(session_factory, contact_table):
    return ContactRepository(session_factory, contact_table)


@pytest.fixture
def app(app_config):
    """Application wired to the test database, table created"""
    application = create_app(app_config)
    init_database(application.state.engine, app_config.table_name)
    yield application
    application.state.engine.dispose()


@pytest.fixture
def client(app):
    return TestClient(app)
