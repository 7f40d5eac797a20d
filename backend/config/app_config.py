"""
Runtime Configuration

Loads the service configuration from environment variables.

Includes:
- Contact table name and database URL for the store
- Record retention horizon used for the TTL attribute
- Logging level and optional log directory
- Allowed CORS origins
"""
import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Tuple

from constants import DEFAULT_DATABASE_URL, DEFAULT_RETENTION_YEARS, DEFAULT_TABLE_NAME
from exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class AppConfig:
    """Immutable service configuration."""

    table_name: str = DEFAULT_TABLE_NAME
    database_url: str = DEFAULT_DATABASE_URL
    retention_years: int = DEFAULT_RETENTION_YEARS
    log_level: str = "INFO"
    log_dir: Optional[Path] = None
    cors_origins: Tuple[str, ...] = field(default=("*",))


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """
    Build an AppConfig from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        AppConfig instance

    Raises:
        ConfigurationError: If a variable holds an unusable value
    """
    env = os.environ if environ is None else environ

    table_name = env.get('CONTACTS_TABLE_NAME', DEFAULT_TABLE_NAME).strip()
    if not table_name:
        raise ConfigurationError(
            "CONTACTS_TABLE_NAME cannot be empty",
            missing_keys=['CONTACTS_TABLE_NAME']
        )

    database_url = env.get('CONTACTS_DATABASE_URL', DEFAULT_DATABASE_URL).strip()
    if not database_url:
        raise ConfigurationError(
            "CONTACTS_DATABASE_URL cannot be empty",
            missing_keys=['CONTACTS_DATABASE_URL']
        )

    raw_retention = env.get('CONTACTS_RETENTION_YEARS', str(DEFAULT_RETENTION_YEARS))
    try:
        retention_years = int(raw_retention)
    except ValueError:
        raise ConfigurationError(f"CONTACTS_RETENTION_YEARS must be an integer, got {raw_retention!r}")
    if retention_years < 1:
        raise ConfigurationError(f"CONTACTS_RETENTION_YEARS must be positive, got {retention_years}")

    log_level = env.get('CONTACTS_LOG_LEVEL', 'INFO').upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigurationError(f"Unknown CONTACTS_LOG_LEVEL: {log_level}")

    raw_log_dir = env.get('CONTACTS_LOG_DIR', '').strip()
    log_dir = Path(raw_log_dir).expanduser() if raw_log_dir else None

    origins = tuple(
        origin.strip()
        for origin in env.get('CONTACTS_CORS_ORIGINS', '*').split(',')
        if origin.strip()
    ) or ("*",)

    return AppConfig(
        table_name=table_name,
        database_url=database_url,
        retention_years=retention_years,
        log_level=log_level,
        log_dir=log_dir,
        cors_origins=origins,
    )
