"""Composition root for wiring infrastructure adapters."""

from dericer.adapters.api.core import LedgerCore, create_core
from dericer.application.ports.database import DatabaseEnginePort
from dericer.application.ports.storage import StoragePort
from dericer.application.ports.time import TimePort
from dericer.infrastructure.clock import SystemTimePort
from dericer.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from dericer.infrastructure.logging.logger import get_app_logger
from dericer.infrastructure.settings import LedgerSettings
from dericer.infrastructure.storage_factory import create_storage


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_storage(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> StoragePort:
    """Return the storage adapter selected by the settings."""
    resolved_settings = settings or LedgerSettings.from_env()
    if resolved_settings.backend == "sqlalchemy":
        db_port = db_port or build_database_adapter()
    return create_storage(
        resolved_settings.backend,
        db_port=db_port,
        data_dir=resolved_settings.data_dir,
        logger=get_app_logger(),
    )


def build_time_port() -> TimePort:
    """Return the system clock."""
    return SystemTimePort()


def build_core(
    storage: StoragePort | None = None,
    time: TimePort | None = None,
) -> LedgerCore:
    """Return the ledger facade wired to the configured adapters."""
    return create_core(
        storage or build_storage(),
        time or build_time_port(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_storage",
    "build_time_port",
    "build_core",
]
