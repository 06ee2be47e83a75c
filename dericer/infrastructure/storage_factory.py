"""Factory helpers to select the ledger storage backend."""

from pathlib import Path

from dericer.application.ports.database import DatabaseEnginePort
from dericer.application.ports.storage import StoragePort
from dericer.infrastructure.in_memory_storage import InMemoryStorage
from dericer.infrastructure.json_file_storage import JsonFileStorage
from dericer.infrastructure.logging.logger import get_app_logger
from dericer.infrastructure.sqlalchemy_storage import SqlAlchemyStorage


def create_storage(
    backend: str,
    db_port: DatabaseEnginePort | None = None,
    data_dir: str | Path | None = None,
    logger=None,
) -> StoragePort:
    """Return a storage implementation based on configuration.

    Args:
        backend: Backend identifier (json, sqlalchemy, or memory).
        db_port: Port providing the ledger engine (SQL backend).
        data_dir: Directory holding the JSON files (JSON backend).
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        StoragePort: Concrete storage implementation.

    Raises:
        RuntimeError: If the selected backend lacks its required input.
        ValueError: If the backend identifier is unknown.
    """
    resolved_logger = logger or get_app_logger()
    selected_backend = (backend or "json").strip().lower()

    if selected_backend == "memory":
        return InMemoryStorage()

    if selected_backend == "json":
        if data_dir is None:
            raise RuntimeError("JSON storage requires a data directory.")
        resolved_logger.info(f"Using JSON storage at {data_dir}")
        return JsonFileStorage(data_dir, logger=resolved_logger)

    if selected_backend == "sqlalchemy":
        if db_port is None:
            raise RuntimeError("SQL storage requires a database port.")
        storage = SqlAlchemyStorage(db_port, logger=resolved_logger)
        storage.ensure_schema()
        return storage

    raise ValueError(
        "Unsupported storage backend: "
        f"{selected_backend}. Expected json, sqlalchemy or memory."
    )


__all__ = ["create_storage"]
