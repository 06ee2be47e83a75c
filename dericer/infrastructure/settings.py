"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path

import dotenv

from dericer.infrastructure.logging.logger import get_app_logger
from dericer.utils.utils import get_project_root

SUPPORTED_BACKENDS = ("json", "sqlalchemy", "memory")


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for selecting the ledger storage backend.

    Attributes:
        backend: Backend identifier (json, sqlalchemy, or memory).
        data_dir: Directory holding the JSON collection files.
    """

    backend: str = "json"
    data_dir: Path | None = None

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        backend = os.getenv("LEDGER_STORAGE_BACKEND", "json").strip().lower()
        logger = get_app_logger()
        if backend not in SUPPORTED_BACKENDS:
            logger.warning(
                f"Unknown LEDGER_STORAGE_BACKEND value: {backend}"
            )
        raw_data_dir = os.getenv("LEDGER_DATA_DIR")
        if raw_data_dir:
            data_dir = cls._normalize_path(raw_data_dir)
        else:
            data_dir = get_project_root() / "data"
        return cls(backend=backend, data_dir=data_dir)

    @staticmethod
    def _normalize_path(raw_path: str) -> Path:
        """Expand and resolve a configured directory path.

        Args:
            raw_path: Raw path string from the environment.

        Returns:
            Path: Absolute directory path.
        """
        return Path(raw_path).expanduser().resolve()


__all__ = ["LedgerSettings", "SUPPORTED_BACKENDS"]
