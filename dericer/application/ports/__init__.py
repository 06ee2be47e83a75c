"""Application ports package."""

from .database import DatabaseEnginePort
from .storage import StoragePort
from .time import TimePort

__all__ = ["DatabaseEnginePort", "StoragePort", "TimePort"]
