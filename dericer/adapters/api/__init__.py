"""Public ledger facade."""

from .core import LedgerCore, create_core

__all__ = ["LedgerCore", "create_core"]
