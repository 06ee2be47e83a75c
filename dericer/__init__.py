"""Personal finance ledger core."""

from dericer.adapters.api.core import LedgerCore, create_core
from dericer.domain.errors import DomainError, NotFoundError, ValidationError

__all__ = [
    "LedgerCore",
    "create_core",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
