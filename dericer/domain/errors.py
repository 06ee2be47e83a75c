"""Domain error taxonomy.

Callers branch on the concrete class or on the ``kind`` attribute.
"""


class DomainError(Exception):
    """Base class for errors raised by the ledger core."""

    kind = "domain"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """Input is malformed or out of range."""

    kind = "validation"


class NotFoundError(DomainError):
    """A referenced entity is missing or soft-deleted."""

    kind = "not_found"


__all__ = ["DomainError", "ValidationError", "NotFoundError"]
