"""Soft-delete visibility rules for listings."""

from collections.abc import Iterable
from typing import Protocol, TypeVar


class SoftDeletable(Protocol):
    """Record carrying a soft-delete flag."""

    is_deleted: bool


R = TypeVar("R", bound=SoftDeletable)


def is_active(record: SoftDeletable | None) -> bool:
    """Return True when the record exists and is not soft-deleted."""
    return record is not None and not record.is_deleted


def exclude_deleted(records: Iterable[R]) -> list[R]:
    """Return the records that are not soft-deleted, preserving order."""
    return [record for record in records if not record.is_deleted]


__all__ = ["SoftDeletable", "is_active", "exclude_deleted"]
