"""Conversion between ledger entities and plain storage records."""

from dataclasses import asdict, fields
from typing import Any, TypeVar

from dericer.domain.models import Transaction, TransactionKind

E = TypeVar("E")

_BOOLEAN_FIELDS = ("is_archived", "is_deleted")


def to_record(entity) -> dict[str, Any]:
    """Return a JSON-friendly dict keyed by entity field names."""
    record = asdict(entity)
    if isinstance(entity, Transaction):
        record["kind"] = TransactionKind(entity.kind).value
        record["tags"] = None if entity.tags is None else list(entity.tags)
    return record


def from_record(entity_cls: type[E], record: dict[str, Any]) -> E:
    """Build an entity from a stored record, ignoring unknown keys."""
    names = {item.name for item in fields(entity_cls)}
    values = {key: value for key, value in record.items() if key in names}
    for flag in _BOOLEAN_FIELDS:
        if flag in values:
            values[flag] = bool(values[flag])
    if entity_cls is Transaction:
        values["kind"] = TransactionKind(values["kind"])
        tags = values.get("tags")
        values["tags"] = None if tags is None else tuple(tags)
    return entity_cls(**values)


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _snake_case(name: str) -> str:
    return "".join(
        f"_{char.lower()}" if char.isupper() else char for char in name
    )


def to_json_record(entity) -> dict[str, Any]:
    """Return the record of ``entity`` with camelCase keys."""
    return {
        _camel_case(key): value for key, value in to_record(entity).items()
    }


def from_json_record(entity_cls: type[E], record: dict[str, Any]) -> E:
    """Build an entity from a record keyed in camelCase or snake_case."""
    return from_record(
        entity_cls,
        {_snake_case(key): value for key, value in record.items()},
    )


__all__ = ["to_record", "from_record", "to_json_record", "from_json_record"]
