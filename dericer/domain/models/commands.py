"""Commands accepted by the mutating use cases."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields
from typing import Any

from dericer.domain.errors import ValidationError
from dericer.domain.models.ids import (
    AccountId,
    CategoryId,
    CurrencyCode,
    ISODateString,
)
from dericer.domain.models.ledger import TransactionKind
from dericer.domain.models.patch import (
    UNCHANGED,
    FieldPatch,
    patch_from_mapping,
)


@dataclass(frozen=True)
class CreateTransactionCommand:
    """Input for a single transaction."""

    account_id: AccountId
    kind: TransactionKind | str
    amount_minor: int
    currency: CurrencyCode
    date: ISODateString
    note: str | None = None
    category_id: CategoryId | None = None
    tags: Sequence[str] | None = None
    counterparty_name: str | None = None


@dataclass(frozen=True)
class CreateTransferCommand:
    """Input for a transfer between two accounts."""

    source_account_id: AccountId
    target_account_id: AccountId
    currency: CurrencyCode
    amount_minor: int
    date: ISODateString
    note: str | None = None
    tags: Sequence[str] | None = None
    counterparty_name: str | None = None


@dataclass(frozen=True)
class UpdateTransactionCommand:
    """Partial update of a transaction, one patch per field."""

    kind: FieldPatch[TransactionKind | str] = UNCHANGED
    amount_minor: FieldPatch[int] = UNCHANGED
    currency: FieldPatch[CurrencyCode] = UNCHANGED
    date: FieldPatch[ISODateString] = UNCHANGED
    note: FieldPatch[str] = UNCHANGED
    category_id: FieldPatch[CategoryId] = UNCHANGED
    tags: FieldPatch[Sequence[str]] = UNCHANGED
    counterparty_name: FieldPatch[str] = UNCHANGED

    @classmethod
    def from_changes(
        cls,
        changes: Mapping[str, Any],
    ) -> "UpdateTransactionCommand":
        """Build the command from a plain mapping of changed fields.

        ``None`` clears ``category_id`` and ``counterparty_name``; for the
        other fields it leaves the stored value untouched. An empty
        ``kind`` keeps the stored kind.
        """
        _reject_unknown_fields(cls, changes)
        if "kind" in changes and not changes["kind"]:
            changes = {k: v for k, v in changes.items() if k != "kind"}
        return cls(
            **{
                name: patch_from_mapping(
                    changes,
                    name,
                    none_clears=name in ("category_id", "counterparty_name"),
                )
                for name in _field_names(cls)
            }
        )


@dataclass(frozen=True)
class CreateGoalCommand:
    """Input for a new savings goal."""

    name: str
    target_amount_minor: int
    currency: CurrencyCode
    target_date: ISODateString | None = None
    note: str | None = None


@dataclass(frozen=True)
class UpdateGoalCommand:
    """Partial update of a goal, one patch per field."""

    name: FieldPatch[str] = UNCHANGED
    target_amount_minor: FieldPatch[int] = UNCHANGED
    currency: FieldPatch[CurrencyCode] = UNCHANGED
    target_date: FieldPatch[ISODateString] = UNCHANGED
    note: FieldPatch[str] = UNCHANGED
    is_deleted: FieldPatch[bool] = UNCHANGED

    @classmethod
    def from_changes(cls, changes: Mapping[str, Any]) -> "UpdateGoalCommand":
        """Build the command from a plain mapping of changed fields.

        ``None`` clears ``target_date`` and ``note``.
        """
        _reject_unknown_fields(cls, changes)
        return cls(
            **{
                name: patch_from_mapping(
                    changes,
                    name,
                    none_clears=name in ("target_date", "note"),
                )
                for name in _field_names(cls)
            }
        )


def _field_names(command_cls) -> list[str]:
    return [item.name for item in fields(command_cls)]


def _reject_unknown_fields(command_cls, changes: Mapping[str, Any]) -> None:
    unknown = sorted(set(changes) - set(_field_names(command_cls)))
    if unknown:
        raise ValidationError(
            f"Unknown fields for {command_cls.__name__}: {', '.join(unknown)}"
        )


__all__ = [
    "CreateTransactionCommand",
    "CreateTransferCommand",
    "UpdateTransactionCommand",
    "CreateGoalCommand",
    "UpdateGoalCommand",
]
