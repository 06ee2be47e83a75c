"""Domain models for ledger entities."""

from dataclasses import dataclass
from enum import Enum

from dericer.domain.models.ids import (
    AccountId,
    BudgetId,
    CategoryId,
    CurrencyCode,
    GoalId,
    ISODateString,
    ISODateTimeString,
    TransactionId,
    TransferGroupId,
)


class TransactionKind(str, Enum):
    """Kind of a transaction; drives the sign of its amount."""

    INCOME = "income"
    EXPENSE = "expense"
    DEBT = "debt"
    RECEIVABLE = "receivable"


@dataclass(frozen=True)
class Account:
    """Money container holding an opening balance in minor units.

    Attributes:
        id: Account identifier.
        name: Display name.
        currency: Currency code of every amount booked on the account.
        initial_balance_minor: Opening balance in integer minor units.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
        is_archived: Whether the account is archived.
        is_deleted: Soft-delete flag.
    """

    id: AccountId
    name: str
    currency: CurrencyCode
    initial_balance_minor: int
    created_at: ISODateTimeString
    updated_at: ISODateTimeString
    is_archived: bool = False
    is_deleted: bool = False


@dataclass(frozen=True)
class Transaction:
    """Single booking on an account.

    ``amount_minor`` is always strictly positive; the sign is derived from
    ``kind``.
    """

    id: TransactionId
    account_id: AccountId
    kind: TransactionKind
    amount_minor: int
    currency: CurrencyCode
    date: ISODateString
    created_at: ISODateTimeString
    updated_at: ISODateTimeString
    note: str | None = None
    category_id: CategoryId | None = None
    tags: tuple[str, ...] | None = None
    counterparty_name: str | None = None
    transfer_group_id: TransferGroupId | None = None
    is_deleted: bool = False


@dataclass(frozen=True)
class Category:
    """Node of the category forest; ``parent_id`` is None for roots."""

    id: CategoryId
    name: str
    parent_id: CategoryId | None = None
    is_deleted: bool = False


@dataclass(frozen=True)
class Budget:
    """Spending limit for a category scope over an inclusive date range."""

    id: BudgetId
    category_id: CategoryId
    currency: CurrencyCode
    amount_minor: int
    start_date: ISODateString
    end_date: ISODateString
    name: str | None = None
    is_deleted: bool = False


@dataclass(frozen=True)
class Goal:
    """Savings goal."""

    id: GoalId
    name: str
    target_amount_minor: int
    currency: CurrencyCode
    created_at: ISODateTimeString
    updated_at: ISODateTimeString
    target_date: ISODateString | None = None
    note: str | None = None
    is_deleted: bool = False


__all__ = [
    "TransactionKind",
    "Account",
    "Transaction",
    "Category",
    "Budget",
    "Goal",
]
