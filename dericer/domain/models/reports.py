"""Domain models for queries and aggregates."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

from dericer.domain.models.ids import (
    AccountId,
    CategoryId,
    CurrencyCode,
    ISODateString,
)
from dericer.domain.models.ledger import Budget, Transaction, TransactionKind

K = TypeVar("K")


@dataclass(frozen=True)
class SumByGroup(Generic[K]):
    """Signed minor-unit total for a grouping key."""

    key: K
    total_minor: int


@dataclass(frozen=True)
class AccountBalance:
    """Current balance of an account."""

    account_id: AccountId
    currency: CurrencyCode
    balance_minor: int


@dataclass(frozen=True)
class BudgetStatus:
    """Evaluation of a budget against matching expenses.

    Attributes:
        budget: Evaluated budget.
        spent_minor: Positive spend within the budget scope.
        remaining_minor: Budget amount minus spend, negative when over budget.
        percent_used: Spend ratio clamped to [0, 100].
    """

    budget: Budget
    spent_minor: int
    remaining_minor: int
    percent_used: float


@dataclass(frozen=True)
class TransactionFilter:
    """Criteria combined with AND semantics.

    Empty sequences and empty strings place no constraint.
    """

    account_ids: tuple[AccountId, ...] = ()
    category_ids: tuple[CategoryId, ...] = ()
    kinds: tuple[TransactionKind, ...] = ()
    date_from: ISODateString | None = None
    date_to: ISODateString | None = None
    min_amount_minor: int | None = None
    max_amount_minor: int | None = None
    tags: tuple[str, ...] = ()
    counterparty_name_contains: str | None = None
    text_search: str | None = None


class SortField(str, Enum):
    """Sortable transaction fields."""

    DATE = "date"
    AMOUNT_MINOR = "amountMinor"
    CREATED_AT = "createdAt"


class SortDirection(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class TransactionSort:
    """Explicit transaction ordering."""

    field: SortField
    direction: SortDirection = SortDirection.ASC


@dataclass(frozen=True)
class TransactionQueryResult:
    """Filtered, sorted transactions with their signed total."""

    transactions: list[Transaction]
    total_count: int
    total_amount_minor: int


@dataclass(frozen=True)
class CategoryQueryResult:
    """Query result together with hierarchical category sums."""

    result: TransactionQueryResult
    by_category: list[SumByGroup[CategoryId]] = field(default_factory=list)


__all__ = [
    "SumByGroup",
    "AccountBalance",
    "BudgetStatus",
    "TransactionFilter",
    "SortField",
    "SortDirection",
    "TransactionSort",
    "TransactionQueryResult",
    "CategoryQueryResult",
]
