"""Transport-friendly DTOs returned by the ledger facade.

DTOs carry plain values only (strings, ints, floats, bools and tuples) so
they serialize without knowledge of the domain enums.
"""

from dataclasses import dataclass, fields, is_dataclass
from typing import Any

from dericer.domain.models import (
    Account,
    AccountBalance,
    Budget,
    BudgetStatus,
    Category,
    CategoryQueryResult,
    CurrencyConfig,
    Goal,
    SumByGroup,
    Transaction,
    TransactionQueryResult,
)


@dataclass(frozen=True)
class AccountDTO:
    """Serializable representation of an account."""

    id: str
    name: str
    currency: str
    initial_balance_minor: int
    created_at: str
    updated_at: str
    is_archived: bool
    is_deleted: bool


@dataclass(frozen=True)
class TransactionDTO:
    """Serializable representation of a transaction."""

    id: str
    account_id: str
    kind: str
    amount_minor: int
    currency: str
    date: str
    note: str | None
    category_id: str | None
    tags: tuple[str, ...] | None
    counterparty_name: str | None
    transfer_group_id: str | None
    created_at: str
    updated_at: str
    is_deleted: bool


@dataclass(frozen=True)
class CategoryDTO:
    """Serializable representation of a category."""

    id: str
    name: str
    parent_id: str | None
    is_deleted: bool


@dataclass(frozen=True)
class BudgetDTO:
    """Serializable representation of a budget."""

    id: str
    name: str | None
    category_id: str
    currency: str
    amount_minor: int
    start_date: str
    end_date: str
    is_deleted: bool


@dataclass(frozen=True)
class GoalDTO:
    """Serializable representation of a savings goal."""

    id: str
    name: str
    target_amount_minor: int
    currency: str
    target_date: str | None
    note: str | None
    created_at: str
    updated_at: str
    is_deleted: bool


@dataclass(frozen=True)
class CurrencyConfigDTO:
    """Serializable representation of a currency configuration."""

    currency: str
    decimals: int
    zero_minor_value: int


@dataclass(frozen=True)
class AccountBalanceDTO:
    """Serializable current balance of an account."""

    account_id: str
    currency: str
    balance_minor: int


@dataclass(frozen=True)
class SumByGroupDTO:
    """Serializable signed total for a grouping key."""

    key: str
    total_minor: int


@dataclass(frozen=True)
class BudgetStatusDTO:
    """Budget evaluation with its spend figures."""

    budget: BudgetDTO
    spent_minor: int
    remaining_minor: int
    percent_used: float


@dataclass(frozen=True)
class TransactionQueryResultDTO:
    """Serializable transaction query result."""

    transactions: tuple[TransactionDTO, ...]
    total_count: int
    total_amount_minor: int


@dataclass(frozen=True)
class CategoryQueryResultDTO:
    """Serializable query result with category sums."""

    result: TransactionQueryResultDTO
    by_category: tuple[SumByGroupDTO, ...]


def to_account_dto(account: Account) -> AccountDTO:
    """Map an account to its DTO."""
    return AccountDTO(
        id=account.id,
        name=account.name,
        currency=account.currency,
        initial_balance_minor=account.initial_balance_minor,
        created_at=account.created_at,
        updated_at=account.updated_at,
        is_archived=account.is_archived,
        is_deleted=account.is_deleted,
    )


def to_transaction_dto(transaction: Transaction) -> TransactionDTO:
    """Map a transaction to its DTO."""
    return TransactionDTO(
        id=transaction.id,
        account_id=transaction.account_id,
        kind=getattr(transaction.kind, "value", transaction.kind),
        amount_minor=transaction.amount_minor,
        currency=transaction.currency,
        date=transaction.date,
        note=transaction.note,
        category_id=transaction.category_id,
        tags=None if transaction.tags is None else tuple(transaction.tags),
        counterparty_name=transaction.counterparty_name,
        transfer_group_id=transaction.transfer_group_id,
        created_at=transaction.created_at,
        updated_at=transaction.updated_at,
        is_deleted=transaction.is_deleted,
    )


def to_category_dto(category: Category) -> CategoryDTO:
    """Map a category to its DTO."""
    return CategoryDTO(
        id=category.id,
        name=category.name,
        parent_id=category.parent_id,
        is_deleted=category.is_deleted,
    )


def to_budget_dto(budget: Budget) -> BudgetDTO:
    """Map a budget to its DTO."""
    return BudgetDTO(
        id=budget.id,
        name=budget.name,
        category_id=budget.category_id,
        currency=budget.currency,
        amount_minor=budget.amount_minor,
        start_date=budget.start_date,
        end_date=budget.end_date,
        is_deleted=budget.is_deleted,
    )


def to_goal_dto(goal: Goal) -> GoalDTO:
    """Map a goal to its DTO."""
    return GoalDTO(
        id=goal.id,
        name=goal.name,
        target_amount_minor=goal.target_amount_minor,
        currency=goal.currency,
        target_date=goal.target_date,
        note=goal.note,
        created_at=goal.created_at,
        updated_at=goal.updated_at,
        is_deleted=goal.is_deleted,
    )


def to_currency_config_dto(config: CurrencyConfig) -> CurrencyConfigDTO:
    """Map a currency configuration to its DTO."""
    return CurrencyConfigDTO(
        currency=config.currency,
        decimals=config.decimals,
        zero_minor_value=config.zero_minor_value,
    )


def to_account_balance_dto(balance: AccountBalance) -> AccountBalanceDTO:
    """Map an account balance to its DTO."""
    return AccountBalanceDTO(
        account_id=balance.account_id,
        currency=balance.currency,
        balance_minor=balance.balance_minor,
    )


def to_sum_by_group_dto(group: SumByGroup) -> SumByGroupDTO:
    """Map a grouped sum to its DTO."""
    return SumByGroupDTO(key=group.key, total_minor=group.total_minor)


def to_budget_status_dto(status: BudgetStatus) -> BudgetStatusDTO:
    """Map a budget evaluation to its DTO."""
    return BudgetStatusDTO(
        budget=to_budget_dto(status.budget),
        spent_minor=status.spent_minor,
        remaining_minor=status.remaining_minor,
        percent_used=status.percent_used,
    )


def to_query_result_dto(
    result: TransactionQueryResult,
) -> TransactionQueryResultDTO:
    """Map a transaction query result to its DTO."""
    return TransactionQueryResultDTO(
        transactions=tuple(
            to_transaction_dto(transaction)
            for transaction in result.transactions
        ),
        total_count=result.total_count,
        total_amount_minor=result.total_amount_minor,
    )


def to_category_query_result_dto(
    result: CategoryQueryResult,
) -> CategoryQueryResultDTO:
    """Map a category query result to its DTO."""
    return CategoryQueryResultDTO(
        result=to_query_result_dto(result.result),
        by_category=tuple(
            to_sum_by_group_dto(group) for group in result.by_category
        ),
    )


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def dto_to_dict(value: Any) -> Any:
    """Convert a DTO (or nested DTOs) to plain data with camelCase keys.

    Args:
        value: DTO, tuple/list of DTOs, or a plain value.

    Returns:
        Any: Dicts, lists and scalars ready for ``json.dumps``.
    """
    if is_dataclass(value) and not isinstance(value, type):
        return {
            _camel_case(item.name): dto_to_dict(getattr(value, item.name))
            for item in fields(value)
        }
    if isinstance(value, (list, tuple)):
        return [dto_to_dict(item) for item in value]
    return value


__all__ = [
    "AccountDTO",
    "TransactionDTO",
    "CategoryDTO",
    "BudgetDTO",
    "GoalDTO",
    "CurrencyConfigDTO",
    "AccountBalanceDTO",
    "SumByGroupDTO",
    "BudgetStatusDTO",
    "TransactionQueryResultDTO",
    "CategoryQueryResultDTO",
    "to_account_dto",
    "to_transaction_dto",
    "to_category_dto",
    "to_budget_dto",
    "to_goal_dto",
    "to_currency_config_dto",
    "to_account_balance_dto",
    "to_sum_by_group_dto",
    "to_budget_status_dto",
    "to_query_result_dto",
    "to_category_query_result_dto",
    "dto_to_dict",
]
