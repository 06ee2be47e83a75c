"""Domain package for ledger rules and core models."""

from .errors import DomainError, NotFoundError, ValidationError
from .models import (
    Account,
    AccountBalance,
    Budget,
    BudgetStatus,
    Category,
    CurrencyConfig,
    Goal,
    SumByGroup,
    Transaction,
    TransactionFilter,
    TransactionKind,
    TransactionSort,
)
from .policies import exclude_deleted, is_active
from .services import (
    calculate_budget_status,
    compute_account_balances,
    filter_transactions,
    get_signed_amount_minor,
    sort_transactions,
    sum_by_category_hierarchy,
)

__all__ = [
    "Account",
    "AccountBalance",
    "Budget",
    "BudgetStatus",
    "Category",
    "CurrencyConfig",
    "DomainError",
    "Goal",
    "NotFoundError",
    "SumByGroup",
    "Transaction",
    "TransactionFilter",
    "TransactionKind",
    "TransactionSort",
    "ValidationError",
    "calculate_budget_status",
    "compute_account_balances",
    "exclude_deleted",
    "filter_transactions",
    "get_signed_amount_minor",
    "is_active",
    "sort_transactions",
    "sum_by_category_hierarchy",
]
