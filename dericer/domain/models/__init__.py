"""Domain models package."""

from .commands import (
    CreateGoalCommand,
    CreateTransactionCommand,
    CreateTransferCommand,
    UpdateGoalCommand,
    UpdateTransactionCommand,
)
from .currency import CurrencyConfig, Money
from .ids import (
    AccountId,
    BudgetId,
    CategoryId,
    GoalId,
    TransactionId,
    TransferGroupId,
    generate_id,
)
from .ledger import (
    Account,
    Budget,
    Category,
    Goal,
    Transaction,
    TransactionKind,
)
from .patch import CLEAR, UNCHANGED, SetTo
from .reports import (
    AccountBalance,
    BudgetStatus,
    CategoryQueryResult,
    SortDirection,
    SortField,
    SumByGroup,
    TransactionFilter,
    TransactionQueryResult,
    TransactionSort,
)

__all__ = [
    "Account",
    "AccountBalance",
    "AccountId",
    "Budget",
    "BudgetId",
    "BudgetStatus",
    "CLEAR",
    "Category",
    "CategoryId",
    "CategoryQueryResult",
    "CreateGoalCommand",
    "CreateTransactionCommand",
    "CreateTransferCommand",
    "CurrencyConfig",
    "Goal",
    "GoalId",
    "Money",
    "SetTo",
    "SortDirection",
    "SortField",
    "SumByGroup",
    "Transaction",
    "TransactionFilter",
    "TransactionId",
    "TransactionKind",
    "TransactionQueryResult",
    "TransactionSort",
    "TransferGroupId",
    "UNCHANGED",
    "UpdateGoalCommand",
    "UpdateTransactionCommand",
    "generate_id",
]
