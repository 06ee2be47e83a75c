"""Application use cases package."""

from .evaluate_budgets import (
    EvaluateBudgetsUseCase,
    EvaluateBudgetUseCase,
    GetBudgetsUseCase,
)
from .get_account_balances import (
    GetAccountBalancesUseCase,
    GetCurrencyTotalsUseCase,
)
from .get_accounts import GetAccountsUseCase, GetAccountUseCase
from .get_categories import GetCategoriesUseCase
from .get_report_sums import GetReportSumsUseCase, ReportGrouping
from .manage_currency_configs import (
    ListCurrencyConfigsUseCase,
    RegisterCurrencyConfigUseCase,
)
from .manage_goals import CreateGoalUseCase, ListGoalsUseCase, UpdateGoalUseCase
from .manage_transactions import (
    CreateTransactionUseCase,
    CreateTransferUseCase,
    SoftDeleteTransactionUseCase,
    UpdateTransactionUseCase,
)
from .query_transactions import (
    QueryAndSumByCategoryUseCase,
    QueryTransactionsUseCase,
)

__all__ = [
    "CreateGoalUseCase",
    "CreateTransactionUseCase",
    "CreateTransferUseCase",
    "EvaluateBudgetUseCase",
    "EvaluateBudgetsUseCase",
    "GetAccountBalancesUseCase",
    "GetAccountUseCase",
    "GetAccountsUseCase",
    "GetBudgetsUseCase",
    "GetCategoriesUseCase",
    "GetCurrencyTotalsUseCase",
    "GetReportSumsUseCase",
    "ListCurrencyConfigsUseCase",
    "ListGoalsUseCase",
    "QueryAndSumByCategoryUseCase",
    "QueryTransactionsUseCase",
    "RegisterCurrencyConfigUseCase",
    "ReportGrouping",
    "SoftDeleteTransactionUseCase",
    "UpdateGoalUseCase",
    "UpdateTransactionUseCase",
]
