"""Ledger facade grouping the use cases by entity.

Each group wires its use cases to the injected storage and clock and maps
domain records to DTOs. Mutating calls are recorded in the usage log.
"""

from collections.abc import Mapping
from typing import Any

from dericer.application.ports.storage import StoragePort
from dericer.application.ports.time import TimePort
from dericer.application.use_cases import (
    CreateGoalUseCase,
    CreateTransactionUseCase,
    CreateTransferUseCase,
    EvaluateBudgetsUseCase,
    EvaluateBudgetUseCase,
    GetAccountBalancesUseCase,
    GetAccountsUseCase,
    GetAccountUseCase,
    GetBudgetsUseCase,
    GetCategoriesUseCase,
    GetCurrencyTotalsUseCase,
    GetReportSumsUseCase,
    ListCurrencyConfigsUseCase,
    ListGoalsUseCase,
    QueryAndSumByCategoryUseCase,
    QueryTransactionsUseCase,
    RegisterCurrencyConfigUseCase,
    ReportGrouping,
    SoftDeleteTransactionUseCase,
    UpdateGoalUseCase,
    UpdateTransactionUseCase,
)
from dericer.domain.models import (
    AccountId,
    BudgetId,
    CreateGoalCommand,
    CreateTransactionCommand,
    CreateTransferCommand,
    GoalId,
    TransactionFilter,
    TransactionId,
    TransactionSort,
    UpdateGoalCommand,
    UpdateTransactionCommand,
)
from dericer.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)

from .dto import (
    AccountBalanceDTO,
    AccountDTO,
    BudgetDTO,
    BudgetStatusDTO,
    CategoryDTO,
    CategoryQueryResultDTO,
    CurrencyConfigDTO,
    GoalDTO,
    SumByGroupDTO,
    TransactionDTO,
    TransactionQueryResultDTO,
    to_account_balance_dto,
    to_account_dto,
    to_budget_dto,
    to_budget_status_dto,
    to_category_dto,
    to_category_query_result_dto,
    to_currency_config_dto,
    to_goal_dto,
    to_query_result_dto,
    to_sum_by_group_dto,
    to_transaction_dto,
)


class AccountsApi:
    """Account listings and balances."""

    def __init__(self, storage: StoragePort, logger) -> None:
        self._list_all = GetAccountsUseCase(storage)
        self._get_by_id = GetAccountUseCase(storage)
        self._balances = GetAccountBalancesUseCase(storage, logger=logger)
        self._totals = GetCurrencyTotalsUseCase(storage, logger=logger)

    def list_all(self) -> list[AccountDTO]:
        """Return active accounts."""
        return [to_account_dto(account) for account in self._list_all.execute()]

    def get_by_id(self, account_id: AccountId) -> AccountDTO:
        """Return one account.

        Raises:
            NotFoundError: If the account is missing or soft-deleted.
        """
        return to_account_dto(self._get_by_id.execute(account_id))

    def get_balances(self) -> list[AccountBalanceDTO]:
        """Return the balance of every stored account."""
        return [
            to_account_balance_dto(balance)
            for balance in self._balances.execute()
        ]

    def get_currency_totals(
        self,
        visible_only: bool = True,
    ) -> list[SumByGroupDTO]:
        """Return balance totals per currency.

        Args:
            visible_only: Drop currencies whose absolute total is below
                their configured zero threshold.

        Raises:
            ValidationError: If a currency has no registered configuration
                and ``visible_only`` is set.
        """
        return [
            to_sum_by_group_dto(total)
            for total in self._totals.execute(visible_only=visible_only)
        ]


class CategoriesApi:
    """Category listings."""

    def __init__(self, storage: StoragePort) -> None:
        self._list_all = GetCategoriesUseCase(storage)

    def list_all(self) -> list[CategoryDTO]:
        """Return active categories."""
        return [
            to_category_dto(category) for category in self._list_all.execute()
        ]


class TransactionsApi:
    """Transaction commands and queries."""

    def __init__(
        self,
        storage: StoragePort,
        time: TimePort,
        logger,
        usage_logger,
    ) -> None:
        self._create = CreateTransactionUseCase(storage, time, logger=logger)
        self._create_transfer = CreateTransferUseCase(
            storage,
            time,
            logger=logger,
        )
        self._update = UpdateTransactionUseCase(storage, time, logger=logger)
        self._soft_delete = SoftDeleteTransactionUseCase(
            storage,
            time,
            logger=logger,
        )
        self._query = QueryTransactionsUseCase(storage, logger=logger)
        self._usage_logger = usage_logger

    def create(self, command: CreateTransactionCommand) -> TransactionDTO:
        """Record a transaction.

        Raises:
            ValidationError: If the command breaks a transaction invariant.
        """
        transaction = self._create.execute(command)
        self._usage_logger.info(f"transactions.create id={transaction.id}")
        return to_transaction_dto(transaction)

    def create_transfer(
        self,
        command: CreateTransferCommand,
    ) -> tuple[TransactionDTO, TransactionDTO]:
        """Record a transfer as a debit and a credit leg.

        Returns:
            tuple[TransactionDTO, TransactionDTO]: Debit leg, credit leg.
        """
        debit, credit = self._create_transfer.execute(command)
        self._usage_logger.info(
            f"transactions.create_transfer group={debit.transfer_group_id}"
        )
        return to_transaction_dto(debit), to_transaction_dto(credit)

    def update(
        self,
        transaction_id: TransactionId,
        changes: UpdateTransactionCommand | Mapping[str, Any],
    ) -> TransactionDTO:
        """Apply a partial update.

        Args:
            transaction_id: Transaction to update.
            changes: Patch command, or a mapping of changed fields where an
                explicit ``None`` clears ``category_id`` or
                ``counterparty_name`` and an absent key keeps the value.

        Raises:
            NotFoundError: If the transaction is missing or soft-deleted.
            ValidationError: If the merged transaction is invalid.
        """
        if not isinstance(changes, UpdateTransactionCommand):
            changes = UpdateTransactionCommand.from_changes(changes)
        transaction = self._update.execute(transaction_id, changes)
        self._usage_logger.info(f"transactions.update id={transaction_id}")
        return to_transaction_dto(transaction)

    def soft_delete(self, transaction_id: TransactionId) -> None:
        """Soft-delete a transaction; unknown or deleted ids are a no-op."""
        self._soft_delete.execute(transaction_id)
        self._usage_logger.info(f"transactions.soft_delete id={transaction_id}")

    def query(
        self,
        transaction_filter: TransactionFilter | None = None,
        sort: TransactionSort | None = None,
    ) -> TransactionQueryResultDTO:
        """Return matching active transactions with their signed total."""
        return to_query_result_dto(
            self._query.execute(transaction_filter, sort)
        )


class ReportsApi:
    """Filtered listings and grouped sums."""

    def __init__(self, storage: StoragePort, logger) -> None:
        self._query = QueryTransactionsUseCase(storage, logger=logger)
        self._sums = GetReportSumsUseCase(storage, logger=logger)
        self._query_and_sum = QueryAndSumByCategoryUseCase(
            storage,
            logger=logger,
        )

    def query_transactions(
        self,
        transaction_filter: TransactionFilter | None = None,
        sort: TransactionSort | None = None,
    ) -> TransactionQueryResultDTO:
        """Return a filtered, sorted listing with its signed total."""
        return to_query_result_dto(
            self._query.execute(transaction_filter, sort)
        )

    def _grouped(
        self,
        grouping: ReportGrouping,
        transaction_filter: TransactionFilter | None,
    ) -> list[SumByGroupDTO]:
        return [
            to_sum_by_group_dto(group)
            for group in self._sums.execute(grouping, transaction_filter)
        ]

    def sum_by_account(
        self,
        transaction_filter: TransactionFilter | None = None,
    ) -> list[SumByGroupDTO]:
        """Sum signed amounts per account."""
        return self._grouped(ReportGrouping.ACCOUNT, transaction_filter)

    def sum_by_category(
        self,
        transaction_filter: TransactionFilter | None = None,
    ) -> list[SumByGroupDTO]:
        """Sum per category, rolling each amount up to every ancestor."""
        return self._grouped(ReportGrouping.CATEGORY, transaction_filter)

    def sum_by_currency(
        self,
        transaction_filter: TransactionFilter | None = None,
    ) -> list[SumByGroupDTO]:
        """Sum signed amounts per currency."""
        return self._grouped(ReportGrouping.CURRENCY, transaction_filter)

    def query_and_sum_by_category(
        self,
        transaction_filter: TransactionFilter | None = None,
        sort: TransactionSort | None = None,
    ) -> CategoryQueryResultDTO:
        """Return a listing and its category sums from one filtered set."""
        return to_category_query_result_dto(
            self._query_and_sum.execute(transaction_filter, sort)
        )


class BudgetsApi:
    """Budget listings and evaluation."""

    def __init__(self, storage: StoragePort, logger) -> None:
        self._list_all = GetBudgetsUseCase(storage)
        self._evaluate_all = EvaluateBudgetsUseCase(storage, logger=logger)
        self._evaluate_one = EvaluateBudgetUseCase(storage, logger=logger)

    def list_all(self) -> list[BudgetDTO]:
        """Return active budgets."""
        return [to_budget_dto(budget) for budget in self._list_all.execute()]

    def evaluate_all(self) -> list[BudgetStatusDTO]:
        """Evaluate every active budget."""
        return [
            to_budget_status_dto(status)
            for status in self._evaluate_all.execute()
        ]

    def evaluate_one(self, budget_id: BudgetId) -> BudgetStatusDTO:
        """Evaluate one budget.

        Raises:
            NotFoundError: If the budget is missing or soft-deleted.
        """
        return to_budget_status_dto(self._evaluate_one.execute(budget_id))


class GoalsApi:
    """Savings goal commands and listing."""

    def __init__(
        self,
        storage: StoragePort,
        time: TimePort,
        logger,
        usage_logger,
    ) -> None:
        self._list = ListGoalsUseCase(storage)
        self._create = CreateGoalUseCase(storage, time, logger=logger)
        self._update = UpdateGoalUseCase(storage, time, logger=logger)
        self._usage_logger = usage_logger

    def list(self) -> list[GoalDTO]:
        """Return active goals in storage order."""
        return [to_goal_dto(goal) for goal in self._list.execute()]

    def create(self, command: CreateGoalCommand) -> GoalDTO:
        """Create a savings goal.

        Raises:
            ValidationError: If the target amount is not positive.
        """
        goal = self._create.execute(command)
        self._usage_logger.info(f"goals.create id={goal.id}")
        return to_goal_dto(goal)

    def update(
        self,
        goal_id: GoalId,
        changes: UpdateGoalCommand | Mapping[str, Any],
    ) -> GoalDTO:
        """Apply a partial update, including soft delete and restore.

        Args:
            goal_id: Goal to update.
            changes: Patch command, or a mapping of changed fields where an
                explicit ``None`` clears ``target_date`` or ``note``.

        Raises:
            NotFoundError: If no goal has the id.
            ValidationError: If the merged target amount is not positive.
        """
        if not isinstance(changes, UpdateGoalCommand):
            changes = UpdateGoalCommand.from_changes(changes)
        goal = self._update.execute(goal_id, changes)
        self._usage_logger.info(f"goals.update id={goal_id}")
        return to_goal_dto(goal)


class CurrenciesApi:
    """Currency configuration registry."""

    def __init__(self, storage: StoragePort, logger, usage_logger) -> None:
        self._list_all = ListCurrencyConfigsUseCase(storage)
        self._register = RegisterCurrencyConfigUseCase(storage, logger=logger)
        self._usage_logger = usage_logger

    def list_all(self) -> list[CurrencyConfigDTO]:
        """Return registered currency configurations."""
        return [
            to_currency_config_dto(config)
            for config in self._list_all.execute()
        ]

    def register(
        self,
        currency: str,
        decimals: int | None = None,
        zero_minor_value: int | None = None,
    ) -> CurrencyConfigDTO:
        """Add or replace the configuration of a currency.

        Raises:
            ValidationError: If decimals or the zero threshold are invalid.
        """
        config = self._register.execute(
            currency,
            decimals=decimals,
            zero_minor_value=zero_minor_value,
        )
        self._usage_logger.info(f"currencies.register currency={currency}")
        return to_currency_config_dto(config)


class LedgerCore:
    """Entry point exposing the ledger operations grouped by entity."""

    def __init__(
        self,
        storage: StoragePort,
        time: TimePort,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Wire the API groups.

        Args:
            storage: Port persisting ledger records.
            time: Clock used for timestamps.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger recording mutating calls.
        """
        resolved_logger = logger or get_app_logger()
        resolved_usage = usage_logger or get_usage_logger()
        self.accounts = AccountsApi(storage, resolved_logger)
        self.categories = CategoriesApi(storage)
        self.transactions = TransactionsApi(
            storage,
            time,
            resolved_logger,
            resolved_usage,
        )
        self.reports = ReportsApi(storage, resolved_logger)
        self.budgets = BudgetsApi(storage, resolved_logger)
        self.goals = GoalsApi(storage, time, resolved_logger, resolved_usage)
        self.currencies = CurrenciesApi(
            storage,
            resolved_logger,
            resolved_usage,
        )


def create_core(
    storage: StoragePort,
    time: TimePort,
    logger=None,
    usage_logger=None,
) -> LedgerCore:
    """Build the ledger facade over the given storage and clock."""
    return LedgerCore(storage, time, logger=logger, usage_logger=usage_logger)


__all__ = [
    "AccountsApi",
    "CategoriesApi",
    "TransactionsApi",
    "ReportsApi",
    "BudgetsApi",
    "GoalsApi",
    "CurrenciesApi",
    "LedgerCore",
    "create_core",
]
