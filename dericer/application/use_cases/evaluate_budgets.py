"""Use cases to list and evaluate budgets."""

from dericer.application.ports.storage import StoragePort
from dericer.domain.errors import NotFoundError
from dericer.domain.models import Budget, BudgetId, BudgetStatus
from dericer.domain.policies import exclude_deleted, is_active
from dericer.domain.services.budgets import calculate_budget_status
from dericer.infrastructure.logging.logger import get_app_logger


class GetBudgetsUseCase:
    """List the budgets that are not soft-deleted."""

    def __init__(self, storage: StoragePort) -> None:
        """Initialize the use case with its required dependencies."""
        self._storage = storage

    def execute(self) -> list[Budget]:
        """Return every active budget in storage order."""
        return exclude_deleted(self._storage.load_all_budgets())


class EvaluateBudgetsUseCase:
    """Evaluate spend for every active budget."""

    def __init__(self, storage: StoragePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            storage: Port providing ledger records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._storage = storage
        self._logger = logger or get_app_logger()

    def execute(self) -> list[BudgetStatus]:
        """Return one status per active budget."""
        budgets = exclude_deleted(self._storage.load_all_budgets())
        transactions = self._storage.load_all_transactions()
        categories = self._storage.load_all_categories()
        statuses = [
            calculate_budget_status(
                budget,
                transactions,
                categories,
                logger=self._logger,
            )
            for budget in budgets
        ]
        over_budget = sum(1 for status in statuses if status.remaining_minor < 0)
        self._logger.info(
            f"Evaluated {len(statuses)} budgets, {over_budget} over budget"
        )
        return statuses


class EvaluateBudgetUseCase:
    """Evaluate spend for a single budget."""

    def __init__(self, storage: StoragePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            storage: Port providing ledger records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._storage = storage
        self._logger = logger or get_app_logger()

    def execute(self, budget_id: BudgetId) -> BudgetStatus:
        """Return the status of the budget.

        Raises:
            NotFoundError: If the budget is missing or soft-deleted.
        """
        budget = self._storage.get_budget_by_id(budget_id)
        if not is_active(budget):
            raise NotFoundError(f"Budget not found: {budget_id}")
        return calculate_budget_status(
            budget,
            self._storage.load_all_transactions(),
            self._storage.load_all_categories(),
            logger=self._logger,
        )


__all__ = ["GetBudgetsUseCase", "EvaluateBudgetsUseCase", "EvaluateBudgetUseCase"]
