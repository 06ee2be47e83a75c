"""In-process storage adapter keeping records in dictionaries."""

from collections.abc import Sequence

from dericer.application.ports.storage import StoragePort
from dericer.domain.models import (
    Account,
    AccountId,
    Budget,
    BudgetId,
    Category,
    CategoryId,
    CurrencyConfig,
    Goal,
    GoalId,
    Transaction,
    TransactionId,
)


class InMemoryStorage(StoragePort):
    """Storage backed by insertion-ordered dicts keyed by id.

    Records are frozen dataclasses, so snapshots can share instances.
    """

    def __init__(self) -> None:
        self._accounts: dict[str, Account] = {}
        self._transactions: dict[str, Transaction] = {}
        self._categories: dict[str, Category] = {}
        self._budgets: dict[str, Budget] = {}
        self._goals: dict[str, Goal] = {}
        self._currency_configs: list[CurrencyConfig] = []

    def load_all_accounts(self) -> list[Account]:
        return list(self._accounts.values())

    def save_account(self, account: Account) -> None:
        self._accounts[account.id] = account

    def get_account_by_id(self, account_id: AccountId) -> Account | None:
        return self._accounts.get(account_id)

    def load_all_transactions(self) -> list[Transaction]:
        return list(self._transactions.values())

    def save_transaction(self, transaction: Transaction) -> None:
        self._transactions[transaction.id] = transaction

    def save_transactions(self, transactions: Sequence[Transaction]) -> None:
        self._transactions.update((tx.id, tx) for tx in list(transactions))

    def get_transaction_by_id(
        self,
        transaction_id: TransactionId,
    ) -> Transaction | None:
        return self._transactions.get(transaction_id)

    def load_all_categories(self) -> list[Category]:
        return list(self._categories.values())

    def save_category(self, category: Category) -> None:
        self._categories[category.id] = category

    def get_category_by_id(self, category_id: CategoryId) -> Category | None:
        return self._categories.get(category_id)

    def load_all_budgets(self) -> list[Budget]:
        return list(self._budgets.values())

    def save_budget(self, budget: Budget) -> None:
        self._budgets[budget.id] = budget

    def get_budget_by_id(self, budget_id: BudgetId) -> Budget | None:
        return self._budgets.get(budget_id)

    def load_all_goals(self) -> list[Goal]:
        return list(self._goals.values())

    def save_goal(self, goal: Goal) -> None:
        self._goals[goal.id] = goal

    def get_goal_by_id(self, goal_id: GoalId) -> Goal | None:
        return self._goals.get(goal_id)

    def load_currency_configs(self) -> list[CurrencyConfig]:
        return list(self._currency_configs)

    def save_currency_configs(self, configs: Sequence[CurrencyConfig]) -> None:
        self._currency_configs = list(configs)


__all__ = ["InMemoryStorage"]
