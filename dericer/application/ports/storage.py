"""Port for ledger record storage.

Implementations upsert records by id and return full snapshots on reads.
Each call is expected to be atomic on its own; no consistency is assumed
across calls.
"""

from collections.abc import Sequence
from typing import Protocol

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


class StoragePort(Protocol):
    """Port exposing key-addressed access to every ledger collection."""

    def load_all_accounts(self) -> list[Account]:
        """Return every stored account, deleted ones included."""

    def save_account(self, account: Account) -> None:
        """Insert or replace an account by id."""

    def get_account_by_id(self, account_id: AccountId) -> Account | None:
        """Return the account with the id, or None."""

    def load_all_transactions(self) -> list[Transaction]:
        """Return every stored transaction, deleted ones included."""

    def save_transaction(self, transaction: Transaction) -> None:
        """Insert or replace a transaction by id."""

    def save_transactions(self, transactions: Sequence[Transaction]) -> None:
        """Insert or replace several transactions, all or none."""

    def get_transaction_by_id(
        self,
        transaction_id: TransactionId,
    ) -> Transaction | None:
        """Return the transaction with the id, or None."""

    def load_all_categories(self) -> list[Category]:
        """Return every stored category."""

    def save_category(self, category: Category) -> None:
        """Insert or replace a category by id."""

    def get_category_by_id(self, category_id: CategoryId) -> Category | None:
        """Return the category with the id, or None."""

    def load_all_budgets(self) -> list[Budget]:
        """Return every stored budget."""

    def save_budget(self, budget: Budget) -> None:
        """Insert or replace a budget by id."""

    def get_budget_by_id(self, budget_id: BudgetId) -> Budget | None:
        """Return the budget with the id, or None."""

    def load_all_goals(self) -> list[Goal]:
        """Return every stored goal."""

    def save_goal(self, goal: Goal) -> None:
        """Insert or replace a goal by id."""

    def get_goal_by_id(self, goal_id: GoalId) -> Goal | None:
        """Return the goal with the id, or None."""

    def load_currency_configs(self) -> list[CurrencyConfig]:
        """Return all currency configurations."""

    def save_currency_configs(self, configs: Sequence[CurrencyConfig]) -> None:
        """Replace the whole currency configuration collection."""


__all__ = ["StoragePort"]
