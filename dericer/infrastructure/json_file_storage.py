"""Storage adapter persisting each collection as a JSON array file.

Records use camelCase keys. Every save reads the collection, upserts by id
and rewrites the whole file through a temporary file and ``os.replace``.
"""

import json
import os
from collections.abc import Sequence
from pathlib import Path
from typing import Any, TypeVar

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
from dericer.infrastructure.logging.logger import get_app_logger
from dericer.infrastructure.records import from_json_record, to_json_record

FILE_ACCOUNTS = "accounts.json"
FILE_TRANSACTIONS = "transactions.json"
FILE_CATEGORIES = "categories.json"
FILE_BUDGETS = "budgets.json"
FILE_GOALS = "goals.json"
FILE_CURRENCY_CONFIGS = "currency-configs.json"

E = TypeVar("E")


class JsonFileStorage(StoragePort):
    """Storage rooted in a directory of JSON files."""

    def __init__(self, root_dir: Path | str, logger=None) -> None:
        """Initialize the storage.

        Args:
            root_dir: Directory holding the collection files; created on
                first write.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._root_dir = Path(root_dir)
        self._logger = logger or get_app_logger()

    def _path(self, file_name: str) -> Path:
        return self._root_dir / file_name

    def _read_records(self, file_name: str) -> list[dict[str, Any]]:
        path = self._path(file_name)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        parsed = json.loads(raw)
        if not isinstance(parsed, list):
            self._logger.warning(
                f"Ignoring non-array content in {path}"
            )
            return []
        return parsed

    def _write_records(
        self,
        file_name: str,
        records: list[dict[str, Any]],
    ) -> None:
        self._root_dir.mkdir(parents=True, exist_ok=True)
        path = self._path(file_name)
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(records, indent=2), encoding="utf-8")
        os.replace(tmp_path, path)

    def _load(self, file_name: str, entity_cls: type[E]) -> list[E]:
        return [
            from_json_record(entity_cls, record)
            for record in self._read_records(file_name)
        ]

    def _get(self, file_name: str, entity_cls: type[E], entity_id: str):
        for record in self._read_records(file_name):
            if record.get("id") == entity_id:
                return from_json_record(entity_cls, record)
        return None

    def _upsert(self, file_name: str, entities: Sequence) -> None:
        records = self._read_records(file_name)
        positions = {
            record.get("id"): index for index, record in enumerate(records)
        }
        for entity in entities:
            record = to_json_record(entity)
            index = positions.get(entity.id)
            if index is None:
                positions[entity.id] = len(records)
                records.append(record)
            else:
                records[index] = record
        self._write_records(file_name, records)

    def load_all_accounts(self) -> list[Account]:
        return self._load(FILE_ACCOUNTS, Account)

    def save_account(self, account: Account) -> None:
        self._upsert(FILE_ACCOUNTS, [account])

    def get_account_by_id(self, account_id: AccountId) -> Account | None:
        return self._get(FILE_ACCOUNTS, Account, account_id)

    def load_all_transactions(self) -> list[Transaction]:
        return self._load(FILE_TRANSACTIONS, Transaction)

    def save_transaction(self, transaction: Transaction) -> None:
        self._upsert(FILE_TRANSACTIONS, [transaction])

    def save_transactions(self, transactions: Sequence[Transaction]) -> None:
        self._upsert(FILE_TRANSACTIONS, list(transactions))

    def get_transaction_by_id(
        self,
        transaction_id: TransactionId,
    ) -> Transaction | None:
        return self._get(FILE_TRANSACTIONS, Transaction, transaction_id)

    def load_all_categories(self) -> list[Category]:
        return self._load(FILE_CATEGORIES, Category)

    def save_category(self, category: Category) -> None:
        self._upsert(FILE_CATEGORIES, [category])

    def get_category_by_id(self, category_id: CategoryId) -> Category | None:
        return self._get(FILE_CATEGORIES, Category, category_id)

    def load_all_budgets(self) -> list[Budget]:
        return self._load(FILE_BUDGETS, Budget)

    def save_budget(self, budget: Budget) -> None:
        self._upsert(FILE_BUDGETS, [budget])

    def get_budget_by_id(self, budget_id: BudgetId) -> Budget | None:
        return self._get(FILE_BUDGETS, Budget, budget_id)

    def load_all_goals(self) -> list[Goal]:
        return self._load(FILE_GOALS, Goal)

    def save_goal(self, goal: Goal) -> None:
        self._upsert(FILE_GOALS, [goal])

    def get_goal_by_id(self, goal_id: GoalId) -> Goal | None:
        return self._get(FILE_GOALS, Goal, goal_id)

    def load_currency_configs(self) -> list[CurrencyConfig]:
        return self._load(FILE_CURRENCY_CONFIGS, CurrencyConfig)

    def save_currency_configs(self, configs: Sequence[CurrencyConfig]) -> None:
        self._write_records(
            FILE_CURRENCY_CONFIGS,
            [to_json_record(config) for config in configs],
        )


__all__ = ["JsonFileStorage"]
