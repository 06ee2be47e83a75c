"""SQLAlchemy storage adapter keeping ledger collections in SQL tables.

Tables carry a ``position`` column so reads return records in first-save
order, matching the file and in-memory adapters.
"""

import json
from collections.abc import Sequence
from typing import Any, TypeVar

from sqlalchemy import text

from dericer.application.ports.database import DatabaseEnginePort
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
from dericer.infrastructure.records import from_record, to_record

E = TypeVar("E")

TABLE_COLUMNS: dict[str, tuple[tuple[str, str], ...]] = {
    "ledger_accounts": (
        ("id", "TEXT PRIMARY KEY"),
        ("name", "TEXT NOT NULL"),
        ("currency", "TEXT NOT NULL"),
        ("initial_balance_minor", "BIGINT NOT NULL"),
        ("created_at", "TEXT NOT NULL"),
        ("updated_at", "TEXT NOT NULL"),
        ("is_archived", "BOOLEAN NOT NULL"),
        ("is_deleted", "BOOLEAN NOT NULL"),
    ),
    "ledger_transactions": (
        ("id", "TEXT PRIMARY KEY"),
        ("account_id", "TEXT NOT NULL"),
        ("kind", "TEXT NOT NULL"),
        ("amount_minor", "BIGINT NOT NULL"),
        ("currency", "TEXT NOT NULL"),
        ("date", "TEXT NOT NULL"),
        ("created_at", "TEXT NOT NULL"),
        ("updated_at", "TEXT NOT NULL"),
        ("note", "TEXT"),
        ("category_id", "TEXT"),
        ("tags", "TEXT"),
        ("counterparty_name", "TEXT"),
        ("transfer_group_id", "TEXT"),
        ("is_deleted", "BOOLEAN NOT NULL"),
    ),
    "ledger_categories": (
        ("id", "TEXT PRIMARY KEY"),
        ("name", "TEXT NOT NULL"),
        ("parent_id", "TEXT"),
        ("is_deleted", "BOOLEAN NOT NULL"),
    ),
    "ledger_budgets": (
        ("id", "TEXT PRIMARY KEY"),
        ("category_id", "TEXT NOT NULL"),
        ("currency", "TEXT NOT NULL"),
        ("amount_minor", "BIGINT NOT NULL"),
        ("start_date", "TEXT NOT NULL"),
        ("end_date", "TEXT NOT NULL"),
        ("name", "TEXT"),
        ("is_deleted", "BOOLEAN NOT NULL"),
    ),
    "ledger_goals": (
        ("id", "TEXT PRIMARY KEY"),
        ("name", "TEXT NOT NULL"),
        ("target_amount_minor", "BIGINT NOT NULL"),
        ("currency", "TEXT NOT NULL"),
        ("created_at", "TEXT NOT NULL"),
        ("updated_at", "TEXT NOT NULL"),
        ("target_date", "TEXT"),
        ("note", "TEXT"),
        ("is_deleted", "BOOLEAN NOT NULL"),
    ),
    "ledger_currency_configs": (
        ("currency", "TEXT PRIMARY KEY"),
        ("decimals", "INTEGER NOT NULL"),
        ("zero_minor_value", "BIGINT NOT NULL"),
    ),
}

TABLE_ACCOUNTS = "ledger_accounts"
TABLE_TRANSACTIONS = "ledger_transactions"
TABLE_CATEGORIES = "ledger_categories"
TABLE_BUDGETS = "ledger_budgets"
TABLE_GOALS = "ledger_goals"
TABLE_CURRENCY_CONFIGS = "ledger_currency_configs"


def _create_table_sql(table: str) -> str:
    columns = ",\n    ".join(
        f"{name} {definition}" for name, definition in TABLE_COLUMNS[table]
    )
    return (
        f"CREATE TABLE IF NOT EXISTS {table} (\n"
        f"    position INTEGER NOT NULL,\n"
        f"    {columns}\n"
        f")"
    )


def _column_names(table: str) -> list[str]:
    return [name for name, _ in TABLE_COLUMNS[table]]


def _select_sql(table: str, where_id: bool = False):
    columns = ", ".join(_column_names(table))
    where = " WHERE id = :id" if where_id else ""
    return text(f"SELECT {columns} FROM {table}{where} ORDER BY position")


def _upsert_sql(table: str):
    names = _column_names(table)
    updates = ", ".join(
        f"{name} = excluded.{name}" for name in names if name != "id"
    )
    return text(
        f"""
        INSERT INTO {table} (position, {", ".join(names)})
        VALUES (
            (SELECT COALESCE(MAX(position), 0) + 1 FROM {table}),
            {", ".join(f":{name}" for name in names)}
        )
        ON CONFLICT (id) DO UPDATE SET {updates}
        """
    )


def _insert_sql(table: str):
    names = _column_names(table)
    return text(
        f"""
        INSERT INTO {table} (position, {", ".join(names)})
        VALUES (:position, {", ".join(f":{name}" for name in names)})
        """
    )


def _encode_tags(record: dict[str, Any]) -> dict[str, Any]:
    if "tags" in record and record["tags"] is not None:
        record["tags"] = json.dumps(record["tags"])
    return record


def _decode_tags(record: dict[str, Any]) -> dict[str, Any]:
    if record.get("tags") is not None:
        record["tags"] = json.loads(record["tags"])
    return record


class SqlAlchemyStorage(StoragePort):
    """Storage backed by SQLAlchemy raw SQL statements."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the storage.

        Args:
            db_port: Port providing access to the ledger engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def ensure_schema(self) -> None:
        """Create the ledger tables when they do not exist yet."""
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            for table in TABLE_COLUMNS:
                conn.exec_driver_sql(_create_table_sql(table))
        self._logger.info("Ledger schema ensured")

    def _load(self, table: str, entity_cls: type[E]) -> list[E]:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(_select_sql(table)).all()
        return [
            from_record(entity_cls, _decode_tags(dict(row._mapping)))
            for row in rows
        ]

    def _get(self, table: str, entity_cls: type[E], entity_id: str):
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            row = conn.execute(
                _select_sql(table, where_id=True),
                {"id": entity_id},
            ).first()
        if row is None:
            return None
        return from_record(entity_cls, _decode_tags(dict(row._mapping)))

    def _upsert(self, table: str, entities: Sequence) -> None:
        statement = _upsert_sql(table)
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            for entity in entities:
                conn.execute(statement, _encode_tags(to_record(entity)))

    def load_all_accounts(self) -> list[Account]:
        return self._load(TABLE_ACCOUNTS, Account)

    def save_account(self, account: Account) -> None:
        self._upsert(TABLE_ACCOUNTS, [account])

    def get_account_by_id(self, account_id: AccountId) -> Account | None:
        return self._get(TABLE_ACCOUNTS, Account, account_id)

    def load_all_transactions(self) -> list[Transaction]:
        return self._load(TABLE_TRANSACTIONS, Transaction)

    def save_transaction(self, transaction: Transaction) -> None:
        self._upsert(TABLE_TRANSACTIONS, [transaction])

    def save_transactions(self, transactions: Sequence[Transaction]) -> None:
        self._upsert(TABLE_TRANSACTIONS, list(transactions))

    def get_transaction_by_id(
        self,
        transaction_id: TransactionId,
    ) -> Transaction | None:
        return self._get(TABLE_TRANSACTIONS, Transaction, transaction_id)

    def load_all_categories(self) -> list[Category]:
        return self._load(TABLE_CATEGORIES, Category)

    def save_category(self, category: Category) -> None:
        self._upsert(TABLE_CATEGORIES, [category])

    def get_category_by_id(self, category_id: CategoryId) -> Category | None:
        return self._get(TABLE_CATEGORIES, Category, category_id)

    def load_all_budgets(self) -> list[Budget]:
        return self._load(TABLE_BUDGETS, Budget)

    def save_budget(self, budget: Budget) -> None:
        self._upsert(TABLE_BUDGETS, [budget])

    def get_budget_by_id(self, budget_id: BudgetId) -> Budget | None:
        return self._get(TABLE_BUDGETS, Budget, budget_id)

    def load_all_goals(self) -> list[Goal]:
        return self._load(TABLE_GOALS, Goal)

    def save_goal(self, goal: Goal) -> None:
        self._upsert(TABLE_GOALS, [goal])

    def get_goal_by_id(self, goal_id: GoalId) -> Goal | None:
        return self._get(TABLE_GOALS, Goal, goal_id)

    def load_currency_configs(self) -> list[CurrencyConfig]:
        return self._load(TABLE_CURRENCY_CONFIGS, CurrencyConfig)

    def save_currency_configs(self, configs: Sequence[CurrencyConfig]) -> None:
        """Replace the stored currency configurations."""
        payload = [
            {"position": index, **to_record(config)}
            for index, config in enumerate(configs, start=1)
        ]
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(f"DELETE FROM {TABLE_CURRENCY_CONFIGS}")
            if payload:
                conn.execute(_insert_sql(TABLE_CURRENCY_CONFIGS), payload)


__all__ = ["SqlAlchemyStorage"]
