"""Tests for the SQLAlchemy storage adapter against in-memory SQLite."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.pool import StaticPool

from dericer.domain.models import (
    Account,
    Budget,
    CurrencyConfig,
    Transaction,
    TransactionKind,
)
from dericer.infrastructure.sqlalchemy_storage import SqlAlchemyStorage

STAMP = "2024-01-01T00:00:00.000Z"


class _SqliteDbPort:
    def __init__(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )

    def get_ledger_engine(self):
        return self.engine


@pytest.fixture
def storage() -> SqlAlchemyStorage:
    adapter = SqlAlchemyStorage(_SqliteDbPort(), logger=MagicMock())
    adapter.ensure_schema()
    return adapter


def _tx(tx_id: str, amount_minor: int = 100, **overrides) -> Transaction:
    values = {
        "id": tx_id,
        "account_id": "checking",
        "kind": TransactionKind.INCOME,
        "amount_minor": amount_minor,
        "currency": "USD",
        "date": "2024-01-02",
        "created_at": STAMP,
        "updated_at": STAMP,
    }
    values.update(overrides)
    return Transaction(**values)


def test_ensure_schema_is_idempotent(storage: SqlAlchemyStorage) -> None:
    storage.ensure_schema()

    assert storage.load_all_accounts() == []


def test_transaction_round_trip_keeps_tags_and_flags(
    storage: SqlAlchemyStorage,
) -> None:
    transaction = _tx(
        "t1",
        tags=("salary", "2024"),
        note="January",
        transfer_group_id="grp",
    )

    storage.save_transaction(transaction)

    assert storage.get_transaction_by_id("t1") == transaction
    assert storage.get_transaction_by_id("missing") is None


def test_upsert_updates_row_and_keeps_first_save_order(
    storage: SqlAlchemyStorage,
) -> None:
    storage.save_transaction(_tx("t1"))
    storage.save_transaction(_tx("t2"))

    storage.save_transaction(_tx("t1", amount_minor=555, is_deleted=True))

    stored = storage.load_all_transactions()
    assert [tx.id for tx in stored] == ["t1", "t2"]
    assert stored[0].amount_minor == 555
    assert stored[0].is_deleted is True


def test_save_transactions_rolls_back_whole_batch(
    storage: SqlAlchemyStorage,
) -> None:
    """A failing record leaves none of the batch persisted."""
    broken = _tx("t2", date=None)

    with pytest.raises(Exception):
        storage.save_transactions([_tx("t1"), broken])

    assert storage.load_all_transactions() == []


def test_accounts_and_budgets_round_trip(storage: SqlAlchemyStorage) -> None:
    account = Account(
        id="checking",
        name="Checking",
        currency="USD",
        initial_balance_minor=-250,
        created_at=STAMP,
        updated_at=STAMP,
        is_archived=True,
    )
    budget = Budget(
        id="b1",
        category_id="food",
        currency="USD",
        amount_minor=10000,
        start_date="2024-01-01",
        end_date="2024-01-31",
        name="Food",
    )

    storage.save_account(account)
    storage.save_budget(budget)

    assert storage.load_all_accounts() == [account]
    assert storage.get_budget_by_id("b1") == budget


def test_currency_configs_replace_previous_rows(
    storage: SqlAlchemyStorage,
) -> None:
    storage.save_currency_configs(
        [
            CurrencyConfig(currency="USD", decimals=2, zero_minor_value=0),
            CurrencyConfig(currency="EUR", decimals=2, zero_minor_value=100),
        ]
    )
    storage.save_currency_configs(
        [CurrencyConfig(currency="JPY", decimals=0, zero_minor_value=1)]
    )

    assert storage.load_currency_configs() == [
        CurrencyConfig(currency="JPY", decimals=0, zero_minor_value=1)
    ]


def test_tables_carry_position_column(storage: SqlAlchemyStorage) -> None:
    storage.save_account(
        Account(
            id="a",
            name="A",
            currency="USD",
            initial_balance_minor=0,
            created_at=STAMP,
            updated_at=STAMP,
        )
    )

    with storage._db_port.get_ledger_engine().connect() as conn:
        position = conn.execute(
            text("SELECT position FROM ledger_accounts WHERE id = 'a'")
        ).scalar_one()

    assert position == 1
