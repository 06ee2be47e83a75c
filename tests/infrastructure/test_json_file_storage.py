"""Tests for the JSON file storage adapter."""

import json
from pathlib import Path
from unittest.mock import MagicMock

from dericer.domain.models import (
    Account,
    Category,
    CurrencyConfig,
    Goal,
    Transaction,
    TransactionKind,
)
from dericer.infrastructure.json_file_storage import JsonFileStorage

STAMP = "2024-01-01T00:00:00.000Z"


def _tx(tx_id: str, amount_minor: int = 100, **overrides) -> Transaction:
    values = {
        "id": tx_id,
        "account_id": "checking",
        "kind": TransactionKind.EXPENSE,
        "amount_minor": amount_minor,
        "currency": "USD",
        "date": "2024-01-02",
        "tags": ("food", "weekly"),
        "created_at": STAMP,
        "updated_at": STAMP,
    }
    values.update(overrides)
    return Transaction(**values)


def test_missing_files_read_as_empty_collections(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path / "data", logger=MagicMock())

    assert storage.load_all_accounts() == []
    assert storage.load_all_transactions() == []
    assert storage.load_currency_configs() == []
    assert storage.get_goal_by_id("missing") is None


def test_save_transaction_round_trips_entity(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path, logger=MagicMock())
    transaction = _tx("t1", note="Groceries")

    storage.save_transaction(transaction)

    assert storage.get_transaction_by_id("t1") == transaction
    raw = json.loads((tmp_path / "transactions.json").read_text())
    assert raw[0]["kind"] == "expense"
    assert raw[0]["tags"] == ["food", "weekly"]


def test_save_upserts_in_place_and_keeps_order(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path, logger=MagicMock())
    storage.save_transaction(_tx("t1"))
    storage.save_transaction(_tx("t2"))

    storage.save_transaction(_tx("t1", amount_minor=999))

    stored = storage.load_all_transactions()
    assert [tx.id for tx in stored] == ["t1", "t2"]
    assert stored[0].amount_minor == 999


def test_save_transactions_writes_batch_once(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path, logger=MagicMock())

    storage.save_transactions([_tx("a"), _tx("b")])

    assert [tx.id for tx in storage.load_all_transactions()] == ["a", "b"]
    assert not list(tmp_path.glob("*.tmp"))


def test_other_collections_use_their_own_files(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path, logger=MagicMock())
    account = Account(
        id="checking",
        name="Checking",
        currency="USD",
        initial_balance_minor=1000,
        created_at=STAMP,
        updated_at=STAMP,
    )
    category = Category(id="food", name="Food")
    goal = Goal(
        id="g1",
        name="Holiday",
        target_amount_minor=5000,
        currency="USD",
        created_at=STAMP,
        updated_at=STAMP,
    )

    storage.save_account(account)
    storage.save_category(category)
    storage.save_goal(goal)

    assert storage.load_all_accounts() == [account]
    assert storage.get_category_by_id("food") == category
    assert storage.load_all_goals() == [goal]
    assert sorted(path.name for path in tmp_path.iterdir()) == [
        "accounts.json",
        "categories.json",
        "goals.json",
    ]


def test_currency_configs_are_replaced_wholesale(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path, logger=MagicMock())
    storage.save_currency_configs(
        [CurrencyConfig(currency="USD", decimals=2, zero_minor_value=0)]
    )

    storage.save_currency_configs(
        [CurrencyConfig(currency="EUR", decimals=2, zero_minor_value=100)]
    )

    assert storage.load_currency_configs() == [
        CurrencyConfig(currency="EUR", decimals=2, zero_minor_value=100)
    ]


def test_non_array_file_is_ignored_with_warning(tmp_path: Path) -> None:
    logger = MagicMock()
    (tmp_path / "accounts.json").write_text('{"id": "x"}')
    storage = JsonFileStorage(tmp_path, logger=logger)

    assert storage.load_all_accounts() == []
    logger.warning.assert_called_once()


def test_records_are_written_with_camel_case_keys(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path, logger=MagicMock())

    storage.save_transaction(_tx("t1", transfer_group_id="grp"))

    raw = json.loads((tmp_path / "transactions.json").read_text())
    assert raw[0]["accountId"] == "checking"
    assert raw[0]["amountMinor"] == 100
    assert raw[0]["transferGroupId"] == "grp"
    assert raw[0]["isDeleted"] is False
    assert "account_id" not in raw[0]


def test_camel_case_and_snake_case_files_both_load(tmp_path: Path) -> None:
    records = [
        {
            "id": "camel",
            "name": "Checking",
            "currency": "USD",
            "initialBalanceMinor": 1000,
            "createdAt": STAMP,
            "updatedAt": STAMP,
            "isArchived": False,
            "isDeleted": False,
        },
        {
            "id": "snake",
            "name": "Savings",
            "currency": "EUR",
            "initial_balance_minor": 250,
            "created_at": STAMP,
            "updated_at": STAMP,
        },
    ]
    (tmp_path / "accounts.json").write_text(json.dumps(records))
    storage = JsonFileStorage(tmp_path, logger=MagicMock())

    accounts = storage.load_all_accounts()

    assert [account.id for account in accounts] == ["camel", "snake"]
    assert [account.initial_balance_minor for account in accounts] == [
        1000,
        250,
    ]
