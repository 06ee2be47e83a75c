"""End-to-end tests of the ledger facade over in-memory storage."""

from dataclasses import replace
from unittest.mock import MagicMock

import pytest

from dericer.adapters.api.core import create_core
from dericer.domain.errors import NotFoundError, ValidationError
from dericer.domain.models import (
    Account,
    Budget,
    Category,
    CreateGoalCommand,
    CreateTransactionCommand,
    CreateTransferCommand,
    SortDirection,
    SortField,
    TransactionFilter,
    TransactionSort,
)
from dericer.infrastructure.clock import FixedTimePort
from dericer.infrastructure.in_memory_storage import InMemoryStorage

STAMP = "2024-01-01T00:00:00.000Z"


def _account(account_id: str, currency: str, initial: int) -> Account:
    return Account(
        id=account_id,
        name=account_id.title(),
        currency=currency,
        initial_balance_minor=initial,
        created_at=STAMP,
        updated_at=STAMP,
    )


def _expense(account_id, amount_minor, date="2024-01-10", **extra):
    return CreateTransactionCommand(
        account_id=account_id,
        kind="expense",
        amount_minor=amount_minor,
        currency="USD",
        date=date,
        **extra,
    )


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def usage_logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def core(storage, usage_logger):
    return create_core(
        storage,
        FixedTimePort("2024-02-01T10:00:00.000Z"),
        logger=MagicMock(),
        usage_logger=usage_logger,
    )


def test_balances_and_visible_currency_totals(core, storage) -> None:
    """Income and expense move the balance; tiny currencies are hidden."""
    storage.save_account(_account("checking", "USD", 1000))
    core.currencies.register("USD")
    core.transactions.create(
        CreateTransactionCommand(
            account_id="checking",
            kind="income",
            amount_minor=2000,
            currency="USD",
            date="2024-01-05",
        )
    )
    core.transactions.create(_expense("checking", 500))

    balances = core.accounts.get_balances()

    assert [(b.account_id, b.balance_minor) for b in balances] == [
        ("checking", 2500)
    ]

    storage.save_account(_account("euro", "EUR", 50))
    core.currencies.register("EUR", zero_minor_value=100)

    totals = core.accounts.get_currency_totals()
    all_totals = core.accounts.get_currency_totals(visible_only=False)

    assert [(t.key, t.total_minor) for t in totals] == [("USD", 2500)]
    assert [(t.key, t.total_minor) for t in all_totals] == [
        ("USD", 2500),
        ("EUR", 50),
    ]


def test_budget_rolls_up_child_category_spend(core, storage) -> None:
    storage.save_category(Category(id="food", name="Food"))
    storage.save_category(
        Category(id="restaurant", name="Restaurant", parent_id="food")
    )
    storage.save_budget(
        Budget(
            id="food-jan",
            category_id="food",
            currency="USD",
            amount_minor=10000,
            start_date="2024-01-01",
            end_date="2024-01-31",
            name="Food January",
        )
    )
    core.transactions.create(_expense("checking", 5000, category_id="restaurant"))
    core.transactions.create(_expense("checking", 3000, category_id="food"))
    core.transactions.create(_expense("checking", 2000))

    status = core.budgets.evaluate_one("food-jan")

    assert status.spent_minor == 8000
    assert status.remaining_minor == 2000
    assert status.percent_used == 80
    assert status.budget.name == "Food January"
    assert [s.budget.id for s in core.budgets.evaluate_all()] == ["food-jan"]
    assert [b.id for b in core.budgets.list_all()] == ["food-jan"]


def test_evaluate_one_raises_for_unknown_budget(core) -> None:
    with pytest.raises(NotFoundError):
        core.budgets.evaluate_one("missing")


def test_query_totals_follow_soft_delete(core) -> None:
    income = core.transactions.create(
        CreateTransactionCommand(
            account_id="checking",
            kind="income",
            amount_minor=2000,
            currency="USD",
            date="2024-01-03",
        )
    )
    expense = core.transactions.create(_expense("checking", 500, "2024-01-01"))
    sort = TransactionSort(SortField.DATE, SortDirection.ASC)

    before = core.transactions.query(sort=sort)

    assert [tx.id for tx in before.transactions] == [expense.id, income.id]
    assert before.total_count == 2
    assert before.total_amount_minor == 1500

    core.transactions.soft_delete(expense.id)
    after = core.reports.query_transactions(sort=sort)

    assert after.total_count == 1
    assert after.total_amount_minor == 2000


def test_soft_delete_is_idempotent(core, storage) -> None:
    created = core.transactions.create(_expense("checking", 100))

    core.transactions.soft_delete(created.id)
    snapshot = storage.get_transaction_by_id(created.id)
    core.transactions.soft_delete(created.id)
    core.transactions.soft_delete("never-existed")

    assert storage.get_transaction_by_id(created.id) == snapshot
    assert snapshot.is_deleted is True


def test_update_null_clears_and_omission_preserves(core) -> None:
    created = core.transactions.create(
        _expense(
            "checking",
            100,
            category_id="food",
            counterparty_name="Market",
            note="Weekly",
        )
    )

    cleared = core.transactions.update(created.id, {"category_id": None})

    assert cleared.category_id is None
    assert cleared.counterparty_name == "Market"
    assert cleared.note == "Weekly"

    untouched = core.transactions.update(created.id, {"amount_minor": 250})

    assert untouched.category_id is None
    assert untouched.counterparty_name == "Market"
    assert untouched.amount_minor == 250


def test_update_deleted_transaction_raises(core) -> None:
    created = core.transactions.create(_expense("checking", 100))
    core.transactions.soft_delete(created.id)

    with pytest.raises(NotFoundError):
        core.transactions.update(created.id, {"note": "late"})


def test_transfer_creates_balanced_pair(core, storage) -> None:
    storage.save_account(_account("checking", "USD", 1000))
    storage.save_account(_account("savings", "USD", 0))

    debit, credit = core.transactions.create_transfer(
        CreateTransferCommand(
            source_account_id="checking",
            target_account_id="savings",
            currency="USD",
            amount_minor=400,
            date="2024-01-15",
        )
    )

    assert debit.kind == "expense"
    assert credit.kind == "income"
    assert debit.transfer_group_id == credit.transfer_group_id
    balances = {b.account_id: b.balance_minor for b in core.accounts.get_balances()}
    assert balances == {"checking": 600, "savings": 400}


def test_reports_group_sums(core, storage) -> None:
    storage.save_category(Category(id="food", name="Food"))
    storage.save_category(
        Category(id="restaurant", name="Restaurant", parent_id="food")
    )
    core.transactions.create(_expense("checking", 300, category_id="restaurant"))
    core.transactions.create(_expense("card", 200, category_id="food"))

    by_account = core.reports.sum_by_account()
    by_category = core.reports.sum_by_category()
    by_currency = core.reports.sum_by_currency(
        TransactionFilter(account_ids=("card",))
    )
    combined = core.reports.query_and_sum_by_category(
        TransactionFilter(category_ids=("restaurant",))
    )

    assert [(g.key, g.total_minor) for g in by_account] == [
        ("checking", -300),
        ("card", -200),
    ]
    assert [(g.key, g.total_minor) for g in by_category] == [
        ("restaurant", -300),
        ("food", -500),
    ]
    assert [(g.key, g.total_minor) for g in by_currency] == [("USD", -200)]
    assert combined.result.total_count == 1
    assert [(g.key, g.total_minor) for g in combined.by_category] == [
        ("restaurant", -300),
        ("food", -300),
    ]


def test_listings_exclude_soft_deleted_records(core, storage) -> None:
    storage.save_account(_account("checking", "USD", 0))
    closed = _account("closed", "USD", 0)
    storage.save_account(replace(closed, is_deleted=True))
    storage.save_category(Category(id="old", name="Old", is_deleted=True))

    assert [a.id for a in core.accounts.list_all()] == ["checking"]
    assert core.categories.list_all() == []
    assert core.accounts.get_by_id("checking").name == "Checking"
    with pytest.raises(NotFoundError):
        core.accounts.get_by_id("closed")


def test_goal_lifecycle(core) -> None:
    goal = core.goals.create(
        CreateGoalCommand(
            name="Holiday",
            target_amount_minor=100000,
            currency="USD",
            target_date="2024-08-01",
            note="Beach",
        )
    )

    updated = core.goals.update(goal.id, {"target_date": None})
    assert updated.target_date is None
    assert updated.note == "Beach"

    core.goals.update(goal.id, {"is_deleted": True})
    assert core.goals.list() == []

    restored = core.goals.update(goal.id, {"is_deleted": False})
    assert restored.is_deleted is False
    assert [g.id for g in core.goals.list()] == [goal.id]


def test_validation_errors_surface_with_kind(core, storage) -> None:
    with pytest.raises(ValidationError) as excinfo:
        core.transactions.create(_expense("checking", 0))

    assert excinfo.value.kind == "validation"
    assert storage.load_all_transactions() == []


def test_mutations_are_recorded_in_usage_log(core, usage_logger) -> None:
    created = core.transactions.create(_expense("checking", 100))
    core.transactions.soft_delete(created.id)

    messages = [call.args[0] for call in usage_logger.info.call_args_list]
    assert messages == [
        f"transactions.create id={created.id}",
        f"transactions.soft_delete id={created.id}",
    ]


def test_currency_registry_lists_registered_configs(core) -> None:
    core.currencies.register("USD")
    core.currencies.register("JPY", decimals=0)
    core.currencies.register("USD", zero_minor_value=5)

    configs = core.currencies.list_all()

    assert [(c.currency, c.decimals, c.zero_minor_value) for c in configs] == [
        ("JPY", 0, 0),
        ("USD", 2, 5),
    ]
