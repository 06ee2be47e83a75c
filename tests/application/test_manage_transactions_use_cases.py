"""Tests for the transaction mutation use cases."""

from unittest.mock import MagicMock

import pytest

from dericer.application.use_cases.manage_transactions import (
    CreateTransactionUseCase,
    CreateTransferUseCase,
    SoftDeleteTransactionUseCase,
    UpdateTransactionUseCase,
)
from dericer.domain.errors import NotFoundError, ValidationError
from dericer.domain.models import (
    CLEAR,
    SetTo,
    CreateTransactionCommand,
    CreateTransferCommand,
    Transaction,
    TransactionKind,
    UpdateTransactionCommand,
)

NOW = "2024-03-01T12:00:00.000Z"
EARLIER = "2024-02-01T08:00:00.000Z"


def _build_time(now: str = NOW) -> MagicMock:
    time = MagicMock()
    time.now.return_value = now
    return time


def _stored_transaction(**overrides) -> Transaction:
    values = {
        "id": "tx-1",
        "account_id": "acc-1",
        "kind": TransactionKind.EXPENSE,
        "amount_minor": 1200,
        "currency": "USD",
        "date": "2024-02-01",
        "note": "Lunch",
        "category_id": "food",
        "tags": ("work",),
        "counterparty_name": "Cafe",
        "created_at": EARLIER,
        "updated_at": EARLIER,
    }
    values.update(overrides)
    return Transaction(**values)


def test_create_transaction_stamps_and_persists() -> None:
    storage = MagicMock()
    logger = MagicMock()
    use_case = CreateTransactionUseCase(storage, _build_time(), logger=logger)

    transaction = use_case.execute(
        CreateTransactionCommand(
            account_id="acc-1",
            kind="income",
            amount_minor=2000,
            currency="USD",
            date="2024-03-01",
            tags=["salary"],
        )
    )

    assert transaction.kind is TransactionKind.INCOME
    assert transaction.tags == ("salary",)
    assert transaction.created_at == NOW
    assert transaction.updated_at == NOW
    assert transaction.is_deleted is False
    assert transaction.id
    storage.save_transaction.assert_called_once_with(transaction)
    logger.info.assert_called_once()


@pytest.mark.parametrize("amount_minor", [0, -1])
def test_create_transaction_rejects_non_positive_amount(amount_minor) -> None:
    storage = MagicMock()
    use_case = CreateTransactionUseCase(
        storage,
        _build_time(),
        logger=MagicMock(),
    )

    with pytest.raises(ValidationError):
        use_case.execute(
            CreateTransactionCommand(
                account_id="acc-1",
                kind=TransactionKind.EXPENSE,
                amount_minor=amount_minor,
                currency="USD",
                date="2024-03-01",
            )
        )

    storage.save_transaction.assert_not_called()


def test_create_transaction_rejects_missing_date_before_saving() -> None:
    storage = MagicMock()
    use_case = CreateTransactionUseCase(
        storage,
        _build_time(),
        logger=MagicMock(),
    )

    with pytest.raises(ValidationError):
        use_case.execute(
            CreateTransactionCommand(
                account_id="acc-1",
                kind=TransactionKind.EXPENSE,
                amount_minor=10,
                currency="USD",
                date="",
            )
        )

    storage.save_transaction.assert_not_called()


def test_create_transfer_writes_linked_legs_in_one_call() -> None:
    storage = MagicMock()
    use_case = CreateTransferUseCase(storage, _build_time(), logger=MagicMock())

    debit, credit = use_case.execute(
        CreateTransferCommand(
            source_account_id="checking",
            target_account_id="savings",
            currency="USD",
            amount_minor=5000,
            date="2024-03-01",
            note="Monthly saving",
            tags=["saving"],
        )
    )

    assert debit.account_id == "checking"
    assert debit.kind is TransactionKind.EXPENSE
    assert credit.account_id == "savings"
    assert credit.kind is TransactionKind.INCOME
    assert debit.transfer_group_id == credit.transfer_group_id
    assert debit.transfer_group_id is not None
    assert debit.id != credit.id
    assert debit.amount_minor == credit.amount_minor == 5000
    assert debit.note == credit.note == "Monthly saving"
    assert debit.tags == credit.tags == ("saving",)
    assert debit.created_at == credit.created_at == NOW
    storage.save_transactions.assert_called_once_with([debit, credit])
    storage.save_transaction.assert_not_called()


def test_create_transfer_rejects_non_positive_amount() -> None:
    storage = MagicMock()
    use_case = CreateTransferUseCase(storage, _build_time(), logger=MagicMock())

    with pytest.raises(ValidationError):
        use_case.execute(
            CreateTransferCommand(
                source_account_id="checking",
                target_account_id="savings",
                currency="USD",
                amount_minor=0,
                date="2024-03-01",
            )
        )

    storage.save_transactions.assert_not_called()


def test_update_transaction_merges_patches() -> None:
    storage = MagicMock()
    storage.get_transaction_by_id.return_value = _stored_transaction()
    use_case = UpdateTransactionUseCase(
        storage,
        _build_time(),
        logger=MagicMock(),
    )

    updated = use_case.execute(
        "tx-1",
        UpdateTransactionCommand(
            amount_minor=SetTo(1500),
            category_id=CLEAR,
        ),
    )

    assert updated.amount_minor == 1500
    assert updated.category_id is None
    assert updated.counterparty_name == "Cafe"
    assert updated.note == "Lunch"
    assert updated.created_at == EARLIER
    assert updated.updated_at == NOW
    storage.save_transaction.assert_called_once_with(updated)


def test_update_transaction_omitted_fields_are_preserved() -> None:
    storage = MagicMock()
    existing = _stored_transaction()
    storage.get_transaction_by_id.return_value = existing
    use_case = UpdateTransactionUseCase(
        storage,
        _build_time(),
        logger=MagicMock(),
    )

    updated = use_case.execute("tx-1", UpdateTransactionCommand.from_changes({}))

    assert updated.category_id == existing.category_id
    assert updated.counterparty_name == existing.counterparty_name
    assert updated.tags == existing.tags


def test_update_transaction_empty_kind_keeps_existing_kind() -> None:
    storage = MagicMock()
    storage.get_transaction_by_id.return_value = _stored_transaction()
    use_case = UpdateTransactionUseCase(
        storage,
        _build_time(),
        logger=MagicMock(),
    )

    updated = use_case.execute(
        "tx-1",
        UpdateTransactionCommand.from_changes({"kind": "", "note": "Dinner"}),
    )

    assert updated.kind is TransactionKind.EXPENSE
    assert updated.note == "Dinner"


@pytest.mark.parametrize(
    "stored",
    [None, _stored_transaction(is_deleted=True)],
)
def test_update_transaction_requires_active_record(stored) -> None:
    storage = MagicMock()
    storage.get_transaction_by_id.return_value = stored
    use_case = UpdateTransactionUseCase(
        storage,
        _build_time(),
        logger=MagicMock(),
    )

    with pytest.raises(NotFoundError):
        use_case.execute("tx-1", UpdateTransactionCommand())

    storage.save_transaction.assert_not_called()


def test_update_transaction_revalidates_merged_record() -> None:
    storage = MagicMock()
    storage.get_transaction_by_id.return_value = _stored_transaction()
    use_case = UpdateTransactionUseCase(
        storage,
        _build_time(),
        logger=MagicMock(),
    )

    with pytest.raises(ValidationError):
        use_case.execute(
            "tx-1",
            UpdateTransactionCommand(amount_minor=SetTo(0)),
        )
    with pytest.raises(ValidationError):
        use_case.execute("tx-1", UpdateTransactionCommand(date=CLEAR))

    storage.save_transaction.assert_not_called()


def test_soft_delete_marks_transaction_deleted() -> None:
    storage = MagicMock()
    storage.get_transaction_by_id.return_value = _stored_transaction()
    use_case = SoftDeleteTransactionUseCase(
        storage,
        _build_time(),
        logger=MagicMock(),
    )

    use_case.execute("tx-1")

    saved = storage.save_transaction.call_args.args[0]
    assert saved.is_deleted is True
    assert saved.updated_at == NOW


@pytest.mark.parametrize(
    "stored",
    [None, _stored_transaction(is_deleted=True)],
)
def test_soft_delete_is_a_no_op_for_inactive_records(stored) -> None:
    storage = MagicMock()
    storage.get_transaction_by_id.return_value = stored
    use_case = SoftDeleteTransactionUseCase(
        storage,
        _build_time(),
        logger=MagicMock(),
    )

    use_case.execute("tx-1")

    storage.save_transaction.assert_not_called()
