"""Contract-style tests running use cases against a fake storage backend."""

from unittest.mock import MagicMock

from dericer.application.ports.storage import StoragePort
from dericer.application.use_cases.manage_transactions import (
    CreateTransferUseCase,
    SoftDeleteTransactionUseCase,
)
from dericer.application.use_cases.query_transactions import (
    QueryTransactionsUseCase,
)
from dericer.domain.models import CreateTransferCommand, Transaction


class FakeStorage(StoragePort):
    """Fake storage keeping only transactions, as a minimal backend."""

    def __init__(self) -> None:
        self.transactions: dict[str, Transaction] = {}
        self.batches: list[list[str]] = []

    def load_all_transactions(self) -> list[Transaction]:
        return list(self.transactions.values())

    def save_transaction(self, transaction: Transaction) -> None:
        self.transactions[transaction.id] = transaction

    def save_transactions(self, transactions) -> None:
        batch = list(transactions)
        self.batches.append([transaction.id for transaction in batch])
        for transaction in batch:
            self.transactions[transaction.id] = transaction

    def get_transaction_by_id(self, transaction_id) -> Transaction | None:
        return self.transactions.get(transaction_id)


def _build_time() -> MagicMock:
    time = MagicMock()
    time.now.return_value = "2024-01-01T00:00:00.000Z"
    return time


def test_transfer_round_trip_through_fake_storage() -> None:
    """A transfer nets to zero and deleting a leg changes the total."""
    storage = FakeStorage()
    logger = MagicMock()
    debit, credit = CreateTransferUseCase(
        storage,
        _build_time(),
        logger=logger,
    ).execute(
        CreateTransferCommand(
            source_account_id="checking",
            target_account_id="savings",
            currency="USD",
            amount_minor=700,
            date="2024-01-01",
        )
    )
    query = QueryTransactionsUseCase(storage, logger=logger)

    assert storage.batches == [[debit.id, credit.id]]
    assert query.execute().total_amount_minor == 0

    SoftDeleteTransactionUseCase(storage, _build_time(), logger=logger).execute(
        credit.id
    )

    result = query.execute()
    assert result.total_count == 1
    assert result.total_amount_minor == -700
