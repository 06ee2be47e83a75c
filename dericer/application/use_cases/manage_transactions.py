"""Use cases mutating transactions.

Validation happens before any write; nothing is persisted when a command is
rejected.
"""

from dataclasses import replace

from dericer.application.ports.storage import StoragePort
from dericer.application.ports.time import TimePort
from dericer.domain.errors import NotFoundError, ValidationError
from dericer.domain.models import (
    CreateTransactionCommand,
    CreateTransferCommand,
    Transaction,
    TransactionId,
    TransactionKind,
    TransferGroupId,
    UpdateTransactionCommand,
    generate_id,
)
from dericer.domain.models.patch import apply_patch, apply_required_patch
from dericer.domain.policies import is_active
from dericer.domain.services.transactions import (
    coerce_transaction_kind,
    validate_transaction_basic,
)
from dericer.infrastructure.logging.logger import get_app_logger


def _reject_non_positive(amount_minor, label: str) -> None:
    if isinstance(amount_minor, (int, float)) and amount_minor <= 0:
        raise ValidationError(f"{label} amount must be positive.")


def _tags_tuple(tags) -> tuple[str, ...] | None:
    return None if tags is None else tuple(tags)


class CreateTransactionUseCase:
    """Record a single transaction."""

    def __init__(
        self,
        storage: StoragePort,
        time: TimePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            storage: Port persisting ledger records.
            time: Clock used for timestamps.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._storage = storage
        self._time = time
        self._logger = logger or get_app_logger()

    def execute(self, command: CreateTransactionCommand) -> Transaction:
        """Validate, stamp and persist a new transaction.

        Raises:
            ValidationError: If the amount, date or kind is invalid.
        """
        _reject_non_positive(command.amount_minor, "Transaction")
        now = self._time.now()
        transaction = Transaction(
            id=TransactionId(generate_id()),
            account_id=command.account_id,
            kind=coerce_transaction_kind(command.kind),
            amount_minor=command.amount_minor,
            currency=command.currency,
            date=command.date,
            note=command.note,
            category_id=command.category_id,
            tags=_tags_tuple(command.tags),
            counterparty_name=command.counterparty_name,
            created_at=now,
            updated_at=now,
        )
        validate_transaction_basic(transaction)
        self._storage.save_transaction(transaction)
        self._logger.info(
            f"Created transaction {transaction.id} "
            f"kind={transaction.kind.value} account={transaction.account_id}"
        )
        return transaction


class CreateTransferUseCase:
    """Move money between two accounts as a linked pair of transactions."""

    def __init__(
        self,
        storage: StoragePort,
        time: TimePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            storage: Port persisting ledger records.
            time: Clock used for timestamps.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._storage = storage
        self._time = time
        self._logger = logger or get_app_logger()

    def execute(
        self,
        command: CreateTransferCommand,
    ) -> tuple[Transaction, Transaction]:
        """Create the debit and credit legs of a transfer.

        Both legs share a transfer group id and timestamp and are written
        with a single ``save_transactions`` call, so either both persist or
        neither does.

        Returns:
            tuple[Transaction, Transaction]: Debit leg (expense on the source
            account) and credit leg (income on the target account).
        """
        _reject_non_positive(command.amount_minor, "Transfer")
        now = self._time.now()
        group_id = TransferGroupId(generate_id())
        debit = self._build_leg(
            command,
            account_id=command.source_account_id,
            kind=TransactionKind.EXPENSE,
            group_id=group_id,
            now=now,
        )
        credit = self._build_leg(
            command,
            account_id=command.target_account_id,
            kind=TransactionKind.INCOME,
            group_id=group_id,
            now=now,
        )
        self._storage.save_transactions([debit, credit])
        self._logger.info(
            f"Created transfer {group_id} from {command.source_account_id} "
            f"to {command.target_account_id}"
        )
        return debit, credit

    @staticmethod
    def _build_leg(
        command: CreateTransferCommand,
        *,
        account_id,
        kind: TransactionKind,
        group_id: TransferGroupId,
        now: str,
    ) -> Transaction:
        leg = Transaction(
            id=TransactionId(generate_id()),
            account_id=account_id,
            kind=kind,
            amount_minor=command.amount_minor,
            currency=command.currency,
            date=command.date,
            note=command.note,
            tags=_tags_tuple(command.tags),
            counterparty_name=command.counterparty_name,
            transfer_group_id=group_id,
            created_at=now,
            updated_at=now,
        )
        validate_transaction_basic(leg)
        return leg


class UpdateTransactionUseCase:
    """Apply a partial update to an active transaction."""

    def __init__(
        self,
        storage: StoragePort,
        time: TimePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            storage: Port persisting ledger records.
            time: Clock used for timestamps.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._storage = storage
        self._time = time
        self._logger = logger or get_app_logger()

    def execute(
        self,
        transaction_id: TransactionId,
        command: UpdateTransactionCommand,
    ) -> Transaction:
        """Merge the patches into the stored transaction and persist it.

        Raises:
            NotFoundError: If the transaction is missing or soft-deleted.
            ValidationError: If the merged transaction breaks an invariant.
        """
        existing = self._storage.get_transaction_by_id(transaction_id)
        if not is_active(existing):
            raise NotFoundError(f"Transaction not found: {transaction_id}")

        updated = replace(
            existing,
            kind=coerce_transaction_kind(
                apply_required_patch(command.kind, existing.kind, "kind")
            ),
            amount_minor=apply_required_patch(
                command.amount_minor,
                existing.amount_minor,
                "amount_minor",
            ),
            currency=apply_required_patch(
                command.currency,
                existing.currency,
                "currency",
            ),
            date=apply_required_patch(command.date, existing.date, "date"),
            note=apply_patch(command.note, existing.note),
            category_id=apply_patch(command.category_id, existing.category_id),
            tags=_tags_tuple(apply_patch(command.tags, existing.tags)),
            counterparty_name=apply_patch(
                command.counterparty_name,
                existing.counterparty_name,
            ),
            updated_at=self._time.now(),
        )
        validate_transaction_basic(updated)
        self._storage.save_transaction(updated)
        self._logger.info(f"Updated transaction {transaction_id}")
        return updated


class SoftDeleteTransactionUseCase:
    """Mark a transaction as deleted."""

    def __init__(
        self,
        storage: StoragePort,
        time: TimePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            storage: Port persisting ledger records.
            time: Clock used for timestamps.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._storage = storage
        self._time = time
        self._logger = logger or get_app_logger()

    def execute(self, transaction_id: TransactionId) -> None:
        """Soft-delete the transaction.

        Missing or already deleted transactions are left untouched and no
        error is raised.
        """
        existing = self._storage.get_transaction_by_id(transaction_id)
        if not is_active(existing):
            self._logger.info(
                f"Soft delete skipped for inactive transaction {transaction_id}"
            )
            return
        self._storage.save_transaction(
            replace(existing, is_deleted=True, updated_at=self._time.now())
        )
        self._logger.info(f"Soft-deleted transaction {transaction_id}")


__all__ = [
    "CreateTransactionUseCase",
    "CreateTransferUseCase",
    "UpdateTransactionUseCase",
    "SoftDeleteTransactionUseCase",
]
