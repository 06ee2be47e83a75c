"""Domain services for transaction accounting.

Every aggregate in the ledger is built from the signed amount returned by
``get_signed_amount_minor``.
"""

from collections.abc import Iterable, Sequence

from dericer.domain.constants import NEGATIVE_KINDS, POSITIVE_KINDS
from dericer.domain.errors import ValidationError
from dericer.domain.models.ledger import Transaction, TransactionKind
from dericer.domain.models.reports import (
    SortDirection,
    SortField,
    TransactionFilter,
    TransactionSort,
)
from dericer.domain.services.currency import is_safe_integer


def get_signed_amount_minor(transaction: Transaction) -> int:
    """Return the amount signed by kind.

    Income and receivable count positive, expense and debt negative.
    """
    if transaction.kind in POSITIVE_KINDS:
        return transaction.amount_minor
    if transaction.kind in NEGATIVE_KINDS:
        return -transaction.amount_minor
    raise ValidationError(f"Unknown transaction kind: {transaction.kind}")


def coerce_transaction_kind(kind: TransactionKind | str) -> TransactionKind:
    """Normalize a kind value to ``TransactionKind``.

    Raises:
        ValidationError: If the value is not a known kind.
    """
    try:
        return TransactionKind(kind)
    except ValueError:
        raise ValidationError(f"Unknown transaction kind: {kind}") from None


def coerce_sort_field(field: SortField | str) -> SortField:
    """Normalize a sort field value to ``SortField``.

    Raises:
        ValidationError: If the value is not a sortable field.
    """
    try:
        return SortField(field)
    except ValueError:
        raise ValidationError(f"Unknown sort field: {field}") from None


def coerce_sort_direction(direction: SortDirection | str) -> SortDirection:
    """Normalize a sort direction value to ``SortDirection``."""
    try:
        return SortDirection(direction)
    except ValueError:
        raise ValidationError(f"Unknown sort direction: {direction}") from None


def validate_transaction_basic(transaction: Transaction) -> None:
    """Check the invariants every stored transaction must satisfy.

    Raises:
        ValidationError: If the amount is not a strictly positive safe
            integer, the date is empty or the kind is unknown.
    """
    if not is_safe_integer(transaction.amount_minor):
        raise ValidationError(
            "Transaction amount_minor must be a safe integer."
        )
    if transaction.amount_minor <= 0:
        raise ValidationError("Transaction amount must be strictly positive.")
    if not transaction.date:
        raise ValidationError("Transaction date is required.")
    coerce_transaction_kind(transaction.kind)


def filter_transactions(
    transactions: Iterable[Transaction],
    transaction_filter: TransactionFilter | None = None,
) -> list[Transaction]:
    """Return non-deleted transactions matching every filter criterion."""
    active = [tx for tx in transactions if not tx.is_deleted]
    if transaction_filter is None:
        return active
    return [tx for tx in active if _matches(tx, transaction_filter)]


def _matches(tx: Transaction, criteria: TransactionFilter) -> bool:
    if criteria.account_ids and tx.account_id not in criteria.account_ids:
        return False
    if criteria.category_ids and (
        not tx.category_id or tx.category_id not in criteria.category_ids
    ):
        return False
    if criteria.kinds and tx.kind not in criteria.kinds:
        return False
    if criteria.date_from and tx.date < criteria.date_from:
        return False
    if criteria.date_to and tx.date > criteria.date_to:
        return False
    signed = get_signed_amount_minor(tx)
    if (
        criteria.min_amount_minor is not None
        and signed < criteria.min_amount_minor
    ):
        return False
    if (
        criteria.max_amount_minor is not None
        and signed > criteria.max_amount_minor
    ):
        return False
    tx_tags = tx.tags or ()
    if criteria.tags and not all(tag in tx_tags for tag in criteria.tags):
        return False
    if criteria.counterparty_name_contains:
        needle = criteria.counterparty_name_contains.lower()
        if needle not in (tx.counterparty_name or "").lower():
            return False
    if criteria.text_search:
        needle = criteria.text_search.lower()
        haystacks = (
            (tx.note or "").lower(),
            (tx.counterparty_name or "").lower(),
            " ".join(tx_tags).lower(),
        )
        if not any(needle in haystack for haystack in haystacks):
            return False
    return True


def sort_transactions(
    transactions: Sequence[Transaction],
    sort: TransactionSort | None = None,
) -> list[Transaction]:
    """Return a sorted copy of ``transactions``.

    Without an explicit sort, orders by date then creation timestamp, both
    ascending. Ties keep their input order.
    """
    if sort is None:
        return sorted(transactions, key=lambda tx: (tx.date, tx.created_at))

    field = coerce_sort_field(sort.field)
    if field is SortField.AMOUNT_MINOR:
        key = get_signed_amount_minor
    elif field is SortField.CREATED_AT:
        key = _created_at
    else:
        key = _date
    return sorted(
        transactions,
        key=key,
        reverse=coerce_sort_direction(sort.direction) is SortDirection.DESC,
    )


def _date(tx: Transaction) -> str:
    return tx.date


def _created_at(tx: Transaction) -> str:
    return tx.created_at


def compute_total_signed_amount(transactions: Iterable[Transaction]) -> int:
    """Sum signed amounts; callers pass an already filtered sequence."""
    return sum(get_signed_amount_minor(tx) for tx in transactions)


__all__ = [
    "get_signed_amount_minor",
    "coerce_transaction_kind",
    "coerce_sort_field",
    "coerce_sort_direction",
    "validate_transaction_basic",
    "filter_transactions",
    "sort_transactions",
    "compute_total_signed_amount",
]
