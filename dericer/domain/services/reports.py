"""Domain services for grouped transaction sums."""

from collections.abc import Callable, Hashable, Iterable
from logging import Logger

from dericer.domain.models.ids import AccountId, CategoryId, CurrencyCode
from dericer.domain.models.ledger import Category, Transaction
from dericer.domain.models.reports import SumByGroup
from dericer.domain.services.categories import (
    build_category_index,
    get_ancestor_category_ids,
)
from dericer.domain.services.transactions import get_signed_amount_minor


def _sum_by_key(
    transactions: Iterable[Transaction],
    key: Callable[[Transaction], Hashable],
) -> list[SumByGroup]:
    totals: dict = {}
    for tx in transactions:
        if tx.is_deleted:
            continue
        group = key(tx)
        totals[group] = totals.get(group, 0) + get_signed_amount_minor(tx)
    return [
        SumByGroup(key=group, total_minor=total)
        for group, total in totals.items()
    ]


def sum_by_account(
    transactions: Iterable[Transaction],
) -> list[SumByGroup[AccountId]]:
    """Sum signed amounts per account, in first-seen order."""
    return _sum_by_key(transactions, lambda tx: tx.account_id)


def sum_by_currency(
    transactions: Iterable[Transaction],
) -> list[SumByGroup[CurrencyCode]]:
    """Sum signed amounts per currency, in first-seen order."""
    return _sum_by_key(transactions, lambda tx: tx.currency)


def sum_by_category_hierarchy(
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
    logger: Logger | None = None,
) -> list[SumByGroup[CategoryId]]:
    """Roll signed amounts up the category tree.

    Each categorized transaction adds to its own category and to every
    ancestor. Uncategorized transactions are ignored.
    """
    index = build_category_index(categories)
    totals: dict[CategoryId, int] = {}
    for tx in transactions:
        if tx.is_deleted or not tx.category_id:
            continue
        signed = get_signed_amount_minor(tx)
        ancestors = get_ancestor_category_ids(
            tx.category_id,
            index,
            logger=logger,
        )
        for category_id in (tx.category_id, *ancestors):
            totals[category_id] = totals.get(category_id, 0) + signed
    return [
        SumByGroup(key=category_id, total_minor=total)
        for category_id, total in totals.items()
    ]


__all__ = ["sum_by_account", "sum_by_currency", "sum_by_category_hierarchy"]
