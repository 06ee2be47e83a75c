"""Domain services for account balances and currency totals."""

from collections.abc import Iterable

from dericer.domain.errors import ValidationError
from dericer.domain.models.currency import CurrencyConfig
from dericer.domain.models.ids import AccountId, CurrencyCode
from dericer.domain.models.ledger import Account, Transaction
from dericer.domain.models.reports import AccountBalance, SumByGroup
from dericer.domain.services.currency import (
    get_currency_config_or_raise,
    is_effectively_zero,
)
from dericer.domain.services.transactions import get_signed_amount_minor


def validate_account_basic(account: Account) -> None:
    """Raise ValidationError when the opening balance is not an integer."""
    initial = account.initial_balance_minor
    if isinstance(initial, bool) or not isinstance(initial, int):
        raise ValidationError(
            f"Account {account.id} initial_balance_minor must be an integer."
        )


def compute_account_balances(
    accounts: Iterable[Account],
    transactions: Iterable[Transaction],
) -> list[AccountBalance]:
    """Compute the balance of every account.

    Balance is the opening balance plus the signed amounts of the account's
    non-deleted transactions.

    Args:
        accounts: Accounts to report, in output order.
        transactions: Full transaction set; deleted rows are skipped.

    Returns:
        list[AccountBalance]: One balance per account.
    """
    sums: dict[AccountId, int] = {}
    for tx in transactions:
        if tx.is_deleted:
            continue
        sums[tx.account_id] = (
            sums.get(tx.account_id, 0) + get_signed_amount_minor(tx)
        )

    balances = []
    for account in accounts:
        validate_account_basic(account)
        balances.append(
            AccountBalance(
                account_id=account.id,
                currency=account.currency,
                balance_minor=account.initial_balance_minor
                + sums.get(account.id, 0),
            )
        )
    return balances


def compute_currency_totals(
    balances: Iterable[AccountBalance],
) -> list[SumByGroup[CurrencyCode]]:
    """Sum account balances per currency code."""
    totals: dict[CurrencyCode, int] = {}
    for balance in balances:
        totals[balance.currency] = (
            totals.get(balance.currency, 0) + balance.balance_minor
        )
    return [
        SumByGroup(key=currency, total_minor=total)
        for currency, total in totals.items()
    ]


def compute_visible_currency_totals(
    totals: Iterable[SumByGroup[CurrencyCode]],
    configs: Iterable[CurrencyConfig],
) -> list[SumByGroup[CurrencyCode]]:
    """Drop currency totals that are effectively zero.

    Raises:
        ValidationError: If a currency has no registered configuration.
    """
    resolved_configs = list(configs)
    visible = []
    for item in totals:
        config = get_currency_config_or_raise(resolved_configs, item.key)
        if not is_effectively_zero(item.total_minor, config):
            visible.append(item)
    return visible


__all__ = [
    "validate_account_basic",
    "compute_account_balances",
    "compute_currency_totals",
    "compute_visible_currency_totals",
]
