"""CLI adapter printing balances and budget status, or exporting
transactions, from the configured ledger storage."""

from datetime import date
import os

from dericer.adapters.api.export import (
    transactions_to_csv,
    transactions_to_json,
)
from dericer.domain.errors import DomainError
from dericer.domain.models import (
    SortDirection,
    SortField,
    TransactionFilter,
    TransactionSort,
)
from dericer.infrastructure.container import build_core
from dericer.infrastructure.logging.logger import get_app_logger

REPORT_FORMATS = ("text", "json", "csv")


def _parse_date(value: str | None, logger) -> str | None:
    """Validate an ISO date string.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        str | None: The date string, or None when missing or invalid.
    """
    if not value:
        return None
    try:
        date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None
    return value


def _print_summary(core) -> None:
    print("Account balances")
    accounts = {account.id: account for account in core.accounts.list_all()}
    for balance in core.accounts.get_balances():
        account = accounts.get(balance.account_id)
        name = account.name if account else balance.account_id
        print(f"  {name}: {balance.balance_minor} {balance.currency}")
    print("Budgets")
    for status in core.budgets.evaluate_all():
        label = status.budget.name or status.budget.id
        print(
            f"  {label}: spent={status.spent_minor}, "
            f"remaining={status.remaining_minor}, "
            f"used={status.percent_used:.1f}%"
        )


def main() -> None:
    """Print a ledger report or export transactions as JSON or CSV.

    ``REPORT_FORMAT`` selects text, json or csv; ``REPORT_START_DATE`` and
    ``REPORT_END_DATE`` bound the exported transactions.
    """
    logger = get_app_logger()
    report_format = os.getenv("REPORT_FORMAT", "text").strip().lower()
    if report_format not in REPORT_FORMATS:
        logger.warning(
            f"Unsupported REPORT_FORMAT '{report_format}'. "
            f"Expected one of {', '.join(REPORT_FORMATS)}."
        )
        return

    core = build_core()
    try:
        if report_format == "text":
            _print_summary(core)
            return
        transaction_filter = TransactionFilter(
            date_from=_parse_date(os.getenv("REPORT_START_DATE"), logger),
            date_to=_parse_date(os.getenv("REPORT_END_DATE"), logger),
        )
        result = core.reports.query_transactions(
            transaction_filter,
            TransactionSort(SortField.DATE, SortDirection.ASC),
        )
    except DomainError as exc:
        logger.error(f"Ledger report failed: {exc.message}")
        return

    if report_format == "json":
        print(transactions_to_json(result.transactions))
    else:
        print(transactions_to_csv(result.transactions))


if __name__ == "__main__":  # pragma: no cover
    main()
