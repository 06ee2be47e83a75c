"""Use case to aggregate filtered transactions by group."""

from enum import Enum

from dericer.application.ports.storage import StoragePort
from dericer.domain.models import SumByGroup, TransactionFilter
from dericer.domain.services.reports import (
    sum_by_account,
    sum_by_category_hierarchy,
    sum_by_currency,
)
from dericer.domain.services.transactions import filter_transactions
from dericer.infrastructure.logging.logger import get_app_logger


class ReportGrouping(str, Enum):
    """Grouping key for report sums."""

    ACCOUNT = "account"
    CATEGORY = "category"
    CURRENCY = "currency"


class GetReportSumsUseCase:
    """Sum signed amounts of filtered transactions per group."""

    def __init__(self, storage: StoragePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            storage: Port providing ledger records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._storage = storage
        self._logger = logger or get_app_logger()

    def execute(
        self,
        grouping: ReportGrouping,
        transaction_filter: TransactionFilter | None = None,
    ) -> list[SumByGroup]:
        """Return grouped totals.

        Category grouping rolls each amount up to every ancestor category.

        Args:
            grouping: Account, category or currency.
            transaction_filter: Optional criteria applied first.

        Returns:
            list[SumByGroup]: Totals in first-seen group order.
        """
        grouping = ReportGrouping(grouping)
        filtered = filter_transactions(
            self._storage.load_all_transactions(),
            transaction_filter,
        )
        if grouping is ReportGrouping.ACCOUNT:
            sums = sum_by_account(filtered)
        elif grouping is ReportGrouping.CURRENCY:
            sums = sum_by_currency(filtered)
        else:
            sums = sum_by_category_hierarchy(
                filtered,
                self._storage.load_all_categories(),
                logger=self._logger,
            )
        self._logger.info(
            f"Computed {len(sums)} {grouping.value} sums "
            f"from {len(filtered)} transactions"
        )
        return sums


__all__ = ["GetReportSumsUseCase", "ReportGrouping"]
