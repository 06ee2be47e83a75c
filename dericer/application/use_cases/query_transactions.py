"""Use cases for filtered transaction listings."""

from dericer.application.ports.storage import StoragePort
from dericer.domain.models import (
    CategoryQueryResult,
    TransactionFilter,
    TransactionQueryResult,
    TransactionSort,
)
from dericer.domain.services.reports import sum_by_category_hierarchy
from dericer.domain.services.transactions import (
    compute_total_signed_amount,
    filter_transactions,
    sort_transactions,
)
from dericer.infrastructure.logging.logger import get_app_logger


class QueryTransactionsUseCase:
    """Filter, sort and total the stored transactions."""

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
        transaction_filter: TransactionFilter | None = None,
        sort: TransactionSort | None = None,
    ) -> TransactionQueryResult:
        """Return the matching transactions with their signed total.

        Args:
            transaction_filter: Optional criteria; deleted rows never match.
            sort: Optional ordering; defaults to date then creation time.

        Returns:
            TransactionQueryResult: Sorted rows, count and signed total.
        """
        filtered = filter_transactions(
            self._storage.load_all_transactions(),
            transaction_filter,
        )
        result = TransactionQueryResult(
            transactions=sort_transactions(filtered, sort),
            total_count=len(filtered),
            total_amount_minor=compute_total_signed_amount(filtered),
        )
        self._logger.info(
            f"Queried {result.total_count} transactions, "
            f"total={result.total_amount_minor}"
        )
        return result


class QueryAndSumByCategoryUseCase:
    """Listing and hierarchical category sums over one filtered set."""

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
        transaction_filter: TransactionFilter | None = None,
        sort: TransactionSort | None = None,
    ) -> CategoryQueryResult:
        """Return the listing together with its category roll-up."""
        transactions = self._storage.load_all_transactions()
        categories = self._storage.load_all_categories()
        filtered = filter_transactions(transactions, transaction_filter)
        return CategoryQueryResult(
            result=TransactionQueryResult(
                transactions=sort_transactions(filtered, sort),
                total_count=len(filtered),
                total_amount_minor=compute_total_signed_amount(filtered),
            ),
            by_category=sum_by_category_hierarchy(
                filtered,
                categories,
                logger=self._logger,
            ),
        )


__all__ = ["QueryTransactionsUseCase", "QueryAndSumByCategoryUseCase"]
