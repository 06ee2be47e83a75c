"""Use cases to compute account balances and currency totals."""

from dericer.application.ports.storage import StoragePort
from dericer.domain.models import AccountBalance, SumByGroup
from dericer.domain.services.balances import (
    compute_account_balances,
    compute_currency_totals,
    compute_visible_currency_totals,
)
from dericer.infrastructure.logging.logger import get_app_logger


class GetAccountBalancesUseCase:
    """Compute the current balance of every account."""

    def __init__(self, storage: StoragePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            storage: Port providing ledger records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._storage = storage
        self._logger = logger or get_app_logger()

    def execute(self) -> list[AccountBalance]:
        """Return one balance per stored account.

        Returns:
            list[AccountBalance]: Opening balance plus signed transactions.
        """
        accounts = self._storage.load_all_accounts()
        transactions = self._storage.load_all_transactions()
        balances = compute_account_balances(accounts, transactions)
        self._logger.info(f"Computed {len(balances)} account balances")
        return balances


class GetCurrencyTotalsUseCase:
    """Sum account balances per currency."""

    def __init__(self, storage: StoragePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            storage: Port providing ledger records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._storage = storage
        self._logger = logger or get_app_logger()

    def execute(self, visible_only: bool = True) -> list[SumByGroup[str]]:
        """Return currency totals.

        Args:
            visible_only: Drop totals below the currency zero threshold.

        Returns:
            list[SumByGroup[str]]: Totals keyed by currency code.

        Raises:
            ValidationError: If a visible total is requested for a currency
                without configuration.
        """
        balances = GetAccountBalancesUseCase(
            self._storage,
            logger=self._logger,
        ).execute()
        totals = compute_currency_totals(balances)
        if not visible_only:
            return totals
        visible = compute_visible_currency_totals(
            totals,
            self._storage.load_currency_configs(),
        )
        hidden = len(totals) - len(visible)
        if hidden:
            self._logger.info(
                f"Hidden {hidden} effectively-zero currency totals"
            )
        return visible


__all__ = ["GetAccountBalancesUseCase", "GetCurrencyTotalsUseCase"]
