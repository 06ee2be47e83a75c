"""Use cases to read accounts for presentation layers."""

from dericer.application.ports.storage import StoragePort
from dericer.domain.errors import NotFoundError
from dericer.domain.models import Account, AccountId
from dericer.domain.policies import exclude_deleted, is_active


class GetAccountsUseCase:
    """List the accounts that are not soft-deleted."""

    def __init__(self, storage: StoragePort) -> None:
        """Initialize the use case with its required dependencies."""
        self._storage = storage

    def execute(self) -> list[Account]:
        """Return every active account in storage order."""
        return exclude_deleted(self._storage.load_all_accounts())


class GetAccountUseCase:
    """Fetch a single active account."""

    def __init__(self, storage: StoragePort) -> None:
        """Initialize the use case with its required dependencies."""
        self._storage = storage

    def execute(self, account_id: AccountId) -> Account:
        """Return the account.

        Raises:
            NotFoundError: If the account is missing or soft-deleted.
        """
        account = self._storage.get_account_by_id(account_id)
        if not is_active(account):
            raise NotFoundError(f"Account not found: {account_id}")
        return account


__all__ = ["GetAccountsUseCase", "GetAccountUseCase"]
