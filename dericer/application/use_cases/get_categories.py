"""Use case to list categories."""

from dericer.application.ports.storage import StoragePort
from dericer.domain.models import Category
from dericer.domain.policies import exclude_deleted


class GetCategoriesUseCase:
    """List the categories that are not soft-deleted."""

    def __init__(self, storage: StoragePort) -> None:
        """Initialize the use case with its required dependencies."""
        self._storage = storage

    def execute(self) -> list[Category]:
        """Return every active category in storage order."""
        return exclude_deleted(self._storage.load_all_categories())


__all__ = ["GetCategoriesUseCase"]
