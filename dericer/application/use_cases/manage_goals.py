"""Use cases managing savings goals."""

from dataclasses import replace

from dericer.application.ports.storage import StoragePort
from dericer.application.ports.time import TimePort
from dericer.domain.errors import NotFoundError, ValidationError
from dericer.domain.models import (
    CreateGoalCommand,
    Goal,
    GoalId,
    UpdateGoalCommand,
    generate_id,
)
from dericer.domain.models.patch import apply_patch, apply_required_patch
from dericer.domain.policies import exclude_deleted
from dericer.infrastructure.logging.logger import get_app_logger


def _validate_target_amount(target_amount_minor) -> None:
    if target_amount_minor <= 0:
        raise ValidationError("Goal target amount must be positive.")


class ListGoalsUseCase:
    """List the goals that are not soft-deleted."""

    def __init__(self, storage: StoragePort) -> None:
        """Initialize the use case with its required dependencies."""
        self._storage = storage

    def execute(self) -> list[Goal]:
        """Return every active goal in storage order."""
        return exclude_deleted(self._storage.load_all_goals())


class CreateGoalUseCase:
    """Create a savings goal."""

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

    def execute(self, command: CreateGoalCommand) -> Goal:
        """Validate and persist a new goal.

        Raises:
            ValidationError: If the target amount is not positive.
        """
        _validate_target_amount(command.target_amount_minor)
        now = self._time.now()
        goal = Goal(
            id=GoalId(generate_id()),
            name=command.name,
            target_amount_minor=command.target_amount_minor,
            currency=command.currency,
            target_date=command.target_date,
            note=command.note,
            created_at=now,
            updated_at=now,
        )
        self._storage.save_goal(goal)
        self._logger.info(f"Created goal {goal.id}")
        return goal


class UpdateGoalUseCase:
    """Apply a partial update to a goal, including soft delete and restore."""

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

    def execute(self, goal_id: GoalId, command: UpdateGoalCommand) -> Goal:
        """Merge the patches into the stored goal and persist it.

        Deleted goals can be updated so that ``is_deleted`` may be reset.

        Raises:
            NotFoundError: If no goal has the id.
            ValidationError: If the merged target amount is not positive.
        """
        existing = self._storage.get_goal_by_id(goal_id)
        if existing is None:
            raise NotFoundError(f"Goal not found: {goal_id}")

        updated = replace(
            existing,
            name=apply_required_patch(command.name, existing.name, "name"),
            target_amount_minor=apply_required_patch(
                command.target_amount_minor,
                existing.target_amount_minor,
                "target_amount_minor",
            ),
            currency=apply_required_patch(
                command.currency,
                existing.currency,
                "currency",
            ),
            target_date=apply_patch(command.target_date, existing.target_date),
            note=apply_patch(command.note, existing.note),
            is_deleted=apply_required_patch(
                command.is_deleted,
                existing.is_deleted,
                "is_deleted",
            ),
            updated_at=self._time.now(),
        )
        _validate_target_amount(updated.target_amount_minor)
        self._storage.save_goal(updated)
        self._logger.info(f"Updated goal {goal_id}")
        return updated


__all__ = ["ListGoalsUseCase", "CreateGoalUseCase", "UpdateGoalUseCase"]
