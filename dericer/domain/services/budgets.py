"""Domain services for budget evaluation."""

from collections.abc import Iterable
from logging import Logger

from dericer.domain.models.ids import BudgetId, CategoryId
from dericer.domain.models.ledger import (
    Budget,
    Category,
    Transaction,
    TransactionKind,
)
from dericer.domain.models.reports import BudgetStatus, SumByGroup
from dericer.domain.services.categories import get_descendant_category_ids
from dericer.domain.services.transactions import get_signed_amount_minor


def get_budget_category_scope(
    budget: Budget,
    categories: Iterable[Category],
    logger: Logger | None = None,
) -> set[CategoryId]:
    """Return the budget category plus all of its descendants."""
    descendants = get_descendant_category_ids(
        budget.category_id,
        categories,
        logger=logger,
    )
    return {budget.category_id, *descendants}


def calculate_budget_status(
    budget: Budget,
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
    logger: Logger | None = None,
) -> BudgetStatus:
    """Evaluate spend against a budget.

    Only non-deleted expenses in the budget currency, dated inside the
    inclusive budget range and categorized within the budget scope count.

    Args:
        budget: Budget to evaluate.
        transactions: Full transaction set.
        categories: Full category set used to resolve the scope.
        logger: Optional logger used for hierarchy warnings.

    Returns:
        BudgetStatus: Spend, remaining amount and clamped percentage.
    """
    scope = get_budget_category_scope(budget, categories, logger=logger)
    spent = 0
    for tx in transactions:
        if tx.is_deleted:
            continue
        if tx.currency != budget.currency:
            continue
        if tx.date < budget.start_date or tx.date > budget.end_date:
            continue
        if tx.kind != TransactionKind.EXPENSE:
            continue
        if not tx.category_id or tx.category_id not in scope:
            continue
        spent += abs(get_signed_amount_minor(tx))

    return BudgetStatus(
        budget=budget,
        spent_minor=spent,
        remaining_minor=budget.amount_minor - spent,
        percent_used=_percent_used(spent, budget.amount_minor),
    )


def _percent_used(spent: int, amount: int) -> float:
    if amount == 0:
        return 100.0 if spent > 0 else 0.0
    return min(100.0, max(0.0, spent / amount * 100))


def summarize_budget_statuses(
    statuses: Iterable[BudgetStatus],
) -> list[SumByGroup[BudgetId]]:
    """Map statuses to spend totals keyed by budget id."""
    return [
        SumByGroup(key=status.budget.id, total_minor=status.spent_minor)
        for status in statuses
    ]


__all__ = [
    "get_budget_category_scope",
    "calculate_budget_status",
    "summarize_budget_statuses",
]
