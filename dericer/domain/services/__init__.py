"""Domain services package."""

from .balances import (
    compute_account_balances,
    compute_currency_totals,
    compute_visible_currency_totals,
    validate_account_basic,
)
from .budgets import (
    calculate_budget_status,
    get_budget_category_scope,
    summarize_budget_statuses,
)
from .categories import (
    build_category_index,
    get_ancestor_category_ids,
    get_descendant_category_ids,
)
from .currency import (
    create_currency_config,
    create_money,
    from_minor_units,
    get_currency_config_or_raise,
    is_effectively_zero,
    to_minor_units,
)
from .reports import (
    sum_by_account,
    sum_by_category_hierarchy,
    sum_by_currency,
)
from .transactions import (
    compute_total_signed_amount,
    filter_transactions,
    get_signed_amount_minor,
    sort_transactions,
    validate_transaction_basic,
)

__all__ = [
    "build_category_index",
    "calculate_budget_status",
    "compute_account_balances",
    "compute_currency_totals",
    "compute_total_signed_amount",
    "compute_visible_currency_totals",
    "create_currency_config",
    "create_money",
    "filter_transactions",
    "from_minor_units",
    "get_ancestor_category_ids",
    "get_budget_category_scope",
    "get_currency_config_or_raise",
    "get_descendant_category_ids",
    "get_signed_amount_minor",
    "is_effectively_zero",
    "sort_transactions",
    "sum_by_account",
    "sum_by_category_hierarchy",
    "sum_by_currency",
    "summarize_budget_statuses",
    "to_minor_units",
    "validate_account_basic",
    "validate_transaction_basic",
]
