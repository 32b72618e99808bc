"""Domain services package."""

from .finance import (
    compute_budget_report,
    compute_budget_status,
    compute_net_worth_breakdown,
    compute_net_worth_change,
    compute_net_worth_totals,
    compute_spending_summary,
    group_transactions_by_date,
    sum_transactions,
)
from .periods import (
    DateRange,
    end_of_month,
    month_range,
    shift_month,
    start_of_month,
    trailing_months_range,
)
from .validation import (
    find_mixed_currencies,
    is_positive_amount,
    validate_asset_value_sign,
)

__all__ = [
    "compute_budget_report",
    "compute_budget_status",
    "compute_net_worth_breakdown",
    "compute_net_worth_change",
    "compute_net_worth_totals",
    "compute_spending_summary",
    "group_transactions_by_date",
    "sum_transactions",
    "DateRange",
    "end_of_month",
    "month_range",
    "shift_month",
    "start_of_month",
    "trailing_months_range",
    "find_mixed_currencies",
    "is_positive_amount",
    "validate_asset_value_sign",
]
