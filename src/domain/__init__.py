"""Domain package for business rules and core models."""

from .constants import (
    ASSET_TYPE_COLORS,
    ASSET_TYPES,
    DEFAULT_COLOR,
    DEFAULT_CURRENCY,
    LIABILITY_TYPES,
    UNCATEGORIZED_LABEL,
)
from .errors import (
    FinanceError,
    RecordNotFoundError,
    RepositoryError,
    ValidationError,
)
from .policies import filter_sources_for_category, source_matches_category
from .services import (
    compute_budget_report,
    compute_net_worth_breakdown,
    compute_net_worth_change,
    compute_net_worth_totals,
    compute_spending_summary,
)

__all__ = [
    "ASSET_TYPE_COLORS",
    "ASSET_TYPES",
    "DEFAULT_COLOR",
    "DEFAULT_CURRENCY",
    "LIABILITY_TYPES",
    "UNCATEGORIZED_LABEL",
    "FinanceError",
    "RecordNotFoundError",
    "RepositoryError",
    "ValidationError",
    "filter_sources_for_category",
    "source_matches_category",
    "compute_budget_report",
    "compute_net_worth_breakdown",
    "compute_net_worth_change",
    "compute_net_worth_totals",
    "compute_spending_summary",
]
