"""Domain models for financial aggregates."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.domain.constants import LIABILITY_TYPES
from src.domain.models.records import Asset, NetWorthHistory


@dataclass(frozen=True)
class NetWorthBreakdownItem:
    """Value aggregated for one asset category."""

    category: str
    type: str
    value: Decimal
    color: str

    @property
    def is_liability(self) -> bool:
        return self.type in LIABILITY_TYPES


@dataclass(frozen=True)
class SourceBreakdownItem:
    """Value aggregated for one source inside a category."""

    source: str
    value: Decimal
    assets: list[Asset] = field(default_factory=list)


@dataclass(frozen=True)
class NetWorthBreakdown:
    """Net worth split by category and by source.

    Attributes:
        items: Category buckets in first-seen order.
        sources: Category name mapped to its source buckets.
        total_assets: Sum of non-liability buckets.
        total_liabilities: Sum of liability buckets.
        net_worth: Assets minus liabilities.
    """

    items: list[NetWorthBreakdownItem]
    sources: dict[str, list[SourceBreakdownItem]]
    total_assets: Decimal
    total_liabilities: Decimal
    net_worth: Decimal

    @property
    def asset_items(self) -> list[NetWorthBreakdownItem]:
        return [item for item in self.items if not item.is_liability]

    @property
    def liability_items(self) -> list[NetWorthBreakdownItem]:
        return [item for item in self.items if item.is_liability]


@dataclass(frozen=True)
class BudgetStatus:
    """Spending against the monthly budget of one category.

    ``remaining`` and ``percent_used`` are None when the category has no
    budget.
    """

    category_id: str
    category_name: str
    color: str
    budget_amount: Decimal | None
    spent: Decimal
    remaining: Decimal | None
    percent_used: Decimal | None
    over_budget: bool


@dataclass(frozen=True)
class BudgetReport:
    """Budget status of every category for one month."""

    period_start: date
    period_end: date
    statuses: list[BudgetStatus]
    uncategorized_spent: Decimal
    total_spent: Decimal


@dataclass(frozen=True)
class SpendingSummaryItem:
    """Spending grouped under one category label."""

    category: str
    color: str
    total: Decimal
    count: int


@dataclass(frozen=True)
class SpendingSummary:
    """Spending per category over a date range, largest first."""

    start_date: date
    end_date: date
    items: list[SpendingSummaryItem]
    total: Decimal


@dataclass(frozen=True)
class NetWorthChange:
    """Difference between the two most recent snapshots."""

    latest: NetWorthHistory
    previous: NetWorthHistory
    change: Decimal
    change_percent: Decimal | None


@dataclass(frozen=True)
class SnapshotResult:
    """Outcome of a snapshot write.

    Attributes:
        history: History row as written.
        created: True when a new row was inserted for the month.
        asset_snapshot_count: Number of asset snapshot rows inserted.
    """

    history: NetWorthHistory
    created: bool
    asset_snapshot_count: int


__all__ = [
    "NetWorthBreakdownItem",
    "SourceBreakdownItem",
    "NetWorthBreakdown",
    "BudgetStatus",
    "BudgetReport",
    "SpendingSummaryItem",
    "SpendingSummary",
    "NetWorthChange",
    "SnapshotResult",
]
