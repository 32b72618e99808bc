"""Application use cases package."""

from .get_budget_status import GetBudgetStatusUseCase
from .get_net_worth_breakdown import GetNetWorthBreakdownUseCase
from .get_spending_summary import GetSpendingSummaryUseCase
from .seed_asset_categories import SeedAssetCategoriesUseCase
from .sign_out import SignOutUseCase
from .take_net_worth_snapshot import TakeNetWorthSnapshotUseCase

__all__ = [
    "GetBudgetStatusUseCase",
    "GetNetWorthBreakdownUseCase",
    "GetSpendingSummaryUseCase",
    "SeedAssetCategoriesUseCase",
    "SignOutUseCase",
    "TakeNetWorthSnapshotUseCase",
]
