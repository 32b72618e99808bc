"""Domain models package."""

from .finance import (
    BudgetReport,
    BudgetStatus,
    NetWorthBreakdown,
    NetWorthBreakdownItem,
    NetWorthChange,
    SnapshotResult,
    SourceBreakdownItem,
    SpendingSummary,
    SpendingSummaryItem,
)
from .records import (
    Asset,
    AssetCategory,
    AssetCategoryInput,
    AssetInput,
    AssetSnapshot,
    AssetSource,
    AssetSourceInput,
    NetWorthHistory,
    NetWorthTotals,
    SpendingCategory,
    SpendingCategoryInput,
    Transaction,
    TransactionInput,
)

__all__ = [
    "Asset",
    "AssetCategory",
    "AssetCategoryInput",
    "AssetInput",
    "AssetSnapshot",
    "AssetSource",
    "AssetSourceInput",
    "NetWorthHistory",
    "NetWorthTotals",
    "SpendingCategory",
    "SpendingCategoryInput",
    "Transaction",
    "TransactionInput",
    "BudgetReport",
    "BudgetStatus",
    "NetWorthBreakdown",
    "NetWorthBreakdownItem",
    "NetWorthChange",
    "SnapshotResult",
    "SourceBreakdownItem",
    "SpendingSummary",
    "SpendingSummaryItem",
]
