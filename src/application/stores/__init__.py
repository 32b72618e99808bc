"""Application stores package."""

from .assets import AssetCategoryStore, AssetSourceStore, AssetStore
from .base import RecordStore
from .history import NetWorthHistoryStore
from .spending import SpendingCategoryStore, TransactionStore

__all__ = [
    "RecordStore",
    "AssetCategoryStore",
    "AssetSourceStore",
    "AssetStore",
    "SpendingCategoryStore",
    "TransactionStore",
    "NetWorthHistoryStore",
]
