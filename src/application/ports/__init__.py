"""Application ports package."""

from .asset_repository import (
    AssetCategoryRepositoryPort,
    AssetRepositoryPort,
    AssetSourceRepositoryPort,
)
from .auth import AuthPort
from .database import DatabaseEnginePort
from .net_worth_history_repository import NetWorthHistoryRepositoryPort
from .record_repository import RecordRepositoryPort
from .spending_repository import (
    SpendingCategoryRepositoryPort,
    TransactionRepositoryPort,
)

__all__ = [
    "AssetCategoryRepositoryPort",
    "AssetRepositoryPort",
    "AssetSourceRepositoryPort",
    "AuthPort",
    "DatabaseEnginePort",
    "NetWorthHistoryRepositoryPort",
    "RecordRepositoryPort",
    "SpendingCategoryRepositoryPort",
    "TransactionRepositoryPort",
]
