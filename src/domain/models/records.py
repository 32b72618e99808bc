"""Domain models for persisted finance records.

Records mirror the rows of the backing store. Joined relations (an asset's
category and source, a transaction's spending category) are optional fields
populated by repositories when the read includes them.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from src.domain.constants import (
    DEFAULT_CURRENCY,
    DEFAULT_SPENDING_COLOR,
    LIABILITY_TYPES,
)


@dataclass(frozen=True)
class AssetCategory:
    """Top-level grouping of assets (investment, cash, property, liability)."""

    id: str
    name: str
    type: str
    display_order: int = 0
    icon: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_liability(self) -> bool:
        return self.type in LIABILITY_TYPES


@dataclass(frozen=True)
class AssetSource:
    """Institution or holder of assets, belonging to one category."""

    id: str
    name: str
    category_id: str
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    category: AssetCategory | None = None


@dataclass(frozen=True)
class Asset:
    """A valued holding, tied to a category and a source."""

    id: str
    name: str
    category_id: str
    source_id: str
    current_value: Decimal
    currency: str = DEFAULT_CURRENCY
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    category: AssetCategory | None = None
    source: AssetSource | None = None


@dataclass(frozen=True)
class SpendingCategory:
    """Expense category with an optional monthly budget."""

    id: str
    name: str
    color: str = DEFAULT_SPENDING_COLOR
    budget_amount: Decimal | None = None
    icon: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class Transaction:
    """A single expense on a calendar date."""

    id: str
    amount: Decimal
    transaction_date: date
    category_id: str | None = None
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    category: SpendingCategory | None = None


@dataclass(frozen=True)
class NetWorthHistory:
    """Monthly net worth snapshot."""

    id: str
    total_assets: Decimal
    total_liabilities: Decimal
    net_worth: Decimal
    snapshot_date: date
    created_at: datetime | None = None


@dataclass(frozen=True)
class AssetSnapshot:
    """Value of one asset captured with a net worth snapshot."""

    id: str
    history_id: str
    asset_id: str
    value: Decimal
    created_at: datetime | None = None


@dataclass(frozen=True)
class AssetCategoryInput:
    """Editable fields of an asset category."""

    name: str
    type: str
    display_order: int = 0
    icon: str | None = None


@dataclass(frozen=True)
class AssetSourceInput:
    """Editable fields of an asset source."""

    name: str
    category_id: str
    description: str | None = None


@dataclass(frozen=True)
class AssetInput:
    """Editable fields of an asset."""

    name: str
    category_id: str
    source_id: str
    current_value: Decimal
    currency: str = DEFAULT_CURRENCY
    notes: str | None = None


@dataclass(frozen=True)
class SpendingCategoryInput:
    """Editable fields of a spending category."""

    name: str
    color: str = DEFAULT_SPENDING_COLOR
    budget_amount: Decimal | None = None
    icon: str | None = None


@dataclass(frozen=True)
class TransactionInput:
    """Editable fields of a transaction."""

    amount: Decimal
    transaction_date: date
    category_id: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class NetWorthTotals:
    """Asset, liability and net worth totals of a set of assets."""

    total_assets: Decimal
    total_liabilities: Decimal
    net_worth: Decimal


__all__ = [
    "AssetCategory",
    "AssetSource",
    "Asset",
    "SpendingCategory",
    "Transaction",
    "NetWorthHistory",
    "AssetSnapshot",
    "AssetCategoryInput",
    "AssetSourceInput",
    "AssetInput",
    "SpendingCategoryInput",
    "TransactionInput",
    "NetWorthTotals",
]
