"""Port for net worth history snapshots."""

from datetime import date
from decimal import Decimal
from typing import Protocol

from src.domain.models import AssetSnapshot, NetWorthHistory, NetWorthTotals


class NetWorthHistoryRepositoryPort(Protocol):
    """Port exposing net worth history and asset snapshot storage."""

    def fetch_all(self) -> list[NetWorthHistory]:
        """Return history rows ordered by ascending snapshot date."""

    def find_in_range(
        self,
        start_date: date,
        end_date: date,
    ) -> NetWorthHistory | None:
        """Return the earliest history row dated within the range."""

    def update_totals(
        self,
        history_id: str,
        totals: NetWorthTotals,
        snapshot_date: date,
    ) -> NetWorthHistory:
        """Overwrite the totals and date of an existing history row."""

    def create_with_snapshots(
        self,
        totals: NetWorthTotals,
        snapshot_date: date,
        asset_values: list[tuple[str, Decimal]],
    ) -> tuple[NetWorthHistory, int]:
        """Insert a history row and one asset snapshot per asset value.

        Returns:
            tuple[NetWorthHistory, int]: Created row and snapshot count.
        """

    def fetch_asset_snapshots(self, history_id: str) -> list[AssetSnapshot]:
        """Return the asset snapshots captured with a history row."""

    def delete(self, history_id: str) -> None:
        """Delete a history row and its asset snapshots."""


__all__ = ["NetWorthHistoryRepositoryPort"]
