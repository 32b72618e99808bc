"""Use case writing the monthly net worth snapshot.

The snapshot is an upsert keyed by calendar month:

* when a history row already exists in the current month, its totals and
  snapshot date are overwritten and no asset snapshot is added;
* otherwise a history row is inserted together with one asset snapshot per
  current asset.
"""

from datetime import date

from src.application.ports.asset_repository import AssetRepositoryPort
from src.application.ports.net_worth_history_repository import (
    NetWorthHistoryRepositoryPort,
)
from src.domain.models import SnapshotResult
from src.domain.services.finance import compute_net_worth_totals
from src.domain.services.periods import month_range
from src.infrastructure.logging.logger import get_app_logger


class TakeNetWorthSnapshotUseCase:
    """Record the current net worth for this calendar month."""

    def __init__(
        self,
        history_repository: NetWorthHistoryRepositoryPort,
        asset_repository: AssetRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            history_repository: Port providing history and snapshot storage.
            asset_repository: Port providing assets joined with category.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._history_repository = history_repository
        self._asset_repository = asset_repository
        self._logger = logger or get_app_logger()

    def execute(self, today: date | None = None) -> SnapshotResult:
        """Create or update the snapshot of the month containing ``today``.

        Args:
            today: Snapshot date, defaults to the current date.

        Returns:
            SnapshotResult: Written row and whether it was created.
        """
        snapshot_date = today or date.today()
        period = month_range(snapshot_date)
        existing = self._history_repository.find_in_range(
            period.start,
            period.end,
        )
        assets = self._asset_repository.fetch_all()
        totals = compute_net_worth_totals(assets)

        if existing is not None:
            history = self._history_repository.update_totals(
                existing.id,
                totals,
                snapshot_date,
            )
            self._logger.info(
                f"Updated net worth snapshot {history.id} for "
                f"{period.start:%Y-%m}: net_worth={totals.net_worth}"
            )
            return SnapshotResult(
                history=history,
                created=False,
                asset_snapshot_count=0,
            )

        history, count = self._history_repository.create_with_snapshots(
            totals,
            snapshot_date,
            [(asset.id, asset.current_value) for asset in assets],
        )
        self._logger.info(
            f"Created net worth snapshot {history.id} for "
            f"{period.start:%Y-%m} with {count} asset snapshots: "
            f"net_worth={totals.net_worth}"
        )
        return SnapshotResult(
            history=history,
            created=True,
            asset_snapshot_count=count,
        )


__all__ = ["TakeNetWorthSnapshotUseCase"]
