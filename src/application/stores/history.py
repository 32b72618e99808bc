"""Store for the net worth history."""

from datetime import date

from src.application.ports.net_worth_history_repository import (
    NetWorthHistoryRepositoryPort,
)
from src.application.use_cases.take_net_worth_snapshot import (
    TakeNetWorthSnapshotUseCase,
)
from src.domain.errors import FinanceError
from src.domain.models import NetWorthChange, NetWorthHistory, SnapshotResult
from src.domain.services.finance import compute_net_worth_change
from src.infrastructure.logging.logger import get_app_logger


class NetWorthHistoryStore:
    """Net worth snapshots ordered by ascending snapshot date."""

    def __init__(
        self,
        repository: NetWorthHistoryRepositoryPort,
        snapshot_use_case: TakeNetWorthSnapshotUseCase,
        logger=None,
    ) -> None:
        """Initialize the store.

        Args:
            repository: Port providing access to the history table.
            snapshot_use_case: Use case writing the monthly snapshot.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._snapshot_use_case = snapshot_use_case
        self._logger = logger or get_app_logger()
        self._history: list[NetWorthHistory] = []
        self._error: str | None = None

    @property
    def history(self) -> list[NetWorthHistory]:
        return list(self._history)

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def latest(self) -> NetWorthHistory | None:
        return self._history[-1] if self._history else None

    def change(self) -> NetWorthChange | None:
        """Return the change between the two latest snapshots."""
        return compute_net_worth_change(self._history)

    def refresh(self) -> list[NetWorthHistory]:
        """Re-fetch the history, keeping stale rows on failure."""
        try:
            history = self._repository.fetch_all()
        except FinanceError as exc:
            self._error = str(exc) or "Failed to fetch history"
            self._logger.warning(f"Failed to fetch history: {self._error}")
            return self.history
        self._history = list(history)
        self._error = None
        return self.history

    def take_snapshot(self, today: date | None = None) -> SnapshotResult:
        """Write this month's snapshot and refresh the history."""
        result = self._snapshot_use_case.execute(today=today)
        self.refresh()
        return result

    def delete(self, history_id: str) -> None:
        """Delete a snapshot and refresh the history."""
        self._repository.delete(history_id)
        self._logger.info(f"Deleted net_worth_history row {history_id}")
        self.refresh()


__all__ = ["NetWorthHistoryStore"]
