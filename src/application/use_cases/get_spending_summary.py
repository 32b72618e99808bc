"""Use case to summarize spending per category over recent months."""

from datetime import date

from src.application.ports.spending_repository import (
    TransactionRepositoryPort,
)
from src.domain.models import SpendingSummary
from src.domain.services.finance import compute_spending_summary
from src.domain.services.periods import trailing_months_range
from src.infrastructure.logging.logger import get_app_logger


class GetSpendingSummaryUseCase:
    """Group transactions of the last N months by category."""

    def __init__(
        self,
        transaction_repository: TransactionRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            transaction_repository: Port providing transactions joined with
                their spending category.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._transaction_repository = transaction_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        months: int = 1,
        today: date | None = None,
    ) -> SpendingSummary:
        """Return spending grouped by category.

        Args:
            months: Number of calendar months to cover, current one included.
            today: Reference date, defaults to the current date.

        Returns:
            SpendingSummary: Groups sorted by descending total.
        """
        period = trailing_months_range(months, today or date.today())
        transactions = self._transaction_repository.fetch_all(
            start_date=period.start,
            end_date=period.end,
        )
        self._logger.info(
            f"Fetched {len(transactions)} transactions between "
            f"{period.start} and {period.end}"
        )
        return compute_spending_summary(transactions, period)


__all__ = ["GetSpendingSummaryUseCase"]
