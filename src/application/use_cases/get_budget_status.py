"""Use case to compare this month's spending with category budgets."""

from datetime import date

from src.application.ports.spending_repository import (
    SpendingCategoryRepositoryPort,
    TransactionRepositoryPort,
)
from src.domain.models import BudgetReport
from src.domain.services.finance import compute_budget_report
from src.domain.services.periods import month_range
from src.infrastructure.logging.logger import get_app_logger


class GetBudgetStatusUseCase:
    """Compute the budget status of every spending category."""

    def __init__(
        self,
        category_repository: SpendingCategoryRepositoryPort,
        transaction_repository: TransactionRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            category_repository: Port providing spending categories.
            transaction_repository: Port providing transactions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._category_repository = category_repository
        self._transaction_repository = transaction_repository
        self._logger = logger or get_app_logger()

    def execute(self, today: date | None = None) -> BudgetReport:
        """Return the budget report for the month containing ``today``.

        Args:
            today: Reference date, defaults to the current date.

        Returns:
            BudgetReport: Per-category status plus uncategorized spending.
        """
        period = month_range(today or date.today())
        categories = self._category_repository.fetch_all()
        transactions = self._transaction_repository.fetch_all(
            start_date=period.start,
            end_date=period.end,
        )
        report = compute_budget_report(categories, transactions, period)
        over = [
            status.category_name
            for status in report.statuses
            if status.over_budget
        ]
        if over:
            self._logger.info(
                f"Categories over budget for {period.start:%Y-%m}: "
                f"{', '.join(over)}"
            )
        return report


__all__ = ["GetBudgetStatusUseCase"]
