"""Stores for spending categories and transactions."""

from datetime import date

from src.application.ports.spending_repository import (
    SpendingCategoryRepositoryPort,
    TransactionRepositoryPort,
)
from src.application.stores.base import RecordStore
from src.domain.models import (
    SpendingCategory,
    SpendingCategoryInput,
    Transaction,
    TransactionInput,
)
from src.domain.services.periods import month_range


class SpendingCategoryStore(
    RecordStore[SpendingCategory, SpendingCategoryInput]
):
    """Spending categories ordered by name."""

    record_label = "spending_categories"

    def __init__(
        self,
        repository: SpendingCategoryRepositoryPort,
        logger=None,
    ) -> None:
        super().__init__(repository, logger=logger)


class TransactionStore(RecordStore[Transaction, TransactionInput]):
    """Transactions of one calendar month, or all of them."""

    record_label = "transactions"

    def __init__(
        self,
        repository: TransactionRepositoryPort,
        logger=None,
        month: date | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            repository: Port providing access to transactions.
            logger: Optional logger compatible with logging.Logger-like API.
            month: Any date inside the month to show; None for every
                transaction.
        """
        super().__init__(repository, logger=logger)
        self._transaction_repository = repository
        self._month = month

    @property
    def month(self) -> date | None:
        return self._month

    def set_month(self, month: date | None) -> list[Transaction]:
        """Change the month filter and re-fetch."""
        self._month = month
        return self.refresh()

    def _fetch(self) -> list[Transaction]:
        if self._month is None:
            return self._transaction_repository.fetch_all()
        period = month_range(self._month)
        return self._transaction_repository.fetch_all(
            start_date=period.start,
            end_date=period.end,
        )


__all__ = ["SpendingCategoryStore", "TransactionStore"]
