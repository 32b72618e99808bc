"""Ports for spending categories and transactions."""

from datetime import date
from typing import Protocol

from src.application.ports.record_repository import RecordRepositoryPort
from src.domain.models import (
    SpendingCategory,
    SpendingCategoryInput,
    Transaction,
    TransactionInput,
)


class SpendingCategoryRepositoryPort(
    RecordRepositoryPort[SpendingCategory, SpendingCategoryInput],
    Protocol,
):
    """Spending categories ordered by name."""


class TransactionRepositoryPort(
    RecordRepositoryPort[Transaction, TransactionInput],
    Protocol,
):
    """Transactions joined with their category, most recent date first."""

    def fetch_all(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[Transaction]:
        """Return transactions dated within the optional inclusive bounds."""


__all__ = ["SpendingCategoryRepositoryPort", "TransactionRepositoryPort"]
