"""SQLAlchemy-backed repositories for spending categories and transactions."""

from collections.abc import Mapping
from dataclasses import asdict
from datetime import date
from typing import Any

from sqlalchemy import Select, select

from src.application.ports.spending_repository import (
    SpendingCategoryRepositoryPort,
    TransactionRepositoryPort,
)
from src.domain.models import (
    SpendingCategory,
    SpendingCategoryInput,
    Transaction,
    TransactionInput,
)
from src.infrastructure.record_repository import (
    SqlAlchemyRecordRepository,
    prefixed_columns,
    unprefix,
)
from src.infrastructure.repository_utils import blank_to_none
from src.infrastructure.schema import spending_categories, transactions
from src.utils.date_utils import coerce_date, coerce_datetime
from src.utils.decimal_utils import coerce_decimal, coerce_optional_decimal


def spending_category_from_row(row: Mapping[str, Any]) -> SpendingCategory:
    return SpendingCategory(
        id=row["id"],
        name=row["name"],
        color=row["color"],
        budget_amount=coerce_optional_decimal(row["budget_amount"]),
        icon=row["icon"],
        created_at=coerce_datetime(row["created_at"]),
        updated_at=coerce_datetime(row["updated_at"]),
    )


class SqlAlchemySpendingCategoryRepository(
    SqlAlchemyRecordRepository[SpendingCategory, SpendingCategoryInput],
    SpendingCategoryRepositoryPort,
):
    """Spending categories ordered by name."""

    table = spending_categories
    plural_label = "categories"
    singular_label = "category"

    def _order_by(self) -> list[Any]:
        return [spending_categories.c.name, spending_categories.c.id]

    def _values(self, data: SpendingCategoryInput) -> dict[str, Any]:
        values = asdict(data)
        values["icon"] = blank_to_none(data.icon)
        return values

    def _to_record(self, row: Mapping[str, Any]) -> SpendingCategory:
        return spending_category_from_row(row)


class SqlAlchemyTransactionRepository(
    SqlAlchemyRecordRepository[Transaction, TransactionInput],
    TransactionRepositoryPort,
):
    """Transactions joined with their spending category."""

    table = transactions
    plural_label = "transactions"
    singular_label = "transaction"

    def fetch_all(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[Transaction]:
        """Return transactions dated within the optional inclusive bounds.

        Args:
            start_date: Optional lower bound (``>=``) on the date.
            end_date: Optional upper bound (``<=``) on the date.

        Returns:
            list[Transaction]: Most recent date first.
        """
        conditions = []
        if start_date:
            conditions.append(transactions.c.transaction_date >= start_date)
        if end_date:
            conditions.append(transactions.c.transaction_date <= end_date)
        return self._fetch_where(conditions)

    def _select(self) -> Select:
        return select(
            transactions,
            *prefixed_columns(spending_categories, "category"),
        ).select_from(
            transactions.outerjoin(
                spending_categories,
                spending_categories.c.id == transactions.c.category_id,
            )
        )

    def _order_by(self) -> list[Any]:
        return [
            transactions.c.transaction_date.desc(),
            transactions.c.created_at.desc(),
        ]

    def _values(self, data: TransactionInput) -> dict[str, Any]:
        values = asdict(data)
        values["category_id"] = data.category_id or None
        values["description"] = blank_to_none(data.description)
        return values

    def _to_record(self, row: Mapping[str, Any]) -> Transaction:
        category_row = unprefix(row, "category")
        return Transaction(
            id=row["id"],
            amount=coerce_decimal(row["amount"]),
            transaction_date=coerce_date(row["transaction_date"]),
            category_id=row["category_id"],
            description=row["description"],
            created_at=coerce_datetime(row["created_at"]),
            updated_at=coerce_datetime(row["updated_at"]),
            category=(
                spending_category_from_row(category_row)
                if category_row
                else None
            ),
        )


__all__ = [
    "SqlAlchemySpendingCategoryRepository",
    "SqlAlchemyTransactionRepository",
    "spending_category_from_row",
]
