"""Tests for the read-side finance use cases."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases import (
    GetBudgetStatusUseCase,
    GetNetWorthBreakdownUseCase,
    GetSpendingSummaryUseCase,
)
from src.domain.models import (
    Asset,
    AssetCategory,
    SpendingCategory,
    Transaction,
)


STOCKS = AssetCategory(id="c1", name="Stocks", type="investment")
LOANS = AssetCategory(id="c2", name="Loans", type="liability")


def _asset(asset_id, value, category, currency="SGD"):
    return Asset(
        id=asset_id,
        name=asset_id,
        category_id=category.id,
        source_id="s",
        current_value=Decimal(value),
        currency=currency,
        category=category,
    )


def test_breakdown_use_case_computes_totals_and_logs() -> None:
    """Use case should aggregate assets and log the totals."""
    repo = MagicMock()
    repo.fetch_all.return_value = [
        _asset("a1", "1000", STOCKS),
        _asset("a2", "300", LOANS),
    ]
    logger = MagicMock()

    breakdown = GetNetWorthBreakdownUseCase(repo, logger=logger).execute()

    assert breakdown.net_worth == Decimal("700")
    logger.warning.assert_not_called()
    assert "assets=1000" in logger.info.call_args.args[0]


def test_breakdown_use_case_warns_on_mixed_currencies() -> None:
    repo = MagicMock()
    repo.fetch_all.return_value = [
        _asset("a1", "10", STOCKS, "USD"),
        _asset("a2", "10", STOCKS, "SGD"),
    ]
    logger = MagicMock()

    breakdown = GetNetWorthBreakdownUseCase(repo, logger=logger).execute()

    assert breakdown.total_assets == Decimal("20")
    assert "SGD, USD" in logger.warning.call_args.args[0]


def test_budget_use_case_queries_current_month() -> None:
    """Transactions should be fetched for the month containing today."""
    food = SpendingCategory(id="f", name="Food", budget_amount=Decimal("200"))
    category_repo = MagicMock()
    category_repo.fetch_all.return_value = [food]
    transaction_repo = MagicMock()
    transaction_repo.fetch_all.return_value = [
        Transaction(
            id="t1",
            amount=Decimal("250"),
            transaction_date=date(2024, 3, 9),
            category_id="f",
        )
    ]
    logger = MagicMock()

    report = GetBudgetStatusUseCase(
        category_repo,
        transaction_repo,
        logger=logger,
    ).execute(today=date(2024, 3, 15))

    transaction_repo.fetch_all.assert_called_once_with(
        start_date=date(2024, 3, 1),
        end_date=date(2024, 3, 31),
    )
    (status,) = report.statuses
    assert status.percent_used == Decimal("125")
    assert status.over_budget is True
    assert "Food" in logger.info.call_args.args[0]


def test_spending_summary_use_case_uses_trailing_window() -> None:
    transaction_repo = MagicMock()
    transaction_repo.fetch_all.return_value = []

    summary = GetSpendingSummaryUseCase(
        transaction_repo,
        logger=MagicMock(),
    ).execute(months=2, today=date(2024, 1, 20))

    transaction_repo.fetch_all.assert_called_once_with(
        start_date=date(2023, 12, 1),
        end_date=date(2024, 1, 31),
    )
    assert summary.start_date == date(2023, 12, 1)
    assert summary.total == Decimal("0")
