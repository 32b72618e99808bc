"""Tests for the finance aggregation services."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models import (
    Asset,
    AssetCategory,
    AssetSource,
    NetWorthHistory,
    SpendingCategory,
    Transaction,
)
from src.domain.services.finance import (
    compute_budget_report,
    compute_budget_status,
    compute_net_worth_breakdown,
    compute_net_worth_change,
    compute_net_worth_totals,
    compute_spending_summary,
    group_transactions_by_date,
    sum_transactions,
)
from src.domain.services.periods import month_range


STOCKS = AssetCategory(id="c1", name="Stocks", type="investment")
LOANS = AssetCategory(id="c2", name="Loans", type="liability")
CASH = AssetCategory(id="c3", name="Cash", type="cash")
IBKR = AssetSource(id="s1", name="IBKR", category_id="c1")
BANK = AssetSource(id="s2", name="Bank", category_id="c2")

MARCH = month_range(date(2024, 3, 15))


def _asset(asset_id, value, category=None, source=None, currency="SGD"):
    return Asset(
        id=asset_id,
        name=f"asset-{asset_id}",
        category_id=category.id if category else "",
        source_id=source.id if source else "",
        current_value=Decimal(value),
        currency=currency,
        category=category,
        source=source,
    )


def _transaction(amount, day, category=None, category_id=None):
    return Transaction(
        id=f"t-{amount}-{day}",
        amount=Decimal(amount),
        transaction_date=day,
        category_id=category.id if category else category_id,
        category=category,
    )


def test_breakdown_with_stocks_and_loan():
    """An investment and a liability should net out."""
    assets = [
        _asset("a1", "1000", STOCKS, IBKR),
        _asset("a2", "300", LOANS, BANK),
    ]

    breakdown = compute_net_worth_breakdown(assets)

    assert [(i.category, i.value, i.color) for i in breakdown.items] == [
        ("Stocks", Decimal("1000"), "#22c55e"),
        ("Loans", Decimal("300"), "#ef4444"),
    ]
    assert breakdown.total_assets == Decimal("1000")
    assert breakdown.total_liabilities == Decimal("300")
    assert breakdown.net_worth == Decimal("700")
    assert [item.category for item in breakdown.asset_items] == ["Stocks"]
    assert [item.category for item in breakdown.liability_items] == ["Loans"]
    assert breakdown.sources["Stocks"][0].source == "IBKR"
    assert breakdown.sources["Stocks"][0].assets == [assets[0]]


def test_breakdown_groups_sources_and_skips_uncategorized():
    """Missing sources become Unknown; assets without category are skipped."""
    assets = [
        _asset("a1", "100", STOCKS, IBKR),
        _asset("a2", "50", STOCKS, None),
        _asset("a3", "25", STOCKS, IBKR),
        _asset("a4", "999", None, None),
    ]

    breakdown = compute_net_worth_breakdown(assets)

    (item,) = breakdown.items
    assert item.value == Decimal("175")
    sources = breakdown.sources["Stocks"]
    assert [(s.source, s.value) for s in sources] == [
        ("IBKR", Decimal("125")),
        ("Unknown", Decimal("50")),
    ]
    assert breakdown.total_assets == sum(
        (i.value for i in breakdown.asset_items),
        Decimal("0"),
    )


def test_breakdown_warns_on_negative_values():
    logger = MagicMock()

    compute_net_worth_breakdown(
        [_asset("a1", "-5", CASH, None)],
        logger=logger,
    )

    logger.warning.assert_called_once()


def test_totals_subtract_liabilities_and_keep_uncategorized():
    totals = compute_net_worth_totals(
        [
            _asset("a1", "1000", STOCKS),
            _asset("a2", "300", LOANS),
            _asset("a3", "20", None),
        ]
    )

    assert totals.total_assets == Decimal("1020")
    assert totals.total_liabilities == Decimal("300")
    assert totals.net_worth == Decimal("720")


def test_budget_status_over_budget():
    """Spending 250 of a 200 budget is 125 percent and over budget."""
    food = SpendingCategory(id="f", name="Food", budget_amount=Decimal("200"))

    status = compute_budget_status(food, Decimal("250"))

    assert status.remaining == Decimal("-50")
    assert status.percent_used == Decimal("125")
    assert status.over_budget is True


def test_budget_status_without_budget():
    for budget in (None, Decimal("0")):
        category = SpendingCategory(id="x", name="X", budget_amount=budget)

        status = compute_budget_status(category, Decimal("40"))

        assert status.remaining is None
        assert status.percent_used is None
        assert status.over_budget is False


def test_budget_report_splits_uncategorized_spending():
    """Per-category spent plus uncategorized equals the total."""
    food = SpendingCategory(id="f", name="Food", budget_amount=Decimal("200"))
    travel = SpendingCategory(id="t", name="Travel")
    transactions = [
        _transaction("120", date(2024, 3, 1), food),
        _transaction("130", date(2024, 3, 31), food),
        _transaction("15", date(2024, 3, 5)),
        _transaction("5", date(2024, 3, 6), category_id="deleted"),
        _transaction("99", date(2024, 4, 1), food),
    ]

    report = compute_budget_report([food, travel], transactions, MARCH)

    food_status, travel_status = report.statuses
    assert food_status.spent == Decimal("250")
    assert food_status.over_budget is True
    assert travel_status.spent == Decimal("0")
    assert report.uncategorized_spent == Decimal("20")
    assert report.total_spent == Decimal("270")
    assert report.period_start == date(2024, 3, 1)
    assert report.period_end == date(2024, 3, 31)


def test_spending_summary_groups_and_sorts():
    """Food 10 + 20 and an uncategorized 5 should be summarized."""
    food = SpendingCategory(id="f", name="Food", color="#ef4444")
    transactions = [
        _transaction("10", date(2024, 3, 2), food),
        _transaction("5", date(2024, 3, 3)),
        _transaction("20", date(2024, 3, 4), food),
    ]

    summary = compute_spending_summary(transactions, MARCH)

    rows = [(i.category, i.total, i.count, i.color) for i in summary.items]
    assert rows == [
        ("Food", Decimal("30"), 2, "#ef4444"),
        ("Uncategorized", Decimal("5"), 1, "#6b7280"),
    ]
    assert summary.total == Decimal("35")


def test_spending_summary_empty():
    summary = compute_spending_summary([], MARCH)

    assert summary.items == []
    assert summary.total == Decimal("0")


def _history(net_worth, day):
    return NetWorthHistory(
        id=str(day),
        total_assets=Decimal(net_worth),
        total_liabilities=Decimal("0"),
        net_worth=Decimal(net_worth),
        snapshot_date=day,
    )


def test_net_worth_change_between_last_two_snapshots():
    history = [
        _history("100", date(2024, 1, 31)),
        _history("-200", date(2024, 2, 29)),
        _history("-150", date(2024, 3, 31)),
    ]

    change = compute_net_worth_change(history)

    assert change.change == Decimal("50")
    assert change.change_percent == Decimal("25")
    assert change.latest is history[-1]


def test_net_worth_change_edge_cases():
    assert compute_net_worth_change([]) is None
    assert compute_net_worth_change([_history("1", date(2024, 1, 1))]) is None
    change = compute_net_worth_change(
        [_history("0", date(2024, 1, 1)), _history("10", date(2024, 2, 1))]
    )
    assert change.change == Decimal("10")
    assert change.change_percent is None


def test_group_and_sum_transactions():
    first = _transaction("1", date(2024, 3, 2))
    second = _transaction("2", date(2024, 3, 1))
    third = _transaction("3", date(2024, 3, 2))

    grouped = group_transactions_by_date([first, second, third])

    assert list(grouped) == [date(2024, 3, 2), date(2024, 3, 1)]
    assert grouped[date(2024, 3, 2)] == [first, third]
    assert sum_transactions([first, second, third]) == Decimal("6")
