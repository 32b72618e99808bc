"""Domain services for finance aggregates.

All functions are pure reductions over records already fetched from the
backing store. No currency conversion is performed: values are summed as
stored, whatever their currency code.
"""

from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    ASSET_TYPE_COLORS,
    DEFAULT_COLOR,
    LIABILITY_TYPES,
    UNCATEGORIZED_LABEL,
    UNKNOWN_SOURCE_LABEL,
)
from src.domain.models import (
    Asset,
    BudgetReport,
    BudgetStatus,
    NetWorthBreakdown,
    NetWorthBreakdownItem,
    NetWorthChange,
    NetWorthHistory,
    NetWorthTotals,
    SourceBreakdownItem,
    SpendingCategory,
    SpendingSummary,
    SpendingSummaryItem,
    Transaction,
)
from src.domain.services.periods import DateRange
from src.domain.services.validation import (
    is_positive_amount,
    validate_asset_value_sign,
)
from src.utils.decimal_utils import coerce_decimal


HUNDRED = Decimal("100")


def compute_net_worth_totals(assets: Iterable[Asset]) -> NetWorthTotals:
    """Compute asset, liability and net worth totals.

    Assets whose category is a liability type are subtracted; every other
    asset, including one without a joined category, is added.

    Args:
        assets: Assets joined with their category.

    Returns:
        NetWorthTotals: Computed totals.
    """
    total_assets = Decimal("0")
    total_liabilities = Decimal("0")
    for asset in assets:
        value = coerce_decimal(asset.current_value)
        if asset.category is not None and asset.category.is_liability:
            total_liabilities += value
        else:
            total_assets += value
    return NetWorthTotals(
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_worth=total_assets - total_liabilities,
    )


def compute_net_worth_breakdown(
    assets: Iterable[Asset],
    logger: Logger | None = None,
) -> NetWorthBreakdown:
    """Group asset values by category and by source.

    Args:
        assets: Assets joined with their category and source. Assets without
            a category are skipped.
        logger: Optional logger used for sign convention warnings.

    Returns:
        NetWorthBreakdown: Category buckets in first-seen order, nested
        source buckets, and the totals derived from the category buckets.
    """
    category_totals: dict[str, Decimal] = {}
    category_types: dict[str, str] = {}
    sources: dict[str, list[SourceBreakdownItem]] = {}
    source_totals: dict[tuple[str, str], Decimal] = {}
    source_assets: dict[tuple[str, str], list[Asset]] = {}

    for asset in assets:
        category = asset.category
        if category is None:
            continue
        if logger is not None:
            validate_asset_value_sign(asset, logger)
        value = coerce_decimal(asset.current_value)
        name = category.name
        if name not in category_totals:
            category_totals[name] = Decimal("0")
            category_types[name] = category.type
            sources[name] = []
        category_totals[name] += value

        source_name = (
            asset.source.name
            if asset.source is not None and asset.source.name
            else UNKNOWN_SOURCE_LABEL
        )
        key = (name, source_name)
        if key not in source_totals:
            source_totals[key] = Decimal("0")
            source_assets[key] = []
            sources[name].append(source_name)
        source_totals[key] += value
        source_assets[key].append(asset)

    items = [
        NetWorthBreakdownItem(
            category=name,
            type=category_types[name],
            value=value,
            color=ASSET_TYPE_COLORS.get(category_types[name], DEFAULT_COLOR),
        )
        for name, value in category_totals.items()
    ]
    source_breakdown = {
        name: [
            SourceBreakdownItem(
                source=source_name,
                value=source_totals[(name, source_name)],
                assets=source_assets[(name, source_name)],
            )
            for source_name in source_names
        ]
        for name, source_names in sources.items()
    }

    total_assets = sum(
        (item.value for item in items if item.type not in LIABILITY_TYPES),
        Decimal("0"),
    )
    total_liabilities = sum(
        (item.value for item in items if item.type in LIABILITY_TYPES),
        Decimal("0"),
    )
    return NetWorthBreakdown(
        items=items,
        sources=source_breakdown,
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_worth=total_assets - total_liabilities,
    )


def compute_budget_status(
    category: SpendingCategory,
    spent: Decimal,
) -> BudgetStatus:
    """Compare the spending of a category with its monthly budget.

    A category is budgeted when its budget is strictly positive; otherwise
    ``remaining`` and ``percent_used`` are None and it is never over budget.
    """
    budget = category.budget_amount
    if not is_positive_amount(budget):
        return BudgetStatus(
            category_id=category.id,
            category_name=category.name,
            color=category.color,
            budget_amount=budget,
            spent=spent,
            remaining=None,
            percent_used=None,
            over_budget=False,
        )
    return BudgetStatus(
        category_id=category.id,
        category_name=category.name,
        color=category.color,
        budget_amount=budget,
        spent=spent,
        remaining=budget - spent,
        percent_used=spent / budget * HUNDRED,
        over_budget=spent > budget,
    )


def compute_budget_report(
    categories: Sequence[SpendingCategory],
    transactions: Iterable[Transaction],
    period: DateRange,
) -> BudgetReport:
    """Compute the budget status of every category for a period.

    Transactions outside ``period`` are ignored. Transactions without a
    category, or whose category is not in ``categories``, count as
    uncategorized so that every amount lands in exactly one bucket.

    Args:
        categories: All spending categories.
        transactions: Transactions, normally already filtered to the period.
        period: Inclusive month range.

    Returns:
        BudgetReport: One status per category, in the given order.
    """
    known_ids = {category.id for category in categories}
    spent_by_category: dict[str, Decimal] = {}
    uncategorized = Decimal("0")
    total = Decimal("0")
    for transaction in transactions:
        if not period.contains(transaction.transaction_date):
            continue
        amount = coerce_decimal(transaction.amount)
        total += amount
        category_id = transaction.category_id
        if category_id is None or category_id not in known_ids:
            uncategorized += amount
            continue
        spent_by_category[category_id] = (
            spent_by_category.get(category_id, Decimal("0")) + amount
        )

    statuses = [
        compute_budget_status(
            category,
            spent_by_category.get(category.id, Decimal("0")),
        )
        for category in categories
    ]
    return BudgetReport(
        period_start=period.start,
        period_end=period.end,
        statuses=statuses,
        uncategorized_spent=uncategorized,
        total_spent=total,
    )


def compute_spending_summary(
    transactions: Iterable[Transaction],
    period: DateRange,
) -> SpendingSummary:
    """Group spending by category name, largest total first.

    Args:
        transactions: Transactions joined with their spending category.
        period: Inclusive range the transactions were fetched for.

    Returns:
        SpendingSummary: Groups sorted by descending total, ties kept in
        first-seen order, plus the grand total.
    """
    totals: dict[str, Decimal] = {}
    counts: dict[str, int] = {}
    colors: dict[str, str] = {}
    grand_total = Decimal("0")
    for transaction in transactions:
        category = transaction.category
        label = category.name if category is not None else UNCATEGORIZED_LABEL
        color = (
            category.color
            if category is not None and category.color
            else DEFAULT_COLOR
        )
        amount = coerce_decimal(transaction.amount)
        if label not in totals:
            totals[label] = Decimal("0")
            counts[label] = 0
            colors[label] = color
        totals[label] += amount
        counts[label] += 1
        grand_total += amount

    items = sorted(
        (
            SpendingSummaryItem(
                category=label,
                color=colors[label],
                total=total,
                count=counts[label],
            )
            for label, total in totals.items()
        ),
        key=lambda item: item.total,
        reverse=True,
    )
    return SpendingSummary(
        start_date=period.start,
        end_date=period.end,
        items=items,
        total=grand_total,
    )


def compute_net_worth_change(
    history: Sequence[NetWorthHistory],
) -> NetWorthChange | None:
    """Compare the two most recent snapshots.

    Args:
        history: Snapshots ordered by ascending snapshot date.

    Returns:
        NetWorthChange | None: None with fewer than two snapshots. The
        percentage is relative to the absolute previous net worth and is
        None when that value is zero.
    """
    if len(history) < 2:
        return None
    latest = history[-1]
    previous = history[-2]
    change = latest.net_worth - previous.net_worth
    change_percent = (
        change / abs(previous.net_worth) * HUNDRED
        if previous.net_worth != 0
        else None
    )
    return NetWorthChange(
        latest=latest,
        previous=previous,
        change=change,
        change_percent=change_percent,
    )


def group_transactions_by_date(
    transactions: Iterable[Transaction],
) -> dict[date, list[Transaction]]:
    """Group transactions by day, keeping the input order inside each day."""
    grouped: dict[date, list[Transaction]] = {}
    for transaction in transactions:
        grouped.setdefault(transaction.transaction_date, []).append(
            transaction
        )
    return grouped


def sum_transactions(transactions: Iterable[Transaction]) -> Decimal:
    return sum(
        (coerce_decimal(transaction.amount) for transaction in transactions),
        Decimal("0"),
    )


__all__ = [
    "compute_net_worth_totals",
    "compute_net_worth_breakdown",
    "compute_budget_status",
    "compute_budget_report",
    "compute_spending_summary",
    "compute_net_worth_change",
    "group_transactions_by_date",
    "sum_transactions",
]
