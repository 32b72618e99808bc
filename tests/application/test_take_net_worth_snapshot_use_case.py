"""Tests for the TakeNetWorthSnapshotUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases import TakeNetWorthSnapshotUseCase
from src.domain.models import (
    Asset,
    AssetCategory,
    AssetCategoryInput,
    AssetInput,
    AssetSourceInput,
    NetWorthHistory,
)
from src.infrastructure.asset_repository import (
    SqlAlchemyAssetCategoryRepository,
    SqlAlchemyAssetRepository,
    SqlAlchemyAssetSourceRepository,
)
from src.infrastructure.net_worth_history_repository import (
    SqlAlchemyNetWorthHistoryRepository,
)


CASH = AssetCategory(id="c1", name="Cash", type="cash")
LOANS = AssetCategory(id="c2", name="Loans", type="liability")


def _asset(asset_id, value, category):
    return Asset(
        id=asset_id,
        name=asset_id,
        category_id=category.id,
        source_id="s",
        current_value=Decimal(value),
        category=category,
    )


def _history(history_id, net_worth, day):
    return NetWorthHistory(
        id=history_id,
        total_assets=Decimal(net_worth),
        total_liabilities=Decimal("0"),
        net_worth=Decimal(net_worth),
        snapshot_date=day,
    )


def test_execute_inserts_history_with_asset_snapshots() -> None:
    """Without a snapshot this month, a row and children are created."""
    history_repo = MagicMock()
    history_repo.find_in_range.return_value = None
    created = _history("h1", "700", date(2024, 3, 15))
    history_repo.create_with_snapshots.return_value = (created, 2)
    asset_repo = MagicMock()
    asset_repo.fetch_all.return_value = [
        _asset("a1", "1000", CASH),
        _asset("a2", "300", LOANS),
    ]

    result = TakeNetWorthSnapshotUseCase(
        history_repo,
        asset_repo,
        logger=MagicMock(),
    ).execute(today=date(2024, 3, 15))

    history_repo.find_in_range.assert_called_once_with(
        date(2024, 3, 1),
        date(2024, 3, 31),
    )
    totals, snapshot_date, values = (
        history_repo.create_with_snapshots.call_args.args
    )
    assert totals.total_assets == Decimal("1000")
    assert totals.total_liabilities == Decimal("300")
    assert totals.net_worth == Decimal("700")
    assert snapshot_date == date(2024, 3, 15)
    assert values == [("a1", Decimal("1000")), ("a2", Decimal("300"))]
    assert result.created is True
    assert result.asset_snapshot_count == 2
    history_repo.update_totals.assert_not_called()


def test_execute_updates_existing_month_row() -> None:
    """A second snapshot in the month overwrites totals only."""
    existing = _history("h1", "100", date(2024, 3, 2))
    history_repo = MagicMock()
    history_repo.find_in_range.return_value = existing
    history_repo.update_totals.return_value = _history(
        "h1",
        "1000",
        date(2024, 3, 20),
    )
    asset_repo = MagicMock()
    asset_repo.fetch_all.return_value = [_asset("a1", "1000", CASH)]

    result = TakeNetWorthSnapshotUseCase(
        history_repo,
        asset_repo,
        logger=MagicMock(),
    ).execute(today=date(2024, 3, 20))

    history_id, totals, snapshot_date = (
        history_repo.update_totals.call_args.args
    )
    assert history_id == "h1"
    assert totals.net_worth == Decimal("1000")
    assert snapshot_date == date(2024, 3, 20)
    assert result.created is False
    assert result.asset_snapshot_count == 0
    history_repo.create_with_snapshots.assert_not_called()


def test_snapshot_is_idempotent_within_a_month(db_port) -> None:
    """Two snapshots in one month leave one row with the latest totals."""
    categories = SqlAlchemyAssetCategoryRepository(db_port)
    sources = SqlAlchemyAssetSourceRepository(db_port)
    assets = SqlAlchemyAssetRepository(db_port)
    history_repo = SqlAlchemyNetWorthHistoryRepository(db_port)
    category = categories.create(AssetCategoryInput("Cash", "cash"))
    source = sources.create(AssetSourceInput("DBS", category.id))
    asset = assets.create(
        AssetInput("Savings", category.id, source.id, Decimal("100"))
    )
    use_case = TakeNetWorthSnapshotUseCase(
        history_repo,
        assets,
        logger=MagicMock(),
    )

    first = use_case.execute(today=date(2024, 3, 5))
    assets.update(
        asset.id,
        AssetInput("Savings", category.id, source.id, Decimal("150")),
    )
    second = use_case.execute(today=date(2024, 3, 25))

    (row,) = history_repo.fetch_all()
    assert first.created is True
    assert second.created is False
    assert row.id == first.history.id
    assert row.net_worth == Decimal("150")
    assert row.snapshot_date == date(2024, 3, 25)
    (snapshot,) = history_repo.fetch_asset_snapshots(row.id)
    assert snapshot.value == Decimal("100")

    april = use_case.execute(today=date(2024, 4, 1))
    assert april.created is True
    assert len(history_repo.fetch_all()) == 2
