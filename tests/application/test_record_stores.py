"""Tests for the record stores."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from src.application.stores import (
    AssetSourceStore,
    AssetStore,
    NetWorthHistoryStore,
    SpendingCategoryStore,
    TransactionStore,
)
from src.domain.errors import RecordNotFoundError, RepositoryError
from src.domain.models import (
    NetWorthHistory,
    SnapshotResult,
    SpendingCategoryInput,
)


def test_refresh_keeps_stale_items_on_failure() -> None:
    """A failed fetch should record the error and keep old items."""
    repo = MagicMock()
    first = [SimpleNamespace(id="a1")]
    repo.fetch_all.side_effect = [
        first,
        RepositoryError("Failed to fetch assets"),
        [SimpleNamespace(id="a2")],
    ]
    logger = MagicMock()
    store = AssetStore(repo, logger=logger)

    assert store.refresh() == first
    assert store.loaded is True
    assert store.refresh() == first
    assert store.error == "Failed to fetch assets"
    logger.warning.assert_called_once()
    assert [item.id for item in store.refresh()] == ["a2"]
    assert store.error is None


def test_refresh_failure_before_first_load() -> None:
    repo = MagicMock()
    repo.fetch_all.side_effect = RepositoryError("Failed to fetch assets")
    store = AssetStore(repo, logger=MagicMock())

    assert store.refresh() == []
    assert store.loaded is False
    assert store.error == "Failed to fetch assets"


def test_mutations_refetch_after_success() -> None:
    """create/update/delete should hit the repository then re-fetch."""
    record = SimpleNamespace(id="c1", name="Food")
    repo = MagicMock()
    repo.create.return_value = record
    repo.update.return_value = record
    repo.fetch_all.return_value = [record]
    store = SpendingCategoryStore(repo, logger=MagicMock())
    payload = SpendingCategoryInput("Food")

    assert store.create(payload) is record
    assert store.update("c1", payload) is record
    store.delete("c1")

    repo.create.assert_called_once_with(payload)
    repo.update.assert_called_once_with("c1", payload)
    repo.delete.assert_called_once_with("c1")
    assert repo.fetch_all.call_count == 3
    assert store.get("c1") is record
    assert store.get("missing") is None


def test_mutation_errors_propagate_without_refetch() -> None:
    repo = MagicMock()
    repo.delete.side_effect = RecordNotFoundError("assets", "x")
    store = AssetStore(repo, logger=MagicMock())

    with pytest.raises(RecordNotFoundError):
        store.delete("x")

    repo.fetch_all.assert_not_called()


def test_source_store_applies_category_filter() -> None:
    repo = MagicMock()
    repo.fetch_all.return_value = []
    store = AssetSourceStore(repo, logger=MagicMock(), category_id="c1")

    store.refresh()
    store.set_category(None)

    assert repo.fetch_all.call_args_list[0].kwargs == {"category_id": "c1"}
    assert repo.fetch_all.call_args_list[1].kwargs == {"category_id": None}
    assert store.category_id is None


def test_transaction_store_fetches_selected_month() -> None:
    repo = MagicMock()
    repo.fetch_all.return_value = []
    store = TransactionStore(repo, logger=MagicMock())

    store.refresh()
    store.set_month(date(2024, 2, 14))

    assert repo.fetch_all.call_args_list[0].kwargs == {}
    assert repo.fetch_all.call_args_list[1].kwargs == {
        "start_date": date(2024, 2, 1),
        "end_date": date(2024, 2, 29),
    }
    assert store.month == date(2024, 2, 14)


def _history(history_id, net_worth, day):
    return NetWorthHistory(
        id=history_id,
        total_assets=Decimal(net_worth),
        total_liabilities=Decimal("0"),
        net_worth=Decimal(net_worth),
        snapshot_date=day,
    )


def test_history_store_snapshot_refreshes_and_reports_change() -> None:
    """Taking a snapshot should re-fetch the history."""
    january = _history("h1", "100", date(2024, 1, 31))
    february = _history("h2", "150", date(2024, 2, 29))
    repo = MagicMock()
    repo.fetch_all.side_effect = [[january], [january, february]]
    use_case = MagicMock()
    use_case.execute.return_value = SnapshotResult(
        history=february,
        created=True,
        asset_snapshot_count=3,
    )
    store = NetWorthHistoryStore(repo, use_case, logger=MagicMock())

    store.refresh()
    assert store.change() is None
    result = store.take_snapshot(today=date(2024, 2, 29))

    use_case.execute.assert_called_once_with(today=date(2024, 2, 29))
    assert result.created is True
    assert store.latest is february
    change = store.change()
    assert change.change == Decimal("50")
    assert change.change_percent == Decimal("50")


def test_history_store_keeps_rows_when_fetch_fails() -> None:
    row = _history("h1", "100", date(2024, 1, 31))
    repo = MagicMock()
    repo.fetch_all.side_effect = [
        [row],
        RepositoryError("Failed to fetch history"),
    ]
    store = NetWorthHistoryStore(repo, MagicMock(), logger=MagicMock())

    store.refresh()
    store.refresh()

    assert store.history == [row]
    assert store.error == "Failed to fetch history"


def test_history_store_delete_refetches() -> None:
    repo = MagicMock()
    repo.fetch_all.return_value = []
    store = NetWorthHistoryStore(repo, MagicMock(), logger=MagicMock())

    store.delete("h1")

    repo.delete.assert_called_once_with("h1")
    repo.fetch_all.assert_called_once()
    assert store.latest is None
