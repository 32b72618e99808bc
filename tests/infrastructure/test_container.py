"""Tests for the composition root."""

from unittest.mock import MagicMock

from src.application.stores import (
    AssetSourceStore,
    NetWorthHistoryStore,
    TransactionStore,
)
from src.application.use_cases import (
    GetBudgetStatusUseCase,
    SignOutUseCase,
    TakeNetWorthSnapshotUseCase,
)
from src.infrastructure import container
from src.infrastructure.asset_repository import SqlAlchemyAssetRepository
from src.infrastructure.auth import SessionStateAuthAdapter
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.settings import FinanceSettings
from src.infrastructure.spending_repository import (
    SqlAlchemyTransactionRepository,
)


def test_repositories_share_the_given_db_port() -> None:
    db_port = MagicMock()

    asset_repo = container.build_asset_repository(db_port)
    transaction_repo = container.build_transaction_repository(db_port)

    assert isinstance(asset_repo, SqlAlchemyAssetRepository)
    assert isinstance(transaction_repo, SqlAlchemyTransactionRepository)
    assert asset_repo._db_port is db_port
    assert transaction_repo._db_port is db_port


def test_build_database_adapter_defaults_to_sqlalchemy() -> None:
    adapter = container.build_database_adapter()

    assert isinstance(adapter, SqlAlchemyDatabaseEngineAdapter)


def test_use_cases_and_stores_are_wired(monkeypatch) -> None:
    """Builders should create fresh objects around one db port."""
    db_port = MagicMock()
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())

    budget = container.build_budget_status_use_case(db_port)
    snapshot = container.build_snapshot_use_case(db_port)
    sources = container.build_asset_source_store(db_port, category_id="c1")
    transactions = container.build_transaction_store(db_port)
    history = container.build_net_worth_history_store(db_port)

    assert isinstance(budget, GetBudgetStatusUseCase)
    assert isinstance(snapshot, TakeNetWorthSnapshotUseCase)
    assert isinstance(sources, AssetSourceStore)
    assert sources.category_id == "c1"
    assert isinstance(transactions, TransactionStore)
    assert transactions.month is None
    assert isinstance(history, NetWorthHistoryStore)


def test_build_sign_out_use_case_uses_login_url(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    session_state = {"user": "me"}

    use_case = container.build_sign_out_use_case(
        session_state,
        settings=FinanceSettings(login_url="/login"),
    )

    assert isinstance(use_case, SignOutUseCase)
    assert isinstance(container.build_auth({}), SessionStateAuthAdapter)
    assert use_case.execute() == "/login"
    assert session_state == {}
