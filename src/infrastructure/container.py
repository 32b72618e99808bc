"""Composition root for wiring infrastructure adapters."""

from collections.abc import MutableMapping
from typing import Any

from src.application.ports.asset_repository import (
    AssetCategoryRepositoryPort,
    AssetRepositoryPort,
    AssetSourceRepositoryPort,
)
from src.application.ports.auth import AuthPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.net_worth_history_repository import (
    NetWorthHistoryRepositoryPort,
)
from src.application.ports.spending_repository import (
    SpendingCategoryRepositoryPort,
    TransactionRepositoryPort,
)
from src.application.stores import (
    AssetCategoryStore,
    AssetSourceStore,
    AssetStore,
    NetWorthHistoryStore,
    SpendingCategoryStore,
    TransactionStore,
)
from src.application.use_cases import (
    GetBudgetStatusUseCase,
    GetNetWorthBreakdownUseCase,
    GetSpendingSummaryUseCase,
    SignOutUseCase,
    TakeNetWorthSnapshotUseCase,
)
from src.infrastructure.asset_repository import (
    SqlAlchemyAssetCategoryRepository,
    SqlAlchemyAssetRepository,
    SqlAlchemyAssetSourceRepository,
)
from src.infrastructure.auth import SessionStateAuthAdapter
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.net_worth_history_repository import (
    SqlAlchemyNetWorthHistoryRepository,
)
from src.infrastructure.settings import FinanceSettings
from src.infrastructure.spending_repository import (
    SqlAlchemySpendingCategoryRepository,
    SqlAlchemyTransactionRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_asset_category_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AssetCategoryRepositoryPort:
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAssetCategoryRepository(resolved_db)


def build_asset_source_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AssetSourceRepositoryPort:
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAssetSourceRepository(resolved_db)


def build_asset_repository(
    db_port: DatabaseEnginePort | None = None,
) -> AssetRepositoryPort:
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyAssetRepository(resolved_db)


def build_spending_category_repository(
    db_port: DatabaseEnginePort | None = None,
) -> SpendingCategoryRepositoryPort:
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemySpendingCategoryRepository(resolved_db)


def build_transaction_repository(
    db_port: DatabaseEnginePort | None = None,
) -> TransactionRepositoryPort:
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTransactionRepository(resolved_db)


def build_net_worth_history_repository(
    db_port: DatabaseEnginePort | None = None,
) -> NetWorthHistoryRepositoryPort:
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyNetWorthHistoryRepository(resolved_db)


def build_settings() -> FinanceSettings:
    """Return settings read from the environment."""
    return FinanceSettings.from_env()


def build_auth(session_state: MutableMapping[str, Any]) -> AuthPort:
    """Return the auth adapter bound to a session state."""
    return SessionStateAuthAdapter(session_state)


def build_sign_out_use_case(
    session_state: MutableMapping[str, Any],
    settings: FinanceSettings | None = None,
) -> SignOutUseCase:
    resolved_settings = settings or build_settings()
    return SignOutUseCase(
        build_auth(session_state),
        login_url=resolved_settings.login_url,
        logger=get_app_logger(),
    )


def build_net_worth_breakdown_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetNetWorthBreakdownUseCase:
    return GetNetWorthBreakdownUseCase(
        build_asset_repository(db_port),
        logger=get_app_logger(),
    )


def build_budget_status_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetBudgetStatusUseCase:
    resolved_db = db_port or build_database_adapter()
    return GetBudgetStatusUseCase(
        build_spending_category_repository(resolved_db),
        build_transaction_repository(resolved_db),
        logger=get_app_logger(),
    )


def build_spending_summary_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetSpendingSummaryUseCase:
    return GetSpendingSummaryUseCase(
        build_transaction_repository(db_port),
        logger=get_app_logger(),
    )


def build_snapshot_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> TakeNetWorthSnapshotUseCase:
    resolved_db = db_port or build_database_adapter()
    return TakeNetWorthSnapshotUseCase(
        build_net_worth_history_repository(resolved_db),
        build_asset_repository(resolved_db),
        logger=get_app_logger(),
    )


def build_asset_category_store(
    db_port: DatabaseEnginePort | None = None,
) -> AssetCategoryStore:
    return AssetCategoryStore(
        build_asset_category_repository(db_port),
        logger=get_app_logger(),
    )


def build_asset_source_store(
    db_port: DatabaseEnginePort | None = None,
    category_id: str | None = None,
) -> AssetSourceStore:
    return AssetSourceStore(
        build_asset_source_repository(db_port),
        logger=get_app_logger(),
        category_id=category_id,
    )


def build_asset_store(
    db_port: DatabaseEnginePort | None = None,
) -> AssetStore:
    return AssetStore(build_asset_repository(db_port), logger=get_app_logger())


def build_spending_category_store(
    db_port: DatabaseEnginePort | None = None,
) -> SpendingCategoryStore:
    return SpendingCategoryStore(
        build_spending_category_repository(db_port),
        logger=get_app_logger(),
    )


def build_transaction_store(
    db_port: DatabaseEnginePort | None = None,
    month=None,
) -> TransactionStore:
    return TransactionStore(
        build_transaction_repository(db_port),
        logger=get_app_logger(),
        month=month,
    )


def build_net_worth_history_store(
    db_port: DatabaseEnginePort | None = None,
) -> NetWorthHistoryStore:
    """Return the history store wired with the snapshot use case."""
    resolved_db = db_port or build_database_adapter()
    return NetWorthHistoryStore(
        build_net_worth_history_repository(resolved_db),
        build_snapshot_use_case(resolved_db),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_asset_category_repository",
    "build_asset_source_repository",
    "build_asset_repository",
    "build_spending_category_repository",
    "build_transaction_repository",
    "build_net_worth_history_repository",
    "build_settings",
    "build_auth",
    "build_sign_out_use_case",
    "build_net_worth_breakdown_use_case",
    "build_budget_status_use_case",
    "build_spending_summary_use_case",
    "build_snapshot_use_case",
    "build_asset_category_store",
    "build_asset_source_store",
    "build_asset_store",
    "build_spending_category_store",
    "build_transaction_store",
    "build_net_worth_history_store",
]
