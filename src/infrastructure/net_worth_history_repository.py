"""SQLAlchemy-backed repository for net worth history and asset snapshots."""

from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from typing import Any

from sqlalchemy import delete, insert, select, update

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.net_worth_history_repository import (
    NetWorthHistoryRepositoryPort,
)
from src.domain.errors import RecordNotFoundError
from src.domain.models import AssetSnapshot, NetWorthHistory, NetWorthTotals
from src.infrastructure.repository_utils import (
    new_id,
    translate_errors,
    utc_now,
)
from src.infrastructure.schema import asset_snapshots, net_worth_history
from src.utils.date_utils import coerce_date, coerce_datetime
from src.utils.decimal_utils import coerce_decimal


def history_from_row(row: Mapping[str, Any]) -> NetWorthHistory:
    return NetWorthHistory(
        id=row["id"],
        total_assets=coerce_decimal(row["total_assets"]),
        total_liabilities=coerce_decimal(row["total_liabilities"]),
        net_worth=coerce_decimal(row["net_worth"]),
        snapshot_date=coerce_date(row["snapshot_date"]),
        created_at=coerce_datetime(row["created_at"]),
    )


class SqlAlchemyNetWorthHistoryRepository(NetWorthHistoryRepositoryPort):
    """Repository backed by SQLAlchemy for net worth snapshots."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def fetch_all(self) -> list[NetWorthHistory]:
        query = select(net_worth_history).order_by(
            net_worth_history.c.snapshot_date,
            net_worth_history.c.created_at,
        )
        engine = self._db_port.get_engine()
        with translate_errors("fetch history"):
            with engine.connect() as conn:
                rows = conn.execute(query).all()
        return [history_from_row(row._mapping) for row in rows]

    def find_in_range(
        self,
        start_date: date,
        end_date: date,
    ) -> NetWorthHistory | None:
        query = (
            select(net_worth_history)
            .where(net_worth_history.c.snapshot_date >= start_date)
            .where(net_worth_history.c.snapshot_date <= end_date)
            .order_by(
                net_worth_history.c.snapshot_date,
                net_worth_history.c.created_at,
            )
            .limit(1)
        )
        engine = self._db_port.get_engine()
        with translate_errors("fetch history"):
            with engine.connect() as conn:
                row = conn.execute(query).first()
        return history_from_row(row._mapping) if row is not None else None

    def update_totals(
        self,
        history_id: str,
        totals: NetWorthTotals,
        snapshot_date: date,
    ) -> NetWorthHistory:
        engine = self._db_port.get_engine()
        with translate_errors("update snapshot"):
            with engine.begin() as conn:
                result = conn.execute(
                    update(net_worth_history)
                    .where(net_worth_history.c.id == history_id)
                    .values(
                        total_assets=totals.total_assets,
                        total_liabilities=totals.total_liabilities,
                        net_worth=totals.net_worth,
                        snapshot_date=snapshot_date,
                    )
                )
                if result.rowcount == 0:
                    raise RecordNotFoundError(
                        net_worth_history.name,
                        history_id,
                    )
                row = conn.execute(
                    select(net_worth_history).where(
                        net_worth_history.c.id == history_id
                    )
                ).one()
        return history_from_row(row._mapping)

    def create_with_snapshots(
        self,
        totals: NetWorthTotals,
        snapshot_date: date,
        asset_values: list[tuple[str, Decimal]],
    ) -> tuple[NetWorthHistory, int]:
        """Insert the history row and its asset snapshots atomically.

        Both inserts share one database transaction, so a failed snapshot
        batch leaves no orphan history row behind.
        """
        history_id = new_id()
        now = utc_now()
        snapshot_rows = [
            {
                "id": new_id(),
                "history_id": history_id,
                "asset_id": asset_id,
                "value": value,
                "created_at": now,
            }
            for asset_id, value in asset_values
        ]
        engine = self._db_port.get_engine()
        with translate_errors("save snapshot"):
            with engine.begin() as conn:
                conn.execute(
                    insert(net_worth_history).values(
                        id=history_id,
                        total_assets=totals.total_assets,
                        total_liabilities=totals.total_liabilities,
                        net_worth=totals.net_worth,
                        snapshot_date=snapshot_date,
                        created_at=now,
                    )
                )
                if snapshot_rows:
                    conn.execute(insert(asset_snapshots), snapshot_rows)
                row = conn.execute(
                    select(net_worth_history).where(
                        net_worth_history.c.id == history_id
                    )
                ).one()
        return history_from_row(row._mapping), len(snapshot_rows)

    def fetch_asset_snapshots(self, history_id: str) -> list[AssetSnapshot]:
        query = (
            select(asset_snapshots)
            .where(asset_snapshots.c.history_id == history_id)
            .order_by(asset_snapshots.c.asset_id)
        )
        engine = self._db_port.get_engine()
        with translate_errors("fetch asset snapshots"):
            with engine.connect() as conn:
                rows = conn.execute(query).all()
        return [
            AssetSnapshot(
                id=row.id,
                history_id=row.history_id,
                asset_id=row.asset_id,
                value=coerce_decimal(row.value),
                created_at=coerce_datetime(row.created_at),
            )
            for row in rows
        ]

    def delete(self, history_id: str) -> None:
        engine = self._db_port.get_engine()
        with translate_errors("delete snapshot"):
            with engine.begin() as conn:
                result = conn.execute(
                    delete(net_worth_history).where(
                        net_worth_history.c.id == history_id
                    )
                )
                if result.rowcount == 0:
                    raise RecordNotFoundError(
                        net_worth_history.name,
                        history_id,
                    )


__all__ = ["SqlAlchemyNetWorthHistoryRepository", "history_from_row"]
