"""Base SQLAlchemy repository for one finance table."""

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, Table, delete, insert, select, update
from sqlalchemy.sql.elements import ColumnElement

from src.application.ports.database import DatabaseEnginePort
from src.domain.errors import RecordNotFoundError
from src.infrastructure.repository_utils import (
    new_id,
    translate_errors,
    utc_now,
)


RecordT = TypeVar("RecordT")
InputT = TypeVar("InputT")


class SqlAlchemyRecordRepository(Generic[RecordT, InputT]):
    """CRUD operations shared by the record repositories.

    Subclasses provide the table, the joined select, the row converter and
    the mapping from input payloads to column values.
    """

    table: Table
    plural_label = "records"
    singular_label = "record"
    has_updated_at = True

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def fetch_all(self) -> list[RecordT]:
        return self._fetch_where([])

    def create(self, data: InputT) -> RecordT:
        """Insert a record and return it with its joined relations."""
        record_id = new_id()
        now = utc_now()
        values = {"id": record_id, **self._values(data), "created_at": now}
        if self.has_updated_at:
            values["updated_at"] = now
        engine = self._db_port.get_engine()
        with translate_errors(f"create {self.singular_label}"):
            with engine.begin() as conn:
                conn.execute(insert(self.table).values(**values))
                row = conn.execute(
                    self._select().where(self.table.c.id == record_id)
                ).one()
        return self._to_record(row._mapping)

    def update(self, record_id: str, data: InputT) -> RecordT:
        """Replace the editable columns of a record."""
        values = self._values(data)
        if self.has_updated_at:
            values["updated_at"] = utc_now()
        engine = self._db_port.get_engine()
        with translate_errors(f"update {self.singular_label}"):
            with engine.begin() as conn:
                result = conn.execute(
                    update(self.table)
                    .where(self.table.c.id == record_id)
                    .values(**values)
                )
                if result.rowcount == 0:
                    raise RecordNotFoundError(self.table.name, record_id)
                row = conn.execute(
                    self._select().where(self.table.c.id == record_id)
                ).one()
        return self._to_record(row._mapping)

    def delete(self, record_id: str) -> None:
        """Delete a record; dependent rows follow the schema cascades."""
        engine = self._db_port.get_engine()
        with translate_errors(f"delete {self.singular_label}"):
            with engine.begin() as conn:
                result = conn.execute(
                    delete(self.table).where(self.table.c.id == record_id)
                )
                if result.rowcount == 0:
                    raise RecordNotFoundError(self.table.name, record_id)

    def _fetch_where(
        self,
        conditions: list[ColumnElement[bool]],
    ) -> list[RecordT]:
        query = self._select()
        for condition in conditions:
            query = query.where(condition)
        query = query.order_by(*self._order_by())
        engine = self._db_port.get_engine()
        with translate_errors(f"fetch {self.plural_label}"):
            with engine.connect() as conn:
                rows = conn.execute(query).all()
        return [self._to_record(row._mapping) for row in rows]

    def _select(self) -> Select:
        return select(self.table)

    def _order_by(self) -> list[Any]:
        return [self.table.c.id]

    def _values(self, data: InputT) -> dict[str, Any]:
        raise NotImplementedError

    def _to_record(self, row: Mapping[str, Any]) -> RecordT:
        raise NotImplementedError


def prefixed_columns(table: Table, prefix: str) -> list[Any]:
    """Label every column of a joined table as ``<prefix>__<column>``."""
    return [
        column.label(f"{prefix}__{column.name}") for column in table.columns
    ]


def unprefix(row: Mapping[str, Any], prefix: str) -> dict[str, Any] | None:
    """Extract the columns of a joined table, None when the join missed."""
    marker = f"{prefix}__"
    values = {
        key[len(marker):]: value
        for key, value in row.items()
        if key.startswith(marker)
    }
    if values.get("id") is None:
        return None
    return values


__all__ = ["SqlAlchemyRecordRepository", "prefixed_columns", "unprefix"]
