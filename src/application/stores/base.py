"""Base store owning a fetched collection of records.

A store keeps the last successfully fetched list of one record kind. Reads
never raise: a failed fetch records the error message and leaves the
previous items in place. Mutations raise on failure and re-fetch the list on
success, so the items always reflect the latest server state.
"""

from typing import Generic, TypeVar

from src.application.ports.record_repository import RecordRepositoryPort
from src.domain.errors import FinanceError
from src.infrastructure.logging.logger import get_app_logger


RecordT = TypeVar("RecordT")
InputT = TypeVar("InputT")


class RecordStore(Generic[RecordT, InputT]):
    """Collection of records backed by a repository port."""

    record_label = "records"

    def __init__(
        self,
        repository: RecordRepositoryPort[RecordT, InputT],
        logger=None,
    ) -> None:
        """Initialize the store.

        Args:
            repository: Port providing CRUD access to the records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._items: list[RecordT] = []
        self._error: str | None = None
        self._loaded = False

    @property
    def items(self) -> list[RecordT]:
        return list(self._items)

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def loaded(self) -> bool:
        return self._loaded

    def refresh(self) -> list[RecordT]:
        """Re-fetch the records.

        Returns:
            list[RecordT]: Fresh items, or the previous items when the fetch
            failed.
        """
        try:
            items = self._fetch()
        except FinanceError as exc:
            self._error = str(exc) or f"Failed to fetch {self.record_label}"
            self._logger.warning(
                f"Failed to fetch {self.record_label}: {self._error}"
            )
            return self.items
        self._items = list(items)
        self._error = None
        self._loaded = True
        return self.items

    def create(self, data: InputT) -> RecordT:
        """Create a record and refresh the collection."""
        record = self._repository.create(data)
        self._logger.info(f"Created {self.record_label} row {record.id}")
        self.refresh()
        return record

    def update(self, record_id: str, data: InputT) -> RecordT:
        """Update a record and refresh the collection."""
        record = self._repository.update(record_id, data)
        self._logger.info(f"Updated {self.record_label} row {record_id}")
        self.refresh()
        return record

    def delete(self, record_id: str) -> None:
        """Delete a record and refresh the collection."""
        self._repository.delete(record_id)
        self._logger.info(f"Deleted {self.record_label} row {record_id}")
        self.refresh()

    def get(self, record_id: str) -> RecordT | None:
        """Return a loaded record by id."""
        for item in self._items:
            if getattr(item, "id", None) == record_id:
                return item
        return None

    def _fetch(self) -> list[RecordT]:
        return self._repository.fetch_all()


__all__ = ["RecordStore"]
