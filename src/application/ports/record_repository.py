"""Generic port for table-oriented record repositories."""

from typing import Protocol, TypeVar

RecordT = TypeVar("RecordT", covariant=True)
InputT = TypeVar("InputT", contravariant=True)


class RecordRepositoryPort(Protocol[RecordT, InputT]):
    """Port exposing CRUD access to one table.

    Implementations raise ``RepositoryError`` when the backing store fails
    and ``RecordNotFoundError`` when an id does not exist.
    """

    def fetch_all(self) -> list[RecordT]:
        """Return every record in the repository's default order."""

    def create(self, data: InputT) -> RecordT:
        """Insert a record and return it as stored."""

    def update(self, record_id: str, data: InputT) -> RecordT:
        """Replace the editable fields of a record and return it."""

    def delete(self, record_id: str) -> None:
        """Delete a record; dependent rows follow the schema cascades."""


__all__ = ["RecordRepositoryPort"]
