"""Errors raised across the finance tracker layers."""


class FinanceError(RuntimeError):
    """Base error for finance tracker failures."""


class RepositoryError(FinanceError):
    """Raised when the backing store rejects or fails a request."""


class RecordNotFoundError(RepositoryError):
    """Raised when an update or delete targets a missing record."""

    def __init__(self, table: str, record_id: str) -> None:
        super().__init__(f"No row in {table} with id {record_id}")
        self.table = table
        self.record_id = record_id


class ValidationError(ValueError):
    """Raised when form input is incomplete or inconsistent.

    The message is meant to be shown to the user as-is.
    """


__all__ = [
    "FinanceError",
    "RepositoryError",
    "RecordNotFoundError",
    "ValidationError",
]
