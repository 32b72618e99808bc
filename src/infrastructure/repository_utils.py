"""Shared utilities for SQLAlchemy repositories."""

from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator
from uuid import uuid4

from sqlalchemy.exc import SQLAlchemyError

from src.domain.errors import RepositoryError


def new_id() -> str:
    """Return a fresh primary key."""
    return str(uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def blank_to_none(value: str | None) -> str | None:
    """Store empty optional text as NULL."""
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None


@contextmanager
def translate_errors(action: str) -> Iterator[None]:
    """Convert SQLAlchemy failures into ``RepositoryError``.

    Args:
        action: Short description completing "Failed to ...".

    Raises:
        RepositoryError: When the wrapped block raises ``SQLAlchemyError``.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        raise RepositoryError(f"Failed to {action}") from exc


__all__ = ["new_id", "utc_now", "blank_to_none", "translate_errors"]
