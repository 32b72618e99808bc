"""Helpers for calendar date normalization."""

from datetime import date, datetime


def coerce_date(value) -> date:
    """Normalize a date column value.

    Args:
        value: ``date``, ``datetime`` or ISO ``YYYY-MM-DD`` string.

    Returns:
        date: Calendar date without time.

    Raises:
        ValueError: If the value cannot be interpreted as a date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    raise ValueError(f"Unsupported date value: {value!r}")


def coerce_datetime(value) -> datetime | None:
    """Normalize a timestamp column value, keeping None as None."""
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    raise ValueError(f"Unsupported timestamp value: {value!r}")


__all__ = ["coerce_date", "coerce_datetime"]
