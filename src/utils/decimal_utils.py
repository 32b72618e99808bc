"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value, zero when missing.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def coerce_optional_decimal(value) -> Decimal | None:
    """Normalize a nullable numeric column, keeping None as None."""
    if value is None:
        return None
    return coerce_decimal(value)


def parse_decimal(raw: str | None) -> Decimal | None:
    """Parse user input into a finite Decimal.

    Args:
        raw: Text typed into a form field. Thousands separators are allowed.

    Returns:
        Decimal | None: Parsed value, or None when the input is blank or
        not a finite number.
    """
    if raw is None:
        return None
    cleaned = str(raw).strip().replace(",", "")
    if not cleaned:
        return None
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


__all__ = ["coerce_decimal", "coerce_optional_decimal", "parse_decimal"]
