"""Calendar period helpers used by spending and snapshot computations."""

import calendar
from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar date range."""

    start: date
    end: date

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


def start_of_month(day: date) -> date:
    return day.replace(day=1)


def end_of_month(day: date) -> date:
    last_day = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=last_day)


def month_range(day: date) -> DateRange:
    """Return the first-to-last day range of the month containing ``day``."""
    return DateRange(start=start_of_month(day), end=end_of_month(day))


def shift_month(day: date, months: int) -> date:
    """Return the first day of the month ``months`` away from ``day``.

    Args:
        day: Any date inside the reference month.
        months: Number of months to move, negative to go back.

    Returns:
        date: First day of the target month.
    """
    index = day.year * 12 + (day.month - 1) + months
    year, month_index = divmod(index, 12)
    return date(year, month_index + 1, 1)


def trailing_months_range(months: int, today: date) -> DateRange:
    """Return the range covering the last ``months`` calendar months.

    The range starts on the first day of the month ``months - 1`` months
    before ``today`` and ends on the last day of the current month.

    Args:
        months: Number of months to cover, at least 1.
        today: Reference date.

    Returns:
        DateRange: Inclusive range.

    Raises:
        ValueError: If ``months`` is lower than 1.
    """
    if months < 1:
        raise ValueError(f"months must be at least 1, got {months}")
    return DateRange(
        start=shift_month(today, -(months - 1)),
        end=end_of_month(today),
    )


__all__ = [
    "DateRange",
    "start_of_month",
    "end_of_month",
    "month_range",
    "shift_month",
    "trailing_months_range",
]
