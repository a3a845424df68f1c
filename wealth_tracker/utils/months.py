"""Calendar helpers for month keys ("YYYY-MM") and month boundaries."""

import calendar
from datetime import date


def format_month(day: date) -> str:
    """Return the month key for a date."""
    return f"{day.year:04d}-{day.month:02d}"


def parse_month(month: str) -> date:
    """Parse a "YYYY-MM" key into the first day of that month.

    Raises:
        ValueError: If the key is not a valid month.
    """
    try:
        year_text, month_text = month.split("-")
        return date(int(year_text), int(month_text), 1)
    except ValueError as exc:
        raise ValueError(f"Invalid month key: {month!r}") from exc


def month_bounds(day: date) -> tuple[date, date]:
    """Return the first and last day of the calendar month containing day."""
    last_day = calendar.monthrange(day.year, day.month)[1]
    return date(day.year, day.month, 1), date(day.year, day.month, last_day)


def add_months(month: str, count: int) -> str:
    """Shift a month key by count months (negative values go back)."""
    start = parse_month(month)
    index = start.year * 12 + (start.month - 1) + count
    return f"{index // 12:04d}-{index % 12 + 1:02d}"


__all__ = ["format_month", "parse_month", "month_bounds", "add_months"]
