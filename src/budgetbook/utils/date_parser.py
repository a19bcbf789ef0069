"""Date parsing and calendar utilities."""

from datetime import date, timedelta
from typing import Optional
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from budgetbook.domain.errors import ValidationError


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "tomorrow"

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValidationError: If date string cannot be parsed
    """
    if date_str is None or not date_str.strip():
        raise ValidationError("Empty date string")

    date_str = date_str.strip().lower()
    today = date.today()

    # Handle relative dates
    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    # Try parsing as absolute date
    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValidationError(f"Could not parse date '{date_str}': {e}")


def parse_day(day: "str | int | None") -> int:
    """Parse and validate a day of month (1-31).

    Raises:
        ValidationError: If the day is missing, not a number or out of range
    """
    if day is None or (isinstance(day, str) and not day.strip()):
        raise ValidationError("Day of month is required")
    try:
        value = int(day)
    except (TypeError, ValueError):
        raise ValidationError(f"Day of month must be a number, got '{day}'")
    if not 1 <= value <= 31:
        raise ValidationError(f"Day of month must be between 1 and 31, got {value}")
    return value


def month_range(today: Optional[date] = None) -> tuple[date, date]:
    """Get the first and last day of the month containing ``today``.

    Both ends are inclusive.
    """
    if today is None:
        today = date.today()
    start_date = today.replace(day=1)
    # relativedelta clamps day=31 to the month's actual last day
    end_date = start_date + relativedelta(day=31)
    return (start_date, end_date)


def day_in_month(year: int, month: int, day: int) -> date:
    """Build the date for ``day`` in the given month, clamped to its last day.

    Day 31 in April gives April 30, day 30 in February gives the 28th or 29th.
    """
    return date(year, month, 1) + relativedelta(day=day)
