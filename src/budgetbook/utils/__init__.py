"""Utility functions for budgetbook."""

from budgetbook.utils.date_parser import parse_date, parse_day, month_range, day_in_month
from budgetbook.utils.amount_parser import parse_amount, coerce_amount

__all__ = ["parse_date", "parse_day", "month_range", "day_in_month", "parse_amount", "coerce_amount"]
