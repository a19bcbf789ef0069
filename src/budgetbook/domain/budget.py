"""Monthly budget summary domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from budgetbook.database.base import Database
from budgetbook.domain.entities import MonthlySummary, TransactionDetail, TransactionKind
from budgetbook.domain.settings import SettingsService
from budgetbook.utils.date_parser import month_range

logger = logging.getLogger(__name__)


class BudgetService:
    """Service computing the fixed vs. variable budget of a month."""

    def __init__(self, db: Database):
        """Initialize budget service.

        Args:
            db: Database instance
        """
        self.db = db
        self.settings = SettingsService(db)

    def month_summary(self, today: Optional[date] = None) -> MonthlySummary:
        """Summarize the calendar month containing ``today``.

        Args:
            today: Any day of the month to summarize (defaults to today)

        Returns:
            MonthlySummary with income, expense and the fixed/variable split
        """
        start_date, end_date = month_range(today)
        details = self.db.list_transaction_details(start_date=start_date, end_date=end_date)
        summary = summarize(
            details,
            fixed_budget=self.settings.get_fixed_monthly_budget(),
            start=start_date,
            end=end_date,
        )
        logger.debug(
            "Summary %s..%s: %d transaction(s), income=%s expense=%s",
            start_date,
            end_date,
            len(details),
            summary.income,
            summary.expense,
        )
        return summary


def summarize(
    details: Iterable[TransactionDetail], fixed_budget: Decimal, start: date, end: date
) -> MonthlySummary:
    """Aggregate transactions into a monthly summary.

    Income sums income amounts; expense sums the absolute value of expense
    amounts, split into fixed (category flagged fixed) and variable (any other
    category, or none). Transfers count towards neither.
    """
    income = Decimal("0")
    expense = Decimal("0")
    fixed_spent = Decimal("0")

    for detail in details:
        txn = detail.transaction
        if txn.kind is TransactionKind.INCOME:
            income += txn.amount
        elif txn.kind is TransactionKind.EXPENSE:
            value = abs(txn.amount)
            expense += value
            if detail.category_is_fixed:
                fixed_spent += value

    variable_spent = expense - fixed_spent
    variable_budget = max(Decimal("0"), income - fixed_budget)

    return MonthlySummary(
        start=start,
        end=end,
        income=income,
        expense=expense,
        savings=income - expense,
        fixed_budget=fixed_budget,
        fixed_spent=fixed_spent,
        variable_spent=variable_spent,
        variable_budget=variable_budget,
        variable_remaining=variable_budget - variable_spent,
    )
