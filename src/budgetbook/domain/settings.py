"""Settings domain service."""

from decimal import Decimal, InvalidOperation
from typing import Optional
from budgetbook.database.base import Database
from budgetbook.utils.amount_parser import coerce_amount

FIXED_MONTHLY_BUDGET_KEY = "fixed_monthly_budget"


class SettingsService:
    """Service for reading and writing key/value settings."""

    def __init__(self, db: Database):
        """Initialize settings service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_setting(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get a setting value, or ``default`` if it was never saved."""
        value = self.db.get_setting(key)
        return default if value is None else value

    def set_setting(self, key: str, value) -> None:
        """Insert or update a setting. Values are stored as strings."""
        self.db.set_setting(key, str(value))

    def get_fixed_monthly_budget(self) -> Decimal:
        """Get the fixed monthly budget target (Y).

        Absent, empty or non-numeric values read as zero.
        """
        raw = self.get_setting(FIXED_MONTHLY_BUDGET_KEY, "0")
        try:
            value = Decimal(raw.strip())
        except (InvalidOperation, AttributeError):
            return Decimal("0")
        if not value.is_finite():
            return Decimal("0")
        return value

    def set_fixed_monthly_budget(self, value: "str | Decimal | int") -> Decimal:
        """Save the fixed monthly budget target (Y).

        Args:
            value: Amount, as a number or a string with dot or comma decimals

        Returns:
            The stored amount

        Raises:
            ValidationError: If the value is not a number
        """
        amount = coerce_amount(value)
        self.set_setting(FIXED_MONTHLY_BUDGET_KEY, amount)
        return amount
