"""Fixed item domain service.

Fixed items are templates for recurring monthly expenses (rent, internet,
...). ``generate_month`` turns every template into a real expense transaction
for the current month.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from budgetbook.database.base import Database
from budgetbook.domain.category import CategoryService
from budgetbook.domain.entities import FixedItem, TransactionDraft, TransactionKind
from budgetbook.domain.errors import NotFoundError, ValidationError, fixed_item_not_found
from budgetbook.utils.amount_parser import coerce_amount
from budgetbook.utils.date_parser import day_in_month, parse_day

logger = logging.getLogger(__name__)

FIXED_NOTE = "fixed"


class FixedItemService:
    """Service for fixed item templates and their monthly expansion."""

    def __init__(self, db: Database, account_id: int):
        """Initialize fixed item service.

        Args:
            db: Database instance
            account_id: ID of the account generated transactions are booked against
        """
        self.db = db
        self.account_id = account_id
        self.categories = CategoryService(db)

    def create_fixed_item(
        self,
        name: str,
        amount: "str | Decimal",
        day: "str | int | None",
        category_name: Optional[str] = None,
    ) -> int:
        """Create a fixed item template.

        Args:
            name: Non-empty name, used as the generated transactions' description
            amount: Positive amount
            day: Day of month, 1 to 31
            category_name: Optional expense category name (unknown names are ignored)

        Returns:
            Fixed item ID

        Raises:
            ValidationError: If name is empty, amount is not positive, day is invalid
                or the category is not an expense category
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Fixed item name is required")
        value = coerce_amount(amount)
        if value <= 0:
            raise ValidationError("Fixed item amount must be greater than zero")
        day = parse_day(day)

        category = self.categories.get_category_by_name(category_name)
        if category is not None and category.kind is not TransactionKind.EXPENSE:
            raise ValidationError(f"Category '{category.name}' is not an expense category")

        return self.db.create_fixed_item(
            name=name,
            amount=value,
            day=day,
            category_id=self.categories.resolve_category_id(category_name),
        )

    def get_fixed_item(self, item_id: int) -> Optional[FixedItem]:
        """Get fixed item template by ID."""
        return self.db.get_fixed_item(item_id)

    def list_fixed_items(self) -> list[FixedItem]:
        """List fixed item templates ordered by day of month."""
        return self.db.list_fixed_items()

    def delete_fixed_item(self, item_id: int) -> None:
        """Delete a fixed item template.

        Transactions already generated from it are kept.

        Raises:
            NotFoundError: If the template doesn't exist
        """
        if self.db.get_fixed_item(item_id) is None:
            raise NotFoundError(fixed_item_not_found(item_id))
        self.db.delete_fixed_item(item_id)

    def build_month(self, today: Optional[date] = None) -> list[TransactionDraft]:
        """Build one expense draft per template for the month of ``today``.

        Days past the end of the month are clamped to its last day.
        """
        if today is None:
            today = date.today()
        return [
            TransactionDraft(
                date=day_in_month(today.year, today.month, item.day),
                description=item.name,
                amount=-abs(item.amount),
                kind=TransactionKind.EXPENSE,
                account_id=self.account_id,
                category_id=item.category_id,
                note=FIXED_NOTE,
            )
            for item in self.db.list_fixed_items()
        ]

    def generate_month(self, today: Optional[date] = None) -> list[int]:
        """Insert this month's transactions for every fixed item template.

        The whole batch is stored in one unit of work. Generation does not
        check for earlier runs: calling it twice in a month books every
        template twice.

        Args:
            today: Any day of the target month (defaults to today)

        Returns:
            IDs of the created transactions, in template order
        """
        drafts = self.build_month(today)
        if not drafts:
            logger.info("No fixed items to generate")
            return []
        ids = self.db.create_transactions(drafts)
        logger.info("Generated %d fixed transaction(s) for %s", len(ids), drafts[0].date.strftime("%Y-%m"))
        return ids
