"""Transaction domain service (quick add and the transaction editor)."""

import logging
from typing import Optional
from datetime import date
from decimal import Decimal
from budgetbook.database.base import Database
from budgetbook.domain.category import CategoryService
from budgetbook.domain.entities import (
    Transaction as TransactionEntity,
    TransactionDetail,
    TransactionKind,
)
from budgetbook.domain.errors import NotFoundError, ValidationError, transaction_not_found
from budgetbook.utils.amount_parser import coerce_amount
from budgetbook.utils.date_parser import month_range, parse_date

logger = logging.getLogger(__name__)


class TransactionService:
    """Service for managing transactions.

    Every write is booked against ``account_id``, the default account resolved
    once at startup.
    """

    def __init__(self, db: Database, account_id: int):
        """Initialize transaction service.

        Args:
            db: Database instance
            account_id: ID of the account all writes are booked against
        """
        self.db = db
        self.account_id = account_id
        self.categories = CategoryService(db)

    def quick_add(
        self,
        description: str,
        amount: "str | Decimal",
        kind: "str | TransactionKind" = TransactionKind.EXPENSE,
        category_name: Optional[str] = None,
        on: Optional[date] = None,
        note: str = "",
    ) -> int:
        """Record a transaction.

        The stored amount is signed by kind: expenses negative, income and
        transfers positive. An unknown category name leaves the transaction
        uncategorized.

        Args:
            description: Non-empty description
            amount: Non-zero amount, as a number or user input
            kind: One of expense, income, transfer
            category_name: Optional category name
            on: Transaction date (defaults to today)
            note: Optional note

        Returns:
            Transaction ID

        Raises:
            ValidationError: If description is empty, amount is zero or not a number,
                or kind is unknown
        """
        description = _clean_description(description)
        kind = TransactionKind.parse(kind)
        amount = _nonzero_amount(amount)

        transaction_id = self.db.create_transaction(
            account_id=self.account_id,
            date=on or date.today(),
            amount=kind.signed(amount),
            kind=kind,
            description=description,
            category_id=self.categories.resolve_category_id(category_name),
            note=note,
        )
        logger.info("Added %s '%s' (ID: %s)", kind.value, description, transaction_id)
        return transaction_id

    def get_transaction(self, transaction_id: int) -> Optional[TransactionEntity]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def list_month(self, today: Optional[date] = None) -> list[TransactionDetail]:
        """List the transactions of the month containing ``today``, newest first."""
        start_date, end_date = month_range(today)
        return self.db.list_transaction_details(start_date=start_date, end_date=end_date)

    def update_transaction(
        self,
        transaction_id: int,
        date: "date | str",
        description: str,
        amount: "str | Decimal",
        kind: "str | TransactionKind",
        category_name: Optional[str] = None,
    ) -> None:
        """Save an edited transaction.

        The account is reset to the default account and the category is
        re-resolved by name; an unknown name clears the category instead of
        failing the update.

        Args:
            transaction_id: Transaction ID to update
            date: New date (a date or a parseable string)
            description: New non-empty description
            amount: New amount, re-signed according to ``kind``
            kind: New kind
            category_name: Optional category name

        Raises:
            NotFoundError: If the transaction doesn't exist
            ValidationError: If date or description is missing, or the amount is invalid
        """
        if self.db.get_transaction(transaction_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))

        if date is None or (isinstance(date, str) and not date.strip()):
            raise ValidationError("Transaction date is required")
        txn_date = parse_date(date) if isinstance(date, str) else date
        description = _clean_description(description)
        kind = TransactionKind.parse(kind)
        amount = coerce_amount(amount)

        self.db.update_transaction(
            transaction_id=transaction_id,
            date=txn_date,
            description=description,
            amount=kind.signed(amount),
            kind=kind,
            account_id=self.account_id,
            category_id=self.categories.resolve_category_id(category_name),
        )

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction. This cannot be undone.

        Raises:
            NotFoundError: If the transaction doesn't exist
        """
        self.db.delete_transaction(transaction_id)


def _clean_description(description: Optional[str]) -> str:
    description = (description or "").strip()
    if not description:
        raise ValidationError("Description is required")
    return description


def _nonzero_amount(amount: "str | Decimal") -> Decimal:
    value = coerce_amount(amount)
    if value == 0:
        raise ValidationError("Amount must not be zero")
    return value
