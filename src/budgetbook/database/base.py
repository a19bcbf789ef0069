"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from budgetbook.domain.entities import (
    Account,
    AccountType,
    Category,
    FixedItem,
    Transaction,
    TransactionDetail,
    TransactionDraft,
    TransactionKind,
)


class Database(ABC):
    """Abstract record store interface for budgetbook."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Account operations
    @abstractmethod
    def create_account(
        self, name: str, institution: Optional[str] = None, account_type: AccountType = AccountType.OTHER
    ) -> int:
        """Create a new account. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def get_account_by_name(self, name: str) -> Optional[Account]:
        """Get account by its unique name."""
        pass

    @abstractmethod
    def list_accounts(self) -> list[Account]:
        """List all accounts."""
        pass

    # Category operations
    @abstractmethod
    def create_category(
        self, name: str, kind: TransactionKind = TransactionKind.EXPENSE, is_fixed: bool = False
    ) -> int:
        """Create a category. Returns category ID."""
        pass

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        pass

    @abstractmethod
    def get_category_by_name(self, name: str) -> Optional[Category]:
        """Get category by its unique name."""
        pass

    @abstractmethod
    def list_categories(self, kind: Optional[TransactionKind] = None) -> list[Category]:
        """List categories ordered by name, optionally filtered by kind."""
        pass

    @abstractmethod
    def update_category(self, category_id: int, kind: TransactionKind, is_fixed: bool) -> None:
        """Update the kind and fixed flag of a category."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        account_id: int,
        date: date,
        amount: Decimal,
        kind: TransactionKind,
        description: Optional[str] = None,
        category_id: Optional[int] = None,
        note: Optional[str] = None,
    ) -> int:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def create_transactions(self, drafts: Sequence[TransactionDraft]) -> list[int]:
        """Create several transactions in one unit of work.

        Either every draft is stored or none is. Returns the new IDs in the
        order of ``drafts``.
        """
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def update_transaction(
        self,
        transaction_id: int,
        date: date,
        description: Optional[str],
        amount: Decimal,
        kind: TransactionKind,
        account_id: int,
        category_id: Optional[int],
    ) -> None:
        """Replace the editable fields of a transaction."""
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction."""
        pass

    @abstractmethod
    def list_transaction_details(
        self, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> list[TransactionDetail]:
        """List transactions joined with their account and category, newest first."""
        pass

    # Fixed item operations
    @abstractmethod
    def create_fixed_item(
        self, name: str, amount: Decimal, day: int, category_id: Optional[int] = None
    ) -> int:
        """Create a fixed item template. Returns template ID."""
        pass

    @abstractmethod
    def get_fixed_item(self, item_id: int) -> Optional[FixedItem]:
        """Get fixed item template by ID."""
        pass

    @abstractmethod
    def list_fixed_items(self) -> list[FixedItem]:
        """List fixed item templates ordered by day of month."""
        pass

    @abstractmethod
    def delete_fixed_item(self, item_id: int) -> None:
        """Delete a fixed item template."""
        pass

    # Setting operations
    @abstractmethod
    def get_setting(self, key: str) -> Optional[str]:
        """Get a setting value, or None if the key is absent."""
        pass

    @abstractmethod
    def set_setting(self, key: str, value: str) -> None:
        """Insert or update a setting."""
        pass
