"""Account domain service."""

from typing import Optional
from budgetbook.database.base import Database
from budgetbook.domain.entities import Account as AccountEntity, AccountType
from budgetbook.domain.errors import ConflictError, ValidationError, duplicate_name


DEFAULT_ACCOUNT_NAME = "Default Account"
DEFAULT_ACCOUNT_INSTITUTION = "Manual"


class AccountService:
    """Service for managing accounts."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(
        self, name: str, institution: Optional[str] = None, account_type: "str | AccountType" = AccountType.OTHER
    ) -> int:
        """Create a new account.

        Args:
            name: Account name
            institution: Optional institution name
            account_type: One of checking, savings, credit, cash, other

        Returns:
            Account ID

        Raises:
            ValidationError: If the name is empty or the type is unknown
            ConflictError: If account name already exists
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Account name is required")
        account_type = AccountType.parse(account_type)

        if self.db.get_account_by_name(name) is not None:
            raise ConflictError(duplicate_name("Account", name))

        return self.db.create_account(name=name, institution=institution, account_type=account_type)

    def ensure_account(
        self, name: str, institution: Optional[str] = None, account_type: "str | AccountType" = AccountType.OTHER
    ) -> int:
        """Return the ID of the named account, creating it if absent."""
        existing = self.db.get_account_by_name(name)
        if existing is not None:
            return existing.id
        return self.create_account(name=name, institution=institution, account_type=account_type)

    def ensure_default_account(self) -> int:
        """Return the ID of the default account every write is booked against."""
        return self.ensure_account(
            name=DEFAULT_ACCOUNT_NAME,
            institution=DEFAULT_ACCOUNT_INSTITUTION,
            account_type=AccountType.OTHER,
        )

    def get_account(self, account_id: int) -> Optional[AccountEntity]:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity or None if not found
        """
        return self.db.get_account(account_id)

    def list_accounts(self) -> list[AccountEntity]:
        """List all accounts.

        Returns:
            List of account entities
        """
        return self.db.list_accounts()
