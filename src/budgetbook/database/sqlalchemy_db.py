"""Generic SQLAlchemy database implementation."""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Sequence
from datetime import date
from decimal import Decimal
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from budgetbook.database.base import Database
from budgetbook.database.models import (
    Account,
    Category,
    FixedItem,
    Setting,
    Transaction,
    create_session_factory,
)
from budgetbook.database.mappers import (
    account_to_domain,
    category_to_domain,
    fixed_item_to_domain,
    transaction_to_detail,
    transaction_to_domain,
)
from budgetbook.domain.entities import (
    Account as DomainAccount,
    AccountType,
    Category as DomainCategory,
    FixedItem as DomainFixedItem,
    Transaction as DomainTransaction,
    TransactionDetail,
    TransactionDraft,
    TransactionKind,
)
from budgetbook.domain.errors import (
    NotFoundError,
    StoreError,
    fixed_item_not_found,
    transaction_not_found,
)

logger = logging.getLogger(__name__)


class SQLAlchemyDatabase(Database):
    """SQLAlchemy-based implementation of Database interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy database.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    @contextmanager
    def _unit_of_work(self, action: str) -> Iterator[Session]:
        """Run one store operation, rolling back and wrapping any store failure."""
        session = self._get_session()
        try:
            yield session
        except SQLAlchemyError as e:
            session.rollback()
            logger.error("Store operation failed (%s): %s", action, e)
            raise StoreError(f"Could not {action}: {e}") from e

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        logger.debug("Using database %s", self.database_url)

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    # Account operations
    def create_account(
        self, name: str, institution: Optional[str] = None, account_type: AccountType = AccountType.OTHER
    ) -> int:
        """Create a new account. Returns account ID."""
        with self._unit_of_work(f"create account '{name}'") as session:
            account = Account(name=name, institution=institution, type=AccountType.parse(account_type).value)
            session.add(account)
            session.commit()
            logger.info("Created account '%s' (ID: %s)", name, account.id)
            return account.id

    def get_account(self, account_id: int) -> Optional[DomainAccount]:
        """Get account by ID."""
        with self._unit_of_work("read account") as session:
            account = session.query(Account).filter(Account.id == account_id).first()
            if account is None:
                return None
            return account_to_domain(account)

    def get_account_by_name(self, name: str) -> Optional[DomainAccount]:
        """Get account by its unique name."""
        with self._unit_of_work("read account") as session:
            account = session.query(Account).filter(Account.name == name).first()
            if account is None:
                return None
            return account_to_domain(account)

    def list_accounts(self) -> list[DomainAccount]:
        """List all accounts."""
        with self._unit_of_work("list accounts") as session:
            accounts = session.query(Account).order_by(Account.name).all()
            return [account_to_domain(acc) for acc in accounts]

    # Category operations
    def create_category(
        self, name: str, kind: TransactionKind = TransactionKind.EXPENSE, is_fixed: bool = False
    ) -> int:
        """Create a category. Returns category ID."""
        with self._unit_of_work(f"create category '{name}'") as session:
            category = Category(name=name, kind=TransactionKind.parse(kind).value, is_fixed=is_fixed)
            session.add(category)
            session.commit()
            logger.info("Created category '%s' (ID: %s)", name, category.id)
            return category.id

    def get_category(self, category_id: int) -> Optional[DomainCategory]:
        """Get category by ID."""
        with self._unit_of_work("read category") as session:
            cat = session.query(Category).filter(Category.id == category_id).first()
            if cat is None:
                return None
            return category_to_domain(cat)

    def get_category_by_name(self, name: str) -> Optional[DomainCategory]:
        """Get category by its unique name."""
        with self._unit_of_work("read category") as session:
            cat = session.query(Category).filter(Category.name == name).first()
            if cat is None:
                return None
            return category_to_domain(cat)

    def list_categories(self, kind: Optional[TransactionKind] = None) -> list[DomainCategory]:
        """List categories ordered by name, optionally filtered by kind."""
        with self._unit_of_work("list categories") as session:
            query = session.query(Category)
            if kind is not None:
                query = query.filter(Category.kind == TransactionKind.parse(kind).value)
            categories = query.order_by(Category.name).all()
            return [category_to_domain(cat) for cat in categories]

    def update_category(self, category_id: int, kind: TransactionKind, is_fixed: bool) -> None:
        """Update the kind and fixed flag of a category."""
        with self._unit_of_work(f"update category {category_id}") as session:
            category = session.query(Category).filter(Category.id == category_id).first()
            if category is None:
                raise NotFoundError(f"Category {category_id} not found")
            category.kind = TransactionKind.parse(kind).value
            category.is_fixed = is_fixed
            session.commit()
            logger.info("Updated category '%s' (kind=%s, fixed=%s)", category.name, category.kind, is_fixed)

    # Transaction operations
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
        draft = TransactionDraft(
            date=date,
            description=description,
            amount=amount,
            kind=kind,
            account_id=account_id,
            category_id=category_id,
            note=note,
        )
        return self.create_transactions([draft])[0]

    def create_transactions(self, drafts: Sequence[TransactionDraft]) -> list[int]:
        """Create several transactions in one unit of work."""
        with self._unit_of_work(f"create {len(drafts)} transaction(s)") as session:
            transactions = [
                Transaction(
                    date=draft.date,
                    description=draft.description,
                    amount=draft.amount,
                    kind=TransactionKind.parse(draft.kind).value,
                    account_id=draft.account_id,
                    category_id=draft.category_id,
                    note=draft.note,
                )
                for draft in drafts
            ]
            session.add_all(transactions)
            session.commit()
            ids = [txn.id for txn in transactions]
            logger.info("Created %d transaction(s): %s", len(ids), ids)
            return ids

    def get_transaction(self, transaction_id: int) -> Optional[DomainTransaction]:
        """Get transaction by ID."""
        with self._unit_of_work("read transaction") as session:
            txn = session.query(Transaction).filter(Transaction.id == transaction_id).first()
            if txn is None:
                return None
            return transaction_to_domain(txn)

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
        with self._unit_of_work(f"update transaction {transaction_id}") as session:
            transaction = session.query(Transaction).filter(Transaction.id == transaction_id).first()
            if transaction is None:
                raise NotFoundError(transaction_not_found(transaction_id))

            transaction.date = date
            transaction.description = description
            transaction.amount = amount
            transaction.kind = TransactionKind.parse(kind).value
            transaction.account_id = account_id
            transaction.category_id = category_id
            session.commit()
            logger.info("Updated transaction %s", transaction_id)

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction."""
        with self._unit_of_work(f"delete transaction {transaction_id}") as session:
            transaction = session.query(Transaction).filter(Transaction.id == transaction_id).first()
            if transaction is None:
                raise NotFoundError(transaction_not_found(transaction_id))
            session.delete(transaction)
            session.commit()
            logger.info("Deleted transaction %s", transaction_id)

    def list_transaction_details(
        self, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> list[TransactionDetail]:
        """List transactions joined with their account and category, newest first."""
        with self._unit_of_work("list transaction details") as session:
            query = (
                session.query(Transaction, Account, Category)
                .outerjoin(Account, Account.id == Transaction.account_id)
                .outerjoin(Category, Category.id == Transaction.category_id)
            )

            if start_date is not None:
                query = query.filter(Transaction.date >= start_date)
            if end_date is not None:
                query = query.filter(Transaction.date <= end_date)

            rows = query.order_by(Transaction.date.desc(), Transaction.id.desc()).all()
            logger.debug("Loaded %d transaction detail row(s) for %s..%s", len(rows), start_date, end_date)
            return [transaction_to_detail(txn, acc, cat) for txn, acc, cat in rows]

    # Fixed item operations
    def create_fixed_item(
        self, name: str, amount: Decimal, day: int, category_id: Optional[int] = None
    ) -> int:
        """Create a fixed item template. Returns template ID."""
        with self._unit_of_work(f"create fixed item '{name}'") as session:
            item = FixedItem(name=name, amount=amount, day=day, category_id=category_id)
            session.add(item)
            session.commit()
            logger.info("Created fixed item '%s' on day %s (ID: %s)", name, day, item.id)
            return item.id

    def get_fixed_item(self, item_id: int) -> Optional[DomainFixedItem]:
        """Get fixed item template by ID."""
        with self._unit_of_work("read fixed item") as session:
            item = session.query(FixedItem).filter(FixedItem.id == item_id).first()
            if item is None:
                return None
            return fixed_item_to_domain(item)

    def list_fixed_items(self) -> list[DomainFixedItem]:
        """List fixed item templates ordered by day of month."""
        with self._unit_of_work("list fixed items") as session:
            items = session.query(FixedItem).order_by(FixedItem.day, FixedItem.id).all()
            return [fixed_item_to_domain(item) for item in items]

    def delete_fixed_item(self, item_id: int) -> None:
        """Delete a fixed item template."""
        with self._unit_of_work(f"delete fixed item {item_id}") as session:
            item = session.query(FixedItem).filter(FixedItem.id == item_id).first()
            if item is None:
                raise NotFoundError(fixed_item_not_found(item_id))
            session.delete(item)
            session.commit()
            logger.info("Deleted fixed item %s", item_id)

    # Setting operations
    def get_setting(self, key: str) -> Optional[str]:
        """Get a setting value, or None if the key is absent."""
        with self._unit_of_work(f"read setting '{key}'") as session:
            setting = session.query(Setting).filter(Setting.key == key).first()
            if setting is None:
                return None
            return setting.value

    def set_setting(self, key: str, value: str) -> None:
        """Insert or update a setting."""
        with self._unit_of_work(f"save setting '{key}'") as session:
            setting = session.query(Setting).filter(Setting.key == key).first()
            if setting is None:
                session.add(Setting(key=key, value=value))
            else:
                setting.value = value
            session.commit()
            logger.info("Saved setting '%s'", key)
