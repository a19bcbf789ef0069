"""Mapper functions to convert between domain models and SQLAlchemy models.

Enumerated columns are plain strings in the database; they become closed
enums here, so an unknown value stored by hand fails loudly on read.
"""

from decimal import Decimal
from typing import Optional

from budgetbook.domain import entities as domain
from budgetbook.database.models import (
    Account as ORMAccount,
    Category as ORMCategory,
    Transaction as ORMTransaction,
    FixedItem as ORMFixedItem,
)


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        name=orm_account.name,
        institution=orm_account.institution,
        type=domain.AccountType.parse(orm_account.type),
    )


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
        kind=domain.TransactionKind.parse(orm_category.kind),
        is_fixed=bool(orm_category.is_fixed),
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        date=orm_transaction.date,
        description=orm_transaction.description,
        amount=_to_decimal(orm_transaction.amount),
        kind=domain.TransactionKind.parse(orm_transaction.kind),
        account_id=orm_transaction.account_id,
        category_id=orm_transaction.category_id,
        note=orm_transaction.note,
    )


def transaction_to_detail(
    orm_transaction: ORMTransaction,
    orm_account: Optional[ORMAccount],
    orm_category: Optional[ORMCategory],
) -> domain.TransactionDetail:
    """Convert a transaction row and its joined rows to a TransactionDetail."""
    return domain.TransactionDetail(
        transaction=transaction_to_domain(orm_transaction),
        account_name=orm_account.name if orm_account is not None else None,
        category_name=orm_category.name if orm_category is not None else None,
        category_is_fixed=bool(orm_category.is_fixed) if orm_category is not None else False,
    )


def fixed_item_to_domain(orm_item: ORMFixedItem) -> domain.FixedItem:
    """Convert SQLAlchemy FixedItem model to domain FixedItem entity."""
    return domain.FixedItem(
        id=orm_item.id,
        name=orm_item.name,
        amount=_to_decimal(orm_item.amount),
        day=orm_item.day,
        category_id=orm_item.category_id,
    )


def _to_decimal(value) -> Decimal:
    # Unflushed ORM objects may still hold the value they were built with
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))
