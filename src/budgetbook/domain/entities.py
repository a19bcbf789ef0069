"""Domain model entities for budgetbook.

These are pure data classes representing business concepts, independent of
database schema. The store maps its rows into these so that the budget and
recurrence logic never touches ORM objects.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from budgetbook.domain.errors import ValidationError


class TransactionKind(str, Enum):
    """Kind of a transaction or category."""

    EXPENSE = "expense"
    INCOME = "income"
    TRANSFER = "transfer"

    @classmethod
    def parse(cls, value: "str | TransactionKind") -> "TransactionKind":
        """Convert a raw value to a kind, rejecting anything unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(kind.value for kind in cls)
            raise ValidationError(f"Unknown kind '{value}'. Expected one of: {choices}")

    def signed(self, amount: Decimal) -> Decimal:
        """Apply the sign convention: expenses negative, everything else positive."""
        if self is TransactionKind.EXPENSE:
            return -abs(amount)
        return abs(amount)


class AccountType(str, Enum):
    """Type of an account."""

    CHECKING = "checking"
    SAVINGS = "savings"
    CREDIT = "credit"
    CASH = "cash"
    OTHER = "other"

    @classmethod
    def parse(cls, value: "str | AccountType") -> "AccountType":
        """Convert a raw value to an account type, rejecting anything unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(kind.value for kind in cls)
            raise ValidationError(f"Unknown account type '{value}'. Expected one of: {choices}")


@dataclass(frozen=True)
class Account:
    """Account domain entity."""

    id: int
    name: str
    institution: Optional[str]
    type: AccountType


@dataclass(frozen=True)
class Category:
    """Category domain entity.

    ``is_fixed`` marks recurring obligations (rent, utilities) whose spend is
    reported separately from variable spend.
    """

    id: int
    name: str
    kind: TransactionKind
    is_fixed: bool


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: int
    date: date
    description: Optional[str]
    amount: Decimal
    kind: TransactionKind
    account_id: int
    category_id: Optional[int]
    note: Optional[str]


@dataclass(frozen=True)
class TransactionDraft:
    """A transaction that has not been stored yet."""

    date: date
    description: Optional[str]
    amount: Decimal
    kind: TransactionKind
    account_id: int
    category_id: Optional[int] = None
    note: Optional[str] = None


@dataclass(frozen=True)
class TransactionDetail:
    """Transaction joined with its account and category."""

    transaction: Transaction
    account_name: Optional[str]
    category_name: Optional[str]
    category_is_fixed: bool


@dataclass(frozen=True)
class FixedItem:
    """Recurring expense template, materialized monthly by the generator."""

    id: int
    name: str
    amount: Decimal
    day: int
    category_id: Optional[int]


@dataclass(frozen=True)
class MonthlySummary:
    """Budget summary for one calendar month.

    ``fixed_budget`` is the configured fixed monthly target (Y). The variable
    budget is what remains of income after Y, never below zero, while the
    variable remainder may go negative on overspend.
    """

    start: date
    end: date
    income: Decimal
    expense: Decimal
    savings: Decimal
    fixed_budget: Decimal
    fixed_spent: Decimal
    variable_spent: Decimal
    variable_budget: Decimal
    variable_remaining: Decimal
