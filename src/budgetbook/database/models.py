"""SQLAlchemy models for budgetbook database."""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Integer,
    String,
    ForeignKey,
    Date,
    Numeric,
    Boolean,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Account(Base):
    """Account model."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    institution = Column(String, nullable=True)
    type = Column(String, default="other", nullable=False)

    __table_args__ = (
        CheckConstraint(
            "type IN ('checking', 'savings', 'credit', 'cash', 'other')", name="ck_account_type"
        ),
    )

    # Relationships
    transactions = relationship("Transaction", back_populates="account")


class Category(Base):
    """Category model."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    kind = Column(String, default="expense", nullable=False)
    is_fixed = Column(Boolean, default=False, nullable=False)

    __table_args__ = (
        CheckConstraint("kind IN ('expense', 'income', 'transfer')", name="ck_category_kind"),
    )

    # Relationships
    transactions = relationship("Transaction", back_populates="category")
    fixed_items = relationship("FixedItem", back_populates="category")


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    date = Column(Date, nullable=False)
    description = Column(String, nullable=True)
    amount = Column(Numeric(10, 2), nullable=False)
    kind = Column(String, nullable=False)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)
    note = Column(String, nullable=True)

    __table_args__ = (
        CheckConstraint("kind IN ('expense', 'income', 'transfer')", name="ck_transaction_kind"),
    )

    # Relationships
    account = relationship("Account", back_populates="transactions")
    category = relationship("Category", back_populates="transactions")


class FixedItem(Base):
    """Fixed item template model."""

    __tablename__ = "fixed_items"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    day = Column(Integer, nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)

    # Relationships
    category = relationship("Category", back_populates="fixed_items")


class Setting(Base):
    """Key/value setting model."""

    __tablename__ = "settings"

    key = Column(String, primary_key=True)
    value = Column(String, nullable=True)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
