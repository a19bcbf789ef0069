"""Shared pytest fixtures for budgetbook tests."""

import tempfile
import os
import pytest

from budgetbook.database.factories import create_sqlite_database
from budgetbook.domain.account import AccountService
from budgetbook.domain.bootstrap import initialize_store
from budgetbook.domain.budget import BudgetService
from budgetbook.domain.category import CategoryService
from budgetbook.domain.fixed_item import FixedItemService
from budgetbook.domain.settings import SettingsService
from budgetbook.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def account_id(temp_db):
    """Bootstrap the store and return the default account ID."""
    return initialize_store(temp_db)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def settings_service(temp_db):
    """Create a SettingsService with a temporary database."""
    return SettingsService(temp_db)


@pytest.fixture
def transaction_service(temp_db, account_id):
    """Create a TransactionService bound to the default account."""
    return TransactionService(temp_db, account_id)


@pytest.fixture
def fixed_item_service(temp_db, account_id):
    """Create a FixedItemService bound to the default account."""
    return FixedItemService(temp_db, account_id)


@pytest.fixture
def budget_service(temp_db, account_id):
    """Create a BudgetService over a bootstrapped store."""
    return BudgetService(temp_db)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
