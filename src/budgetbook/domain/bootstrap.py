"""First-launch initialization of the record store."""

from budgetbook.database.base import Database
from budgetbook.domain.account import AccountService
from budgetbook.domain.category import CategoryService


def initialize_store(db: Database) -> int:
    """Create the default account and seed categories if they are missing.

    Safe to run on every start.

    Returns:
        ID of the default account
    """
    account_id = AccountService(db).ensure_default_account()
    CategoryService(db).seed_defaults()
    return account_id
