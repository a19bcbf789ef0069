"""Domain layer for budgetbook application."""

# Services are imported lazily: utils and database import domain.errors and
# domain.entities, and the services import both of them back.
_SERVICES = {
    "AccountService": "budgetbook.domain.account",
    "CategoryService": "budgetbook.domain.category",
    "TransactionService": "budgetbook.domain.transaction",
    "FixedItemService": "budgetbook.domain.fixed_item",
    "SettingsService": "budgetbook.domain.settings",
    "BudgetService": "budgetbook.domain.budget",
    "initialize_store": "budgetbook.domain.bootstrap",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        import importlib

        return getattr(importlib.import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
