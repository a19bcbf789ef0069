"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid user input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class StoreError(RuntimeError):
    """The record store failed to complete an operation.

    The failed unit of work has been rolled back, so callers can treat the
    stored state as unchanged and retry.
    """


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def fixed_item_not_found(item_id: int) -> str:
    """Return message for missing fixed item template."""
    return f"Fixed item {item_id} not found"


def duplicate_name(entity: str, name: str) -> str:
    """Return message for a uniqueness violation on a name column."""
    return f"{entity} with name '{name}' already exists"
