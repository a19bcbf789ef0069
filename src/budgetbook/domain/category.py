"""Category domain service."""

import logging
from typing import Optional
from budgetbook.database.base import Database
from budgetbook.domain.entities import Category, TransactionKind
from budgetbook.domain.errors import ConflictError, ValidationError, duplicate_name

logger = logging.getLogger(__name__)

# (name, kind, is_fixed)
DEFAULT_CATEGORIES = [
    ("Rent/Condo", TransactionKind.EXPENSE, True),
    ("Internet", TransactionKind.EXPENSE, True),
    ("Energy", TransactionKind.EXPENSE, True),
    ("Groceries", TransactionKind.EXPENSE, False),
    ("Transport", TransactionKind.EXPENSE, False),
    ("Leisure", TransactionKind.EXPENSE, False),
    ("Salary", TransactionKind.INCOME, False),
    ("Other", TransactionKind.EXPENSE, False),
]


class CategoryService:
    """Service for managing categories."""

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_category(
        self, name: str, kind: "str | TransactionKind" = TransactionKind.EXPENSE, is_fixed: bool = False
    ) -> int:
        """Create a category.

        Args:
            name: Unique category name
            kind: One of expense, income, transfer
            is_fixed: Whether the category is a recurring obligation

        Returns:
            Category ID

        Raises:
            ValidationError: If the name is empty or the kind is unknown
            ConflictError: If a category with this name already exists
        """
        name = _clean_name(name)
        kind = TransactionKind.parse(kind)
        if self.db.get_category_by_name(name) is not None:
            raise ConflictError(duplicate_name("Category", name))
        return self.db.create_category(name=name, kind=kind, is_fixed=is_fixed)

    def save_category(
        self, name: str, kind: "str | TransactionKind" = TransactionKind.EXPENSE, is_fixed: bool = False
    ) -> int:
        """Create a category or update the one with the same name.

        An existing category keeps its ID, so transactions already booked
        against it stay attached.

        Returns:
            Category ID
        """
        name = _clean_name(name)
        kind = TransactionKind.parse(kind)
        existing = self.db.get_category_by_name(name)
        if existing is None:
            return self.db.create_category(name=name, kind=kind, is_fixed=is_fixed)
        self.db.update_category(existing.id, kind=kind, is_fixed=is_fixed)
        return existing.id

    def seed_defaults(self) -> int:
        """Insert the default categories that are missing.

        Returns:
            Number of categories created
        """
        created = 0
        for name, kind, is_fixed in DEFAULT_CATEGORIES:
            if self.db.get_category_by_name(name) is None:
                self.db.create_category(name=name, kind=kind, is_fixed=is_fixed)
                created += 1
        if created:
            logger.info("Seeded %d default categories", created)
        return created

    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        return self.db.get_category(category_id)

    def get_category_by_name(self, name: Optional[str]) -> Optional[Category]:
        """Get category by name, or None when the name is empty or unknown."""
        if name is None or not name.strip():
            return None
        return self.db.get_category_by_name(name.strip())

    def resolve_category_id(self, name: Optional[str]) -> Optional[int]:
        """Resolve a category name to its ID, degrading to None on a miss."""
        category = self.get_category_by_name(name)
        if category is None:
            if name:
                logger.warning("Category '%s' not found, leaving transaction uncategorized", name)
            return None
        return category.id

    def list_categories(self, kind: "str | TransactionKind | None" = None) -> list[Category]:
        """List categories ordered by name.

        Args:
            kind: Optional kind to filter by

        Returns:
            List of category entities
        """
        if kind is not None:
            kind = TransactionKind.parse(kind)
        return self.db.list_categories(kind=kind)


def _clean_name(name: str) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationError("Category name is required")
    return name
