import logging
from sqlalchemy import func
from sqlalchemy.orm import Session

from ..models import Category, CategoryType, Transaction
from .errors import NotFoundError, ConflictError

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, db: Session):
        self.db = db

    def list_categories(self) -> list[Category]:
        return self.db.query(Category).order_by(Category.name).all()

    def get_category(self, category_id: int) -> Category:
        category = self.db.query(Category).filter(Category.id == category_id).first()
        if not category:
            logger.warning("Category %s not found", category_id)
            raise NotFoundError("Category", category_id)
        return category

    def find_by_name(self, name: str) -> Category | None:
        return self.db.query(Category).filter(Category.name == name).first()

    def name_exists(self, name: str) -> bool:
        return self.find_by_name(name) is not None

    def create_category(
        self,
        name: str,
        essential: bool,
        type: CategoryType,
    ) -> Category:
        if self.name_exists(name):
            logger.warning("Rejected duplicate category name %r", name)
            raise ConflictError(f"Category '{name}' already exists")

        category = Category(name=name, essential=essential, type=type)
        self.db.add(category)
        self.db.flush()
        self.db.refresh(category)
        logger.info("Created category %s (%s)", category.id, category.name)
        return category

    def update_category(
        self,
        category_id: int,
        name: str,
        essential: bool,
        type: CategoryType,
    ) -> Category:
        """Replace every field of an existing category."""
        category = self.get_category(category_id)

        existing = self.find_by_name(name)
        if existing is not None and existing.id != category_id:
            logger.warning("Rejected rename of category %s to %r", category_id, name)
            raise ConflictError(f"Category '{name}' already exists")

        category.name = name
        category.essential = essential
        category.type = type
        self.db.flush()
        self.db.refresh(category)
        logger.info("Updated category %s", category_id)
        return category

    def delete_category(self, category_id: int) -> None:
        """Delete a category together with the transactions that reference it."""
        category = self.get_category(category_id)

        removed = (
            self.db.query(Transaction)
            .filter(Transaction.category_id == category_id)
            .delete(synchronize_session=False)
        )
        self.db.flush()

        self.db.delete(category)
        self.db.flush()
        logger.info("Deleted category %s and %d transaction(s)", category_id, removed)

    def find_by_type(self, type: CategoryType) -> list[Category]:
        return (
            self.db.query(Category)
            .filter(Category.type == type)
            .order_by(Category.name)
            .all()
        )

    def find_by_types(self, types: list[CategoryType]) -> list[Category]:
        return (
            self.db.query(Category)
            .filter(Category.type.in_(types))
            .order_by(Category.name)
            .all()
        )

    def find_by_essential(self, essential: bool) -> list[Category]:
        return (
            self.db.query(Category)
            .filter(Category.essential == essential)
            .order_by(Category.name)
            .all()
        )

    def find_by_type_and_essential(
        self, type: CategoryType, essential: bool
    ) -> list[Category]:
        return (
            self.db.query(Category)
            .filter(Category.type == type, Category.essential == essential)
            .order_by(Category.name)
            .all()
        )

    def count_by_essential(self) -> dict[str, int]:
        """Count essential vs. non-essential categories."""
        rows = (
            self.db.query(Category.essential, func.count(Category.id))
            .group_by(Category.essential)
            .all()
        )
        counts = {bool(essential): int(total) for essential, total in rows}
        return {
            "essential": counts.get(True, 0),
            "non_essential": counts.get(False, 0),
        }

    # Fixed filters

    def fixed_income(self) -> list[Category]:
        return self.find_by_type(CategoryType.FIXED_INCOME)

    def variable_income(self) -> list[Category]:
        return self.find_by_type(CategoryType.VARIABLE_INCOME)

    def income_categories(self) -> list[Category]:
        return self.find_by_types([CategoryType.FIXED_INCOME, CategoryType.VARIABLE_INCOME])

    def essential_expenses(self) -> list[Category]:
        return self.find_by_type_and_essential(CategoryType.ESSENTIAL_EXPENSE, True)

    def discretionary_expenses(self) -> list[Category]:
        return self.find_by_type_and_essential(CategoryType.DISCRETIONARY_EXPENSE, False)

    def invisible_expenses(self) -> list[Category]:
        return self.find_by_type(CategoryType.INVISIBLE_EXPENSE)
