import enum
from sqlalchemy import String, Integer, Boolean, Enum
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class CategoryType(enum.Enum):
    """Kind of money flow a category describes."""
    FIXED_INCOME = "FIXED_INCOME"
    VARIABLE_INCOME = "VARIABLE_INCOME"
    ESSENTIAL_EXPENSE = "ESSENTIAL_EXPENSE"
    DISCRETIONARY_EXPENSE = "DISCRETIONARY_EXPENSE"
    INVISIBLE_EXPENSE = "INVISIBLE_EXPENSE"
    INVESTMENT = "INVESTMENT"

    @property
    def label(self) -> str:
        return _CATEGORY_TYPE_LABELS[self]


_CATEGORY_TYPE_LABELS = {
    CategoryType.FIXED_INCOME: "Fixed income",
    CategoryType.VARIABLE_INCOME: "Variable income",
    CategoryType.ESSENTIAL_EXPENSE: "Essential expense",
    CategoryType.DISCRETIONARY_EXPENSE: "Discretionary expense",
    CategoryType.INVISIBLE_EXPENSE: "Invisible expense",
    CategoryType.INVESTMENT: "Investment",
}


class Category(Base, TimestampMixin):
    """
    Spending or income category for transactions.

    Names are unique, checked by CategoryService before insert/rename.
    Transactions point at their category; there is no back-reference list
    here, so a category's transactions are always fetched with a query.
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    essential: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    type: Mapped[CategoryType] = mapped_column(Enum(CategoryType), nullable=False)

    @property
    def type_label(self) -> str:
        return self.type.label

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name='{self.name}', type={self.type.name})>"
