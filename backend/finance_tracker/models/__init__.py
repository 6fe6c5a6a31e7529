from .base import Base
from .category import Category, CategoryType
from .transaction import Transaction, TransactionType, cents_to_decimal, decimal_to_cents

__all__ = [
    "Base",
    "Category",
    "CategoryType",
    "Transaction",
    "TransactionType",
    "cents_to_decimal",
    "decimal_to_cents",
]
