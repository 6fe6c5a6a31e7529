from .transaction import (
    TransactionCreate,
    TransactionUpdate,
    TransactionResponse,
)
from .category import CategoryCreate, CategoryUpdate, CategoryResponse, EssentialCount
from .report import SummaryTotal, PeriodTotal, CategoryTotal, BalanceSummary

__all__ = [
    "TransactionCreate",
    "TransactionUpdate",
    "TransactionResponse",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "EssentialCount",
    "SummaryTotal",
    "PeriodTotal",
    "CategoryTotal",
    "BalanceSummary",
]
