from .errors import NotFoundError, ConflictError
from .category_service import CategoryService
from .transaction_service import TransactionService
from .summary_service import SummaryService, current_month_window
from .demo_data import seed_demo_data

__all__ = [
    "NotFoundError",
    "ConflictError",
    "CategoryService",
    "TransactionService",
    "SummaryService",
    "current_month_window",
    "seed_demo_data",
]
