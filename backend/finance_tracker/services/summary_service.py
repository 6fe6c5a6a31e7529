from datetime import date
from decimal import Decimal
from sqlalchemy.orm import Session
from sqlalchemy import func

from ..models import Transaction, TransactionType, Category, cents_to_decimal


def current_month_window(today: date | None = None) -> tuple[date, date]:
    """First day of the current month through today, inclusive."""
    today = today or date.today()
    return today.replace(day=1), today


class SummaryService:
    """
    Aggregate sums over the transaction store.

    Every sum over an empty set is None rather than zero, so callers can
    tell "nothing recorded" apart from a real zero total.
    """

    def __init__(self, db: Session):
        self.db = db

    def _sum(self, query) -> Decimal | None:
        return cents_to_decimal(query.scalar())

    def sum_by_type_and_period(
        self, type: TransactionType, start: date, end: date
    ) -> Decimal | None:
        query = self.db.query(func.sum(Transaction.amount_cents)).filter(
            Transaction.type == type,
            Transaction.transaction_date >= start,
            Transaction.transaction_date <= end,
        )
        return self._sum(query)

    def sum_recurring(self, type: TransactionType) -> Decimal | None:
        query = self.db.query(func.sum(Transaction.amount_cents)).filter(
            Transaction.type == type,
            Transaction.recurring.is_(True),
        )
        return self._sum(query)

    def sum_by_essential(
        self, essential: bool, type: TransactionType
    ) -> Decimal | None:
        query = (
            self.db.query(func.sum(Transaction.amount_cents))
            .select_from(Transaction)
            .join(Category, Transaction.category_id == Category.id)
            .filter(
                Category.essential == essential,
                Transaction.type == type,
            )
        )
        return self._sum(query)

    def totals_by_category(self, type: TransactionType) -> list[dict]:
        """
        Total amount per category name for one transaction type.

        Installment purchases count with their full amount. Rows are ordered
        by total, largest first.
        """
        total = func.sum(Transaction.amount_cents).label("total_cents")
        rows = (
            self.db.query(Category.name.label("category_name"), total)
            .select_from(Transaction)
            .join(Category, Transaction.category_id == Category.id)
            .filter(Transaction.type == type)
            .group_by(Category.name)
            .order_by(total.desc(), Category.name)
            .all()
        )

        return [
            {
                "category_name": row.category_name,
                "total": cents_to_decimal(row.total_cents),
            }
            for row in rows
        ]

    # Monthly helpers

    def total_expenses(
        self, start: date | None = None, end: date | None = None
    ) -> Decimal | None:
        """Expenses in [start, end]; defaults to the current month so far."""
        start, end = self.resolve_window(start, end)
        return self.sum_by_type_and_period(TransactionType.EXPENSE, start, end)

    def total_income(
        self, start: date | None = None, end: date | None = None
    ) -> Decimal | None:
        start, end = self.resolve_window(start, end)
        return self.sum_by_type_and_period(TransactionType.INCOME, start, end)

    def total_recurring_expenses(self) -> Decimal | None:
        return self.sum_recurring(TransactionType.EXPENSE)

    def total_essential_expenses(self) -> Decimal | None:
        return self.sum_by_essential(True, TransactionType.EXPENSE)

    def total_discretionary_expenses(self) -> Decimal | None:
        return self.sum_by_essential(False, TransactionType.EXPENSE)

    def monthly_balance(
        self, start: date | None = None, end: date | None = None
    ) -> dict:
        """Income minus expenses; a side with no transactions counts as zero."""
        start, end = self.resolve_window(start, end)
        income = self.total_income(start, end)
        expenses = self.total_expenses(start, end)
        balance = (income or Decimal("0.00")) - (expenses or Decimal("0.00"))
        return {
            "start": start,
            "end": end,
            "income": income,
            "expenses": expenses,
            "balance": balance,
        }

    @staticmethod
    def resolve_window(start: date | None, end: date | None) -> tuple[date, date]:
        """Fill in a missing bound: an end alone starts on the first of its month."""
        end = end or current_month_window()[1]
        return start or end.replace(day=1), end
