import logging
from datetime import date
from decimal import Decimal
from sqlalchemy.orm import Session

from ..models import Transaction, TransactionType, Category
from .errors import NotFoundError

logger = logging.getLogger(__name__)


class TransactionService:
    def __init__(self, db: Session):
        self.db = db

    def _base_query(
        self,
        type: TransactionType | None = None,
        recurring: bool | None = None,
        category_id: int | None = None,
        start: date | None = None,
        end: date | None = None,
    ):
        query = self.db.query(Transaction)

        if type is not None:
            query = query.filter(Transaction.type == type)
        if recurring is not None:
            query = query.filter(Transaction.recurring == recurring)
        if category_id is not None:
            query = query.filter(Transaction.category_id == category_id)
        if start is not None:
            query = query.filter(Transaction.transaction_date >= start)
        if end is not None:
            query = query.filter(Transaction.transaction_date <= end)

        return query

    def list_transactions(
        self,
        type: TransactionType | None = None,
        recurring: bool | None = None,
        category_id: int | None = None,
        start: date | None = None,
        end: date | None = None,
    ) -> list[Transaction]:
        """All transactions, optionally narrowed by any combination of filters."""
        query = self._base_query(
            type=type,
            recurring=recurring,
            category_id=category_id,
            start=start,
            end=end,
        )
        return query.order_by(Transaction.transaction_date, Transaction.id).all()

    def get_transaction(self, transaction_id: int) -> Transaction:
        transaction = (
            self.db.query(Transaction).filter(Transaction.id == transaction_id).first()
        )
        if not transaction:
            logger.warning("Transaction %s not found", transaction_id)
            raise NotFoundError("Transaction", transaction_id)
        return transaction

    def _require_category(self, category_id: int) -> Category:
        category = self.db.query(Category).filter(Category.id == category_id).first()
        if not category:
            logger.warning("Category %s not found for transaction", category_id)
            raise NotFoundError("Category", category_id)
        return category

    def create_transaction(
        self,
        description: str,
        amount: Decimal,
        transaction_date: date,
        type: TransactionType,
        category_id: int,
        recurring: bool = False,
        installments: int = 1,
        current_installment: int = 1,
        notes: str | None = None,
    ) -> Transaction:
        self._require_category(category_id)

        transaction = Transaction(
            description=description,
            transaction_date=transaction_date,
            type=type,
            category_id=category_id,
            recurring=recurring,
            installments=installments,
            current_installment=current_installment,
            notes=notes,
        )
        transaction.amount = amount
        self.db.add(transaction)
        self.db.flush()
        self.db.refresh(transaction)
        logger.info(
            "Created transaction %s (%s %s)",
            transaction.id, transaction.type.name, transaction.amount,
        )
        return transaction

    def update_transaction(
        self,
        transaction_id: int,
        description: str,
        amount: Decimal,
        transaction_date: date,
        type: TransactionType,
        category_id: int,
        recurring: bool = False,
        installments: int = 1,
        current_installment: int = 1,
        notes: str | None = None,
    ) -> Transaction:
        """Replace every field of an existing transaction."""
        transaction = self.get_transaction(transaction_id)
        self._require_category(category_id)

        transaction.description = description
        transaction.amount = amount
        transaction.transaction_date = transaction_date
        transaction.type = type
        transaction.category_id = category_id
        transaction.recurring = recurring
        transaction.installments = installments
        transaction.current_installment = current_installment
        transaction.notes = notes

        self.db.flush()
        self.db.refresh(transaction)
        logger.info("Updated transaction %s", transaction_id)
        return transaction

    def delete_transaction(self, transaction_id: int) -> None:
        transaction = self.get_transaction(transaction_id)
        self.db.delete(transaction)
        self.db.flush()
        logger.info("Deleted transaction %s", transaction_id)

    # Filters

    def find_by_type(self, type: TransactionType) -> list[Transaction]:
        return self.list_transactions(type=type)

    def expenses(self) -> list[Transaction]:
        return self.find_by_type(TransactionType.EXPENSE)

    def income(self) -> list[Transaction]:
        return self.find_by_type(TransactionType.INCOME)

    def find_by_recurring(self, recurring: bool) -> list[Transaction]:
        return self.list_transactions(recurring=recurring)

    def find_by_category(self, category_id: int) -> list[Transaction]:
        return self.list_transactions(category_id=category_id)

    def find_by_period(self, start: date, end: date) -> list[Transaction]:
        """Transactions dated within [start, end], both ends inclusive."""
        return self.list_transactions(start=start, end=end)

    def find_by_type_and_period(
        self, type: TransactionType, start: date, end: date
    ) -> list[Transaction]:
        return self.list_transactions(type=type, start=start, end=end)

    # Derived queries

    def recurring_expenses(self) -> list[Transaction]:
        """Recurring expenses, newest first."""
        return (
            self._base_query(type=TransactionType.EXPENSE, recurring=True)
            .order_by(Transaction.transaction_date.desc(), Transaction.id.desc())
            .all()
        )

    def discretionary_expenses(self) -> list[Transaction]:
        """Transactions in non-essential categories, largest first."""
        return (
            self.db.query(Transaction)
            .join(Category, Transaction.category_id == Category.id)
            .filter(Category.essential.is_(False))
            .order_by(Transaction.amount_cents.desc(), Transaction.id)
            .all()
        )

    def installment_expenses(self) -> list[Transaction]:
        """Transactions split into more than one installment, newest first."""
        return (
            self.db.query(Transaction)
            .filter(Transaction.installments > 1)
            .order_by(Transaction.transaction_date.desc(), Transaction.id.desc())
            .all()
        )
