import os
from datetime import date
from decimal import Decimal

import pytest

# Keep settings away from the real data directory during collection
os.environ.setdefault("FINANCE_DATABASE_URL", "sqlite://")
os.environ.pop("FINANCE_SEED_DEMO_DATA", None)

from fastapi.testclient import TestClient  # noqa: E402

from finance_tracker.database import open_database, close_database, get_session  # noqa: E402
from finance_tracker.main import app  # noqa: E402
from finance_tracker.models import Category, CategoryType, Transaction, TransactionType  # noqa: E402


@pytest.fixture()
def database():
    """A fresh in-memory database for each test."""
    open_database("sqlite://")
    yield
    close_database()


@pytest.fixture()
def db(database):
    session = get_session()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture()
def client(database):
    with TestClient(app) as c:
        yield c


def make_category(db, name, essential=True, type=CategoryType.ESSENTIAL_EXPENSE) -> Category:
    category = Category(name=name, essential=essential, type=type)
    db.add(category)
    db.flush()
    return category


def make_transaction(
    db,
    category,
    description="Entry",
    amount="10.00",
    transaction_date=date(2026, 2, 10),
    type=TransactionType.EXPENSE,
    recurring=False,
    installments=1,
) -> Transaction:
    transaction = Transaction(
        description=description,
        transaction_date=transaction_date,
        type=type,
        recurring=recurring,
        installments=installments,
        current_installment=1,
        category_id=category.id,
    )
    transaction.amount = Decimal(amount)
    db.add(transaction)
    db.flush()
    return transaction


@pytest.fixture()
def sample_ledger(db):
    """Salário (income), Alimentação (essential) and Netflix (non-essential)."""
    salary = make_category(db, "Salário", True, CategoryType.FIXED_INCOME)
    food = make_category(db, "Alimentação", True, CategoryType.ESSENTIAL_EXPENSE)
    netflix = make_category(db, "Netflix", False, CategoryType.DISCRETIONARY_EXPENSE)

    make_transaction(db, salary, "Salário Fevereiro", "5000.00", date(2026, 2, 5), TransactionType.INCOME)
    make_transaction(db, food, "Supermercado", "400.00", date(2026, 2, 10), recurring=True)
    make_transaction(db, food, "Notebook", "3600.00", date(2026, 2, 1), installments=12)
    make_transaction(db, netflix, "Netflix", "39.90", date(2026, 2, 10), recurring=True)

    return {"salary": salary, "food": food, "netflix": netflix}
