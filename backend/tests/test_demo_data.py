from decimal import Decimal

from finance_tracker.models import Category, Transaction, TransactionType
from finance_tracker.services import SummaryService, seed_demo_data

from conftest import make_category


def test_seed_inserts_sample_ledger(db):
    assert seed_demo_data(db) is True
    assert db.query(Category).count() == 15
    assert db.query(Transaction).count() == 13

    notebook = db.query(Transaction).filter(Transaction.description == "Notebook Novo").one()
    assert notebook.installments == 12
    assert notebook.monthly_amount == Decimal("300.00")

    totals = {
        row["category_name"]: row["total"]
        for row in SummaryService(db).totals_by_category(TransactionType.EXPENSE)
    }
    assert totals["Compras"] == Decimal("3850.00")
    assert totals["Alimentação"] == Decimal("400.00")


def test_seed_skips_non_empty_database(db):
    make_category(db, "Existing")
    assert seed_demo_data(db) is False
    assert db.query(Category).count() == 1
    assert db.query(Transaction).count() == 0
