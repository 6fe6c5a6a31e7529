from datetime import date
from decimal import Decimal

import pytest

from finance_tracker.models import TransactionType
from finance_tracker.services import NotFoundError, TransactionService


def test_create_and_get(db, sample_ledger):
    service = TransactionService(db)
    created = service.create_transaction(
        description="Plano de Saúde",
        amount=Decimal("300.00"),
        transaction_date=date(2026, 2, 5),
        type=TransactionType.EXPENSE,
        category_id=sample_ledger["food"].id,
        recurring=True,
        notes="Mensal",
    )

    fetched = service.get_transaction(created.id)
    assert fetched.amount == Decimal("300.00")
    assert fetched.installments == 1
    assert fetched.current_installment == 1
    assert fetched.category.name == "Alimentação"
    assert fetched.notes == "Mensal"


def test_create_requires_existing_category(db):
    with pytest.raises(NotFoundError):
        TransactionService(db).create_transaction(
            description="Orphan",
            amount=Decimal("1.00"),
            transaction_date=date(2026, 2, 5),
            type=TransactionType.EXPENSE,
            category_id=123,
        )


def test_update_and_delete(db, sample_ledger):
    service = TransactionService(db)
    tx = service.find_by_category(sample_ledger["netflix"].id)[0]

    updated = service.update_transaction(
        tx.id,
        description="Netflix Premium",
        amount=Decimal("55.90"),
        transaction_date=date(2026, 3, 10),
        type=TransactionType.EXPENSE,
        category_id=sample_ledger["netflix"].id,
        recurring=True,
    )
    assert updated.description == "Netflix Premium"
    assert updated.amount == Decimal("55.90")

    service.delete_transaction(tx.id)
    with pytest.raises(NotFoundError):
        service.get_transaction(tx.id)


def test_missing_ids_raise(db):
    service = TransactionService(db)
    with pytest.raises(NotFoundError):
        service.get_transaction(1)
    with pytest.raises(NotFoundError):
        service.delete_transaction(1)


def test_type_and_flag_filters(db, sample_ledger):
    service = TransactionService(db)
    assert [t.description for t in service.income()] == ["Salário Fevereiro"]
    assert len(service.expenses()) == 3
    assert {t.description for t in service.find_by_recurring(True)} == {"Supermercado", "Netflix"}
    assert {t.description for t in service.find_by_category(sample_ledger["food"].id)} == {
        "Supermercado",
        "Notebook",
    }


def test_period_is_inclusive(db, sample_ledger):
    service = TransactionService(db)
    in_range = service.find_by_period(date(2026, 2, 5), date(2026, 2, 10))
    assert {t.description for t in in_range} == {"Salário Fevereiro", "Supermercado", "Netflix"}

    expenses = service.find_by_type_and_period(
        TransactionType.EXPENSE, date(2026, 2, 1), date(2026, 2, 5)
    )
    assert [t.description for t in expenses] == ["Notebook"]


def test_recurring_expenses_newest_first(db, sample_ledger):
    service = TransactionService(db)
    service.create_transaction(
        description="Aluguel",
        amount=Decimal("1500.00"),
        transaction_date=date(2026, 3, 1),
        type=TransactionType.EXPENSE,
        category_id=sample_ledger["food"].id,
        recurring=True,
    )
    service.create_transaction(
        description="Bonus",
        amount=Decimal("100.00"),
        transaction_date=date(2026, 3, 2),
        type=TransactionType.INCOME,
        category_id=sample_ledger["salary"].id,
        recurring=True,
    )

    dates = [t.transaction_date for t in service.recurring_expenses()]
    assert dates == sorted(dates, reverse=True)
    assert all(t.type is TransactionType.EXPENSE for t in service.recurring_expenses())
    assert len(dates) == 3


def test_discretionary_expenses_only_non_essential(db, sample_ledger):
    result = TransactionService(db).discretionary_expenses()
    assert [t.description for t in result] == ["Netflix"]


def test_installment_expenses(db, sample_ledger):
    result = TransactionService(db).installment_expenses()
    assert [t.description for t in result] == ["Notebook"]
    assert result[0].monthly_amount == Decimal("300.00")


def test_discretionary_expenses_ordered_by_amount(db, sample_ledger):
    service = TransactionService(db)
    for description, amount in (("Cinema", "5.00"), ("Viagem", "500.00"), ("Jantar", "50.00")):
        service.create_transaction(
            description=description,
            amount=Decimal(amount),
            transaction_date=date(2026, 2, 20),
            type=TransactionType.EXPENSE,
            category_id=sample_ledger["netflix"].id,
        )

    result = service.discretionary_expenses()
    assert [t.amount for t in result] == [
        Decimal("500.00"),
        Decimal("50.00"),
        Decimal("39.90"),
        Decimal("5.00"),
    ]


def test_installment_expenses_ordered_newest_first(db, sample_ledger):
    service = TransactionService(db)
    for description, posted in (("Geladeira", date(2026, 1, 15)), ("Celular", date(2026, 3, 5))):
        service.create_transaction(
            description=description,
            amount=Decimal("1200.00"),
            transaction_date=posted,
            type=TransactionType.EXPENSE,
            category_id=sample_ledger["food"].id,
            installments=6,
        )

    result = service.installment_expenses()
    assert [t.description for t in result] == ["Celular", "Notebook", "Geladeira"]
    assert [t.monthly_amount for t in result] == [
        Decimal("200.00"),
        Decimal("300.00"),
        Decimal("200.00"),
    ]
