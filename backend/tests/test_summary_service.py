from datetime import date
from decimal import Decimal

from finance_tracker.models import TransactionType
from finance_tracker.services import SummaryService, current_month_window

from conftest import make_transaction


def test_current_month_window():
    assert current_month_window(date(2026, 2, 17)) == (date(2026, 2, 1), date(2026, 2, 17))
    assert current_month_window(date(2026, 3, 1)) == (date(2026, 3, 1), date(2026, 3, 1))


def test_sum_by_type_and_period(db, sample_ledger):
    service = SummaryService(db)
    total = service.sum_by_type_and_period(
        TransactionType.EXPENSE, date(2026, 2, 1), date(2026, 2, 28)
    )
    assert total == Decimal("4039.90")


def test_sum_over_empty_period_is_none(db, sample_ledger):
    service = SummaryService(db)
    assert service.sum_by_type_and_period(
        TransactionType.EXPENSE, date(2020, 1, 1), date(2020, 1, 31)
    ) is None


def test_sum_recurring(db, sample_ledger):
    service = SummaryService(db)
    assert service.total_recurring_expenses() == Decimal("439.90")
    assert service.sum_recurring(TransactionType.INCOME) is None


def test_sum_by_essential(db, sample_ledger):
    service = SummaryService(db)
    assert service.total_essential_expenses() == Decimal("4000.00")
    assert service.total_discretionary_expenses() == Decimal("39.90")
    assert service.sum_by_essential(True, TransactionType.INCOME) == Decimal("5000.00")
    assert service.sum_by_essential(False, TransactionType.INCOME) is None


def test_totals_by_category_counts_full_installment_amount(db, sample_ledger):
    rows = SummaryService(db).totals_by_category(TransactionType.EXPENSE)
    assert rows == [
        {"category_name": "Alimentação", "total": Decimal("4000.00")},
        {"category_name": "Netflix", "total": Decimal("39.90")},
    ]


def test_totals_by_category_empty(db):
    assert SummaryService(db).totals_by_category(TransactionType.INCOME) == []


def test_monthly_totals_default_to_current_month(db, sample_ledger):
    today = date.today()
    make_transaction(db, sample_ledger["salary"], "Salário", "2000.00", today, TransactionType.INCOME)
    make_transaction(db, sample_ledger["food"], "Mercado", "350.25", today)

    service = SummaryService(db)
    assert service.total_income() == Decimal("2000.00")
    assert service.total_expenses() == Decimal("350.25")

    summary = service.monthly_balance()
    assert summary["start"] == today.replace(day=1)
    assert summary["end"] == today
    assert summary["balance"] == Decimal("1649.75")


def test_balance_with_missing_side_counts_as_zero(db, sample_ledger):
    service = SummaryService(db)
    summary = service.monthly_balance(date(2026, 2, 6), date(2026, 2, 28))
    assert summary["income"] is None
    assert summary["expenses"] == Decimal("439.90")
    assert summary["balance"] == Decimal("-439.90")

    empty = service.monthly_balance(date(2019, 1, 1), date(2019, 1, 31))
    assert empty["balance"] == Decimal("0.00")


def test_resolve_window_defaults():
    today = date.today()
    assert SummaryService.resolve_window(None, None) == (today.replace(day=1), today)
    assert SummaryService.resolve_window(None, date(2026, 1, 31)) == (date(2026, 1, 1), date(2026, 1, 31))
    assert SummaryService.resolve_window(date(2025, 12, 15), date(2026, 1, 31)) == (
        date(2025, 12, 15),
        date(2026, 1, 31),
    )


def test_end_only_window_covers_that_month(db, sample_ledger):
    service = SummaryService(db)
    assert service.total_expenses(end=date(2026, 2, 28)) == Decimal("4039.90")
    assert service.total_income(end=date(2026, 2, 28)) == Decimal("5000.00")
