from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..models import TransactionType
from ..schemas import SummaryTotal, PeriodTotal, CategoryTotal, BalanceSummary
from ..services.summary_service import SummaryService

router = APIRouter()


def _window(service: SummaryService, start: date | None, end: date | None) -> tuple[date, date]:
    start, end = service.resolve_window(start, end)
    if start > end:
        raise HTTPException(status_code=422, detail="start must be on or before end")
    return start, end


@router.get("/expenses", response_model=PeriodTotal)
def total_expenses(
    start: date | None = Query(None),
    end: date | None = Query(None),
    db: Session = Depends(get_db),
):
    """Total expenses in the window (default: current month to date)."""
    service = SummaryService(db)
    start, end = _window(service, start, end)
    return PeriodTotal(start=start, end=end, total=service.total_expenses(start, end))


@router.get("/income", response_model=PeriodTotal)
def total_income(
    start: date | None = Query(None),
    end: date | None = Query(None),
    db: Session = Depends(get_db),
):
    """Total income in the window (default: current month to date)."""
    service = SummaryService(db)
    start, end = _window(service, start, end)
    return PeriodTotal(start=start, end=end, total=service.total_income(start, end))


@router.get("/recurring", response_model=SummaryTotal)
def total_recurring(db: Session = Depends(get_db)):
    return SummaryTotal(total=SummaryService(db).total_recurring_expenses())


@router.get("/essential", response_model=SummaryTotal)
def total_essential(db: Session = Depends(get_db)):
    return SummaryTotal(total=SummaryService(db).total_essential_expenses())


@router.get("/discretionary", response_model=SummaryTotal)
def total_discretionary(db: Session = Depends(get_db)):
    return SummaryTotal(total=SummaryService(db).total_discretionary_expenses())


@router.get("/balance", response_model=BalanceSummary)
def balance(
    start: date | None = Query(None),
    end: date | None = Query(None),
    db: Session = Depends(get_db),
):
    """Income minus expenses for the window (default: current month to date)."""
    service = SummaryService(db)
    start, end = _window(service, start, end)
    return BalanceSummary(**service.monthly_balance(start, end))


@router.get("/by-category", response_model=list[CategoryTotal])
def totals_by_category(
    type: TransactionType = Query(...),
    db: Session = Depends(get_db),
):
    service = SummaryService(db)
    return [
        CategoryTotal(**row)
        for row in service.totals_by_category(type)
    ]
