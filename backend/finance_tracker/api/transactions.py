from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..models import TransactionType
from ..schemas import (
    TransactionCreate,
    TransactionUpdate,
    TransactionResponse,
)
from ..services.transaction_service import TransactionService

router = APIRouter()


def _check_range(start: date | None, end: date | None) -> None:
    if start and end and start > end:
        raise HTTPException(status_code=422, detail="start must be on or before end")


@router.get("/", response_model=list[TransactionResponse])
def list_transactions(
    type: TransactionType | None = Query(None),
    recurring: bool | None = Query(None),
    category_id: int | None = Query(None),
    start: date | None = Query(None),
    end: date | None = Query(None),
    db: Session = Depends(get_db)
):
    """
    Get transactions with optional filters.

    Filters combine; start/end bound the date range inclusively.
    """
    _check_range(start, end)
    return TransactionService(db).list_transactions(
        type=type,
        recurring=recurring,
        category_id=category_id,
        start=start,
        end=end,
    )


@router.post("/", response_model=TransactionResponse, status_code=201)
def create_transaction(transaction: TransactionCreate, db: Session = Depends(get_db)):
    """Create a new transaction."""
    return TransactionService(db).create_transaction(**transaction.model_dump())


@router.get("/expenses", response_model=list[TransactionResponse])
def list_expenses(db: Session = Depends(get_db)):
    return TransactionService(db).expenses()


@router.get("/income", response_model=list[TransactionResponse])
def list_income(db: Session = Depends(get_db)):
    return TransactionService(db).income()


@router.get("/recurring", response_model=list[TransactionResponse])
def list_recurring_expenses(db: Session = Depends(get_db)):
    """Recurring expenses, newest first."""
    return TransactionService(db).recurring_expenses()


@router.get("/discretionary", response_model=list[TransactionResponse])
def list_discretionary(db: Session = Depends(get_db)):
    """Transactions in non-essential categories, largest amount first."""
    return TransactionService(db).discretionary_expenses()


@router.get("/installments", response_model=list[TransactionResponse])
def list_installments(db: Session = Depends(get_db)):
    """Transactions split into installments, newest first."""
    return TransactionService(db).installment_expenses()


@router.get("/period", response_model=list[TransactionResponse])
def list_by_period(
    start: date = Query(...),
    end: date = Query(...),
    type: TransactionType | None = Query(None),
    db: Session = Depends(get_db)
):
    """Transactions dated within [start, end], optionally of one type."""
    _check_range(start, end)
    service = TransactionService(db)
    if type is not None:
        return service.find_by_type_and_period(type, start, end)
    return service.find_by_period(start, end)


@router.get("/category/{category_id}", response_model=list[TransactionResponse])
def list_by_category(category_id: int, db: Session = Depends(get_db)):
    return TransactionService(db).find_by_category(category_id)


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(transaction_id: int, db: Session = Depends(get_db)):
    """Get a single transaction by ID."""
    return TransactionService(db).get_transaction(transaction_id)


@router.put("/{transaction_id}", response_model=TransactionResponse)
def update_transaction(
    transaction_id: int,
    transaction: TransactionUpdate,
    db: Session = Depends(get_db)
):
    """Replace a transaction."""
    return TransactionService(db).update_transaction(
        transaction_id, **transaction.model_dump()
    )


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(transaction_id: int, db: Session = Depends(get_db)):
    """Delete a transaction."""
    TransactionService(db).delete_transaction(transaction_id)
    return None
