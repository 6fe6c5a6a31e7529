from datetime import date
from decimal import Decimal
from pydantic import BaseModel


class SummaryTotal(BaseModel):
    """A single aggregate; null when no transactions matched."""
    total: Decimal | None


class PeriodTotal(SummaryTotal):
    start: date
    end: date


class CategoryTotal(BaseModel):
    category_name: str
    total: Decimal


class BalanceSummary(BaseModel):
    start: date
    end: date
    income: Decimal | None
    expenses: Decimal | None
    balance: Decimal
