from datetime import date, datetime
from decimal import Decimal
from pydantic import BaseModel, Field, field_validator, model_validator

from ..models.transaction import TransactionType
from .category import CategoryResponse


class TransactionBase(BaseModel):
    """Base transaction fields."""
    description: str = Field(min_length=1, max_length=255)
    amount: Decimal = Field(gt=0, max_digits=12, decimal_places=2)
    transaction_date: date
    type: TransactionType
    recurring: bool = False
    installments: int = Field(default=1, ge=1)
    current_installment: int = Field(default=1, ge=1)
    category_id: int
    notes: str | None = Field(default=None, max_length=500)

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("description must not be blank")
        return value


class TransactionCreate(TransactionBase):
    """Fields for creating a transaction."""

    @model_validator(mode="after")
    def installment_in_range(self):
        if self.current_installment > self.installments:
            raise ValueError("current_installment cannot exceed installments")
        return self


class TransactionUpdate(TransactionCreate):
    """Fields for replacing a transaction (PUT sends every field)."""
    pass


class TransactionResponse(TransactionBase):
    """Transaction response with all fields."""
    id: int
    category: CategoryResponse
    monthly_amount: Decimal  # Transaction.monthly_amount
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
